from personalink_core.dedup import partition_candidates

from conftest import suggestion


def test_known_and_in_batch_duplicates_are_rejected() -> None:
    a, c1, c2, d = (
        suggestion("https://a.example"),
        suggestion("https://c.example", title="first c"),
        suggestion("https://c.example", title="second c"),
        suggestion("https://d.example"),
    )
    result = partition_candidates([a, c1, c2, d], {"https://a.example", "https://b.example"})

    assert result.admitted == [c1, d]
    assert result.rejected == [a, c2]


def test_admitted_preserves_input_order() -> None:
    urls = [f"https://site{i}.example" for i in (5, 1, 4, 1, 2, 5)]
    result = partition_candidates([suggestion(u) for u in urls], set())
    assert [c.url for c in result.admitted] == [
        "https://site5.example",
        "https://site1.example",
        "https://site4.example",
        "https://site2.example",
    ]


def test_known_urls_are_not_mutated() -> None:
    known = {"https://a.example"}
    partition_candidates([suggestion("https://b.example")], known)
    assert known == {"https://a.example"}


def test_url_match_is_exact_string() -> None:
    # Trailing slash, scheme and case are not folded, so these count as different links.
    result = partition_candidates(
        [
            suggestion("http://x.com/"),
            suggestion("https://x.com"),
            suggestion("http://X.com"),
        ],
        {"http://x.com"},
    )
    assert len(result.admitted) == 3
    assert result.rejected == []


def test_empty_batch() -> None:
    result = partition_candidates([], {"https://a.example"})
    assert result.admitted == []
    assert result.rejected == []
