from __future__ import annotations

from personalink_core.models import IconTag

# Evaluated top to bottom; more specific terms come before general ones
# ("playlist" before "video").
_ICON_RULES: tuple[tuple[tuple[str, ...], IconTag], ...] = (
    (("playlist",), IconTag.PLAYLIST),
    (("video",), IconTag.VIDEO),
    (("code", "repository", "github"), IconTag.REPOSITORY),
    (("book",), IconTag.BOOK),
    (("learn", "education", "course"), IconTag.COURSE),
    (("tool", "utility"), IconTag.WEBSITE),
    (("web", "site"), IconTag.WEBSITE),
    (("circuit", "electronic"), IconTag.CIRCUIT),
    (("ai", "assistant"), IconTag.ASSISTANT),
)


def classify_icon(hint: str | None) -> IconTag:
    """
    Maps free-text keyword hints (e.g. "youtube playlist", "code repository") to an icon tag.

    No hint (None or "") yields `IconTag.UNCLASSIFIED`; any other hint that matches no rule,
    whitespace included, yields `IconTag.LINK`.
    """
    if not hint:
        return IconTag.UNCLASSIFIED
    text = hint.lower()
    for needles, tag in _ICON_RULES:
        if any(needle in text for needle in needles):
            return tag
    return IconTag.LINK
