from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from personalink_core.errors import UpstreamContractViolation
from personalink_core.models import ExistingLinkRef, LinkCategory, RawSuggestion

if TYPE_CHECKING:
    from personalink_core.config import Settings

DEFAULT_BATCH_SIZE = 5

_SYSTEM_PROMPT = """\
You curate high-quality online resources for a personal links page.
Reply with a single JSON object of the form {"suggestedLinks": [...]} and nothing else.
Each item has: title, url (a working absolute http/https URL), author (optional),
description (one or two sentences), category, iconKeywords.
"""

_KIND_LINES = (
    "an open-source project repository; category 'project_repository'; iconKeywords 'code repository'",
    "a useful website, tool or reference site; category 'website'; iconKeywords 'website tool'",
    "a book with author and a reputable page for it; category 'book'; iconKeywords 'book reference'",
    "an educational YouTube video; category 'youtube_video'; iconKeywords 'youtube video'",
    "an educational YouTube playlist; category 'youtube_playlist'; iconKeywords 'youtube playlist'",
    "a course or learning platform; category 'learning'; iconKeywords 'learning course'",
)


class SuggestedLinkPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    url: str
    author: str | None = None
    description: str
    category: LinkCategory
    icon_keywords: str = Field(alias="iconKeywords")

    def to_raw(self) -> RawSuggestion:
        return RawSuggestion(
            title=self.title,
            url=self.url,
            author=self.author,
            description=self.description,
            category=self.category,
            icon_keywords=self.icon_keywords,
        )


class SuggestionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    suggested_links: list[SuggestedLinkPayload] = Field(alias="suggestedLinks")


class SuggestionSource(Protocol):
    def request_suggestions(self, existing: Sequence[ExistingLinkRef]) -> list[RawSuggestion]: ...


def build_suggestion_request(existing: Sequence[ExistingLinkRef]) -> dict[str, Any]:
    return {"existingLinks": [{"title": ref.title, "url": ref.url} for ref in existing]}


def build_suggestion_messages(
    existing: Sequence[ExistingLinkRef],
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> list[dict[str, str]]:
    kinds = _KIND_LINES[:batch_size]
    lines = [f"Suggest exactly {batch_size} new, diverse links, covering these kinds in order:"]
    lines.extend(f"{i}. {kind}" for i, kind in enumerate(kinds, start=1))
    lines.append("")
    lines.append("Do not suggest anything with a title or URL similar to these existing links:")
    request = build_suggestion_request(existing)
    if request["existingLinks"]:
        lines.extend(f"- {item['title']} <{item['url']}>" for item in request["existingLinks"])
    else:
        lines.append("(none yet)")
    return [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": "\n".join(lines)},
    ]


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        text = text.rsplit("```", 1)[0]
    return text.strip()


def _extract_message_json(payload: Any) -> Any:
    if not isinstance(payload, dict):
        raise UpstreamContractViolation("Suggestion service returned a non-object response.")
    choices = payload.get("choices") or []
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        raise UpstreamContractViolation("Suggestion service response is missing choices.")
    msg = choices[0].get("message") if isinstance(choices[0].get("message"), dict) else {}
    content = msg.get("content")
    if not isinstance(content, str) or not content.strip():
        raise UpstreamContractViolation("Suggestion service returned empty content.")
    try:
        return json.loads(_strip_code_fence(content))
    except json.JSONDecodeError as e:
        raise UpstreamContractViolation(f"Suggestion service returned invalid JSON: {e}") from e


def parse_suggestion_payload(
    payload: Any,
    *,
    expected_count: int | None = DEFAULT_BATCH_SIZE,
) -> list[RawSuggestion]:
    """
    Validates a `{"suggestedLinks": [...]}` object and unwraps it.

    Anything other than a well-formed, non-empty list of exactly `expected_count` items is
    rejected as a whole; nothing is padded or dropped here.
    """
    if payload is None:
        raise UpstreamContractViolation("Suggestion service returned no payload.")
    try:
        response = SuggestionResponse.model_validate(payload)
    except ValidationError as e:
        raise UpstreamContractViolation(f"Malformed suggestion payload: {e}") from e

    count = len(response.suggested_links)
    if count == 0:
        raise UpstreamContractViolation("Suggestion service returned zero links.")
    if expected_count is not None and count != expected_count:
        raise UpstreamContractViolation(
            f"Suggestion service returned {count} links, expected exactly {expected_count}."
        )
    return [item.to_raw() for item in response.suggested_links]


@dataclass(frozen=True)
class LinkSuggestionClient:
    """
    Asks an OpenAI-compatible `/v1/chat/completions` endpoint for new links.
    """

    base_url: str
    api_key: str | None = None
    model: str = "gpt-4o-mini"
    batch_size: int = DEFAULT_BATCH_SIZE
    timeout_s: float = 60.0
    temperature: float = 0.7
    transport: httpx.BaseTransport | None = None

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    def _chat_completion(self, messages: list[dict[str, str]]) -> Any:
        body = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }
        url = self.base_url.rstrip("/") + "/v1/chat/completions"
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                r = client.post(url, headers=self._headers(), json=body)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPError as e:
            raise UpstreamContractViolation(f"Suggestion service call failed: {e}") from e
        except ValueError as e:
            raise UpstreamContractViolation(f"Suggestion service returned non-JSON body: {e}") from e

    def request_suggestions(self, existing: Sequence[ExistingLinkRef]) -> list[RawSuggestion]:
        messages = build_suggestion_messages(existing, batch_size=self.batch_size)
        payload = _extract_message_json(self._chat_completion(messages))
        return parse_suggestion_payload(payload, expected_count=self.batch_size)


def suggestion_client_from_settings(settings: Settings) -> LinkSuggestionClient:
    api_key = settings.llm_api_key.get_secret_value() if settings.llm_api_key else None
    return LinkSuggestionClient(
        base_url=settings.llm_base_url,
        api_key=api_key,
        model=settings.llm_model,
        batch_size=settings.suggestion_batch_size,
        timeout_s=settings.llm_timeout_s,
    )
