"""emojidex search client."""

from __future__ import annotations

from dataclasses import dataclass

from emojils.services.base import ServiceClient, ServiceResult, Success

SEARCH_URL = "https://www.emojidex.com/api/v1/search/emoji"

# Length of the "unicode" field for a single-codepoint emoji, e.g. "1f355".
# Compound emoji ("1f468-200d-1f373") are longer and are skipped.
SINGLE_CODEPOINT_LENGTH = 5


@dataclass
class Emoji:
    code: str
    moji: str
    unicode: str

    @property
    def is_single_codepoint(self) -> bool:
        return len(self.unicode) == SINGLE_CODEPOINT_LENGTH


class EmojidexClient(ServiceClient):
    """Searches emojidex for emoji whose code contains a substring."""

    service_name = "emoji"

    async def search(self, code_contains: str) -> ServiceResult[list[Emoji]]:
        result = await self._get_json(SEARCH_URL, params={"code_cont": code_contains})
        if not isinstance(result, Success):
            return result

        data = result.value
        items = data.get("emoji") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return self._failure("response has no 'emoji' list")

        emoji = []
        for item in items:
            # Entries without a glyph or code cannot be inserted
            if not isinstance(item, dict):
                continue
            code, moji, unicode = item.get("code"), item.get("moji"), item.get("unicode")
            if isinstance(code, str) and isinstance(moji, str) and isinstance(unicode, str):
                emoji.append(Emoji(code=code, moji=moji, unicode=unicode))

        return Success(emoji)
