"""Merriam-Webster thesaurus client."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from emojils.services.base import ServiceClient, ServiceResult, Success

THESAURUS_URL = "https://dictionaryapi.com/api/v3/references/thesaurus/json/"

# Only the first few senses are shown in a hover
MAX_ENTRIES = 3


@dataclass
class DictionaryEntry:
    """One sense of a word: part of speech and its short definitions."""

    part_of_speech: str
    short_definitions: list[str] = field(default_factory=list)


class ThesaurusClient(ServiceClient):
    service_name = "dictionary"

    def __init__(
        self, get_client: Callable[[], httpx.AsyncClient], api_key: str | None
    ) -> None:
        super().__init__(get_client)
        self.api_key = api_key

    async def lookup(
        self, word: str, limit: int = MAX_ENTRIES
    ) -> ServiceResult[list[DictionaryEntry]]:
        """
        Look up word and return at most limit entries.

        For an unknown word the API returns a list of spelling suggestions
        (plain strings) instead of entries. That is reported as a failure.
        """
        if not self.api_key:
            return self._failure("API key is not configured")

        result = await self._get_json(
            THESAURUS_URL + quote(word, safe=""), params={"key": self.api_key}
        )
        if not isinstance(result, Success):
            return result

        data = result.value
        if not isinstance(data, list):
            return self._failure("response is not a list")

        entries = []
        for item in data[:limit]:
            if not isinstance(item, dict):
                return self._failure(f"no entry for {word!r}")
            part_of_speech = item.get("fl")
            short_definitions = item.get("shortdef")
            if not isinstance(part_of_speech, str) or not isinstance(
                short_definitions, list
            ):
                return self._failure(f"malformed entry for {word!r}")
            entries.append(
                DictionaryEntry(
                    part_of_speech=part_of_speech,
                    short_definitions=[str(d) for d in short_definitions],
                )
            )

        return Success(entries)
