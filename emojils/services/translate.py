"""Yandex machine translation client."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from emojils.services.base import ServiceClient, ServiceResult, Success

TRANSLATE_URL = "https://translate.yandex.net/api/v1.5/tr.json/translate"


class YandexTranslateClient(ServiceClient):
    """Translates single words through the Yandex Translate v1.5 API."""

    service_name = "translate"

    def __init__(
        self, get_client: Callable[[], httpx.AsyncClient], api_key: str | None
    ) -> None:
        super().__init__(get_client)
        self.api_key = api_key

    async def translate(self, text: str, lang: str) -> ServiceResult[str]:
        """
        Translate text into lang.

        The service answers {"code": 200, "text": ["..."]}; the pieces are
        joined with spaces.
        """
        if not self.api_key:
            return self._failure("API key is not configured")

        result = await self._get_json(
            TRANSLATE_URL, params={"key": self.api_key, "text": text, "lang": lang}
        )
        if not isinstance(result, Success):
            return result

        data = result.value
        pieces = data.get("text") if isinstance(data, dict) else None
        if not isinstance(pieces, list) or not all(isinstance(p, str) for p in pieces):
            return self._failure("response has no 'text' list")

        return Success(" ".join(pieces))
