from __future__ import annotations

import httpx
from pygls.lsp.server import LanguageServer
from lsprotocol.types import TextDocumentSyncKind

from emojils.config import Settings
from emojils.lsp.capabilities.capabilities import CapabilityManager
from emojils.lsp.document_store import DocumentStore
from emojils.lsp.text_sync_manager import TextSyncManager
from emojils.services.dictionary import ThesaurusClient
from emojils.services.emoji import EmojidexClient
from emojils.services.translate import YandexTranslateClient


class EmojiLanguageServer(LanguageServer):
    """
    Language Server with translation and emoji lookup state.

    Attributes:
        settings: Configuration read from the environment
        document_store: Latest text of every opened document
        capability_manager: Dispatches hover/completion to capabilities
        text_sync_manager: Handles didOpen/didChange
        translator, thesaurus, emojidex: Remote service clients
    """

    def __init__(self, name: str, version: str, settings: Settings | None = None):
        super().__init__(
            name, version, text_document_sync_kind=TextDocumentSyncKind.Full
        )

        self.settings = settings or Settings()
        self.document_store = DocumentStore()
        self.capability_manager: CapabilityManager | None = None
        self.text_sync_manager: TextSyncManager | None = None

        self._http_client: httpx.AsyncClient | None = None

        self.translator = YandexTranslateClient(
            self.get_http_client, self.settings.translate_api_key
        )
        self.thesaurus = ThesaurusClient(
            self.get_http_client, self.settings.dictionary_api_key
        )
        self.emojidex = EmojidexClient(self.get_http_client)

    def get_http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client shared by all service clients."""
        if self._http_client is None:
            if self.settings.http_timeout is None:
                self._http_client = httpx.AsyncClient()
            else:
                self._http_client = httpx.AsyncClient(
                    timeout=self.settings.http_timeout
                )
        return self._http_client

    async def close_http_client(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
