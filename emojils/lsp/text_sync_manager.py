"""
Text Synchronization Manager

Keeps the document store up to date from LSP text sync notifications and
provides hook extension points for capabilities that want to react to
document lifecycle events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    LogMessageParams,
    MessageType,
    PublishDiagnosticsParams,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
)

if TYPE_CHECKING:
    from emojils.lsp.emoji_language_server import EmojiLanguageServer


# Type aliases for hook signatures
OnOpenHook = Callable[[DidOpenTextDocumentParams], Awaitable[None]]
OnChangeHook = Callable[[DidChangeTextDocumentParams], Awaitable[None]]


class TextSyncManager:
    """
    Manages text document synchronization and hook broadcasting.

    Design Principles:
    - Text sync is infrastructure, NOT a capability
    - The document store is updated before hooks run
    - Errors are isolated (one hook failure doesn't affect others)
    - Hooks run in registration order

    The built-in capabilities read the document store on demand and register
    no hooks; the hooks are the extension point for capabilities that need
    to react to edits (e.g. caching per-document state).

    Usage:
        text_sync = TextSyncManager(server)
        text_sync.register_handlers()
        server.text_sync_manager = text_sync
    """

    def __init__(self, server: EmojiLanguageServer) -> None:
        self.server = server

        self._on_open_hooks: list[OnOpenHook] = []
        self._on_change_hooks: list[OnChangeHook] = []

    def add_on_open_hook(self, hook: OnOpenHook) -> None:
        """
        Register a hook for document open events.

        Args:
            hook: Async function taking DidOpenTextDocumentParams
        """
        self._on_open_hooks.append(hook)

    def add_on_change_hook(self, hook: OnChangeHook) -> None:
        """
        Register a hook for document change events.

        The hook will be called on EVERY keystroke. Keep it fast.

        Args:
            hook: Async function taking DidChangeTextDocumentParams
        """
        self._on_change_hooks.append(hook)

    async def _broadcast(self, event: str, hooks: list, params) -> None:
        for hook in hooks:
            try:
                await hook(params)
            except Exception as e:
                self.server.window_log_message(
                    LogMessageParams(
                        type=MessageType.Error,
                        message=f"Error in {event} hook {hook.__name__}: "
                                f"{type(e).__name__}: {e}"
                    )
                )

    async def _broadcast_on_open(self, params: DidOpenTextDocumentParams) -> None:
        await self._broadcast("on_open", self._on_open_hooks, params)

    async def _broadcast_on_change(self, params: DidChangeTextDocumentParams) -> None:
        await self._broadcast("on_change", self._on_change_hooks, params)

    async def did_open(self, params: DidOpenTextDocumentParams) -> None:
        """Store the opened document, then run open hooks."""
        document = params.text_document
        self.server.document_store.open(document.uri, document.text)

        self.server.window_log_message(
            LogMessageParams(
                type=MessageType.Info,
                message=f"Document opened: {document.uri}"
            )
        )
        await self._broadcast_on_open(params)

    async def did_change(self, params: DidChangeTextDocumentParams) -> None:
        """
        Overwrite the stored document and clear its diagnostics.

        The server computes no diagnostics, so an empty list is published
        for the changed document every time.
        """
        uri = params.text_document.uri
        self.server.document_store.change(uri, params.content_changes)

        self.server.window_log_message(
            LogMessageParams(
                type=MessageType.Info,
                message=f"Document changed: {uri}"
            )
        )
        self.server.text_document_publish_diagnostics(
            PublishDiagnosticsParams(uri=uri, diagnostics=[])
        )
        await self._broadcast_on_change(params)

    def register_handlers(self) -> None:
        """
        Register LSP text synchronization handlers with the server.

        Registers handlers for:
        - textDocument/didOpen
        - textDocument/didChange
        """

        @self.server.feature(TEXT_DOCUMENT_DID_OPEN)
        async def did_open(
            ls: EmojiLanguageServer,
            params: DidOpenTextDocumentParams,
        ) -> None:
            await self.did_open(params)

        @self.server.feature(TEXT_DOCUMENT_DID_CHANGE)
        async def did_change(
            ls: EmojiLanguageServer,
            params: DidChangeTextDocumentParams,
        ) -> None:
            await self.did_change(params)
