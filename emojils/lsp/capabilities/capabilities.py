"""
LSP Capabilities Manager

This module manages LSP feature handlers (completion, hover) using a
plugin architecture.

Design Principles:
1. Plugin-based (add capabilities without modifying core)
2. Type-safe (abstract base class)
3. Composable (multiple handlers for same feature)
4. Never fails a request (capability errors are logged and skipped)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lsprotocol.types import (
    CompletionItem,
    CompletionList,
    CompletionParams,
    Hover,
    HoverParams,
    LogMessageParams,
    MessageType,
)


if TYPE_CHECKING:
    from emojils.lsp.emoji_language_server import EmojiLanguageServer


class Capability(ABC):
    """
    Base class for all LSP capability handlers.

    Each capability can handle one or more LSP features (completion, hover)
    and decides whether it can handle a specific request based on context.
    """

    def __init__(self, server: EmojiLanguageServer) -> None:
        self.server = server
        self.document_store = server.document_store

    def register(self) -> None:
        """
        Hook into the server during initialization.

        Override to register text sync hooks or extra features.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this capability."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this capability does."""
        pass

    @abstractmethod
    async def can_handle(self, params) -> bool:
        """Check if the capability can handle the request."""
        pass

    def log(self, message: str, type: MessageType = MessageType.Info) -> None:
        self.server.window_log_message(
            LogMessageParams(type=type, message=f"[{self.name}] {message}")
        )


class CompletionCapability(Capability):
    """Base class for completion capabilities."""

    @abstractmethod
    async def can_handle(self, params: CompletionParams) -> bool:
        pass

    @abstractmethod
    async def complete(self, params: CompletionParams) -> CompletionList:
        """
        Provide completion items.

        Only called if can_handle() returns True.
        """
        pass

    async def resolve(self, item: CompletionItem) -> CompletionItem:
        """
        Resolve a completion item with extra details.

        By default, returns the item unchanged.
        """
        return item


class HoverCapability(Capability):
    """Base class for hover capabilities."""

    @abstractmethod
    async def can_handle(self, params: HoverParams) -> bool:
        pass

    @abstractmethod
    async def hover(self, params: HoverParams) -> Hover | None:
        """Provide hover information."""
        pass


class CapabilityManager:
    """
    Central manager for all LSP capabilities.

    Usage:
        manager = CapabilityManager(server)
        manager.register_all()
        hover = await manager.handle_hover(params)
    """

    def __init__(
        self,
        server: EmojiLanguageServer,
        capabilities: dict[str, Capability] | None = None,
    ):
        self.server = server

        # Default capabilities
        if capabilities is None:
            from emojils.lsp.capabilities.emoji_capabilities import (
                EmojiCompletionCapability,
            )
            from emojils.lsp.capabilities.translation_capabilities import (
                TranslationHoverCapability,
            )

            capabilities = {
                "translation_hover": TranslationHoverCapability(server),
                "emoji_completion": EmojiCompletionCapability(server),
            }

        self.capabilities = capabilities
        self._registered = False

    def register_all(self) -> None:
        """Register all capabilities with the server."""
        if self._registered:
            return

        for capability in self.capabilities.values():
            capability.register()

        self._registered = True

    def get_capabilities_by_type(self, capability_type: type) -> list[Capability]:
        """Get all capabilities of a specific type (e.g., all CompletionCapability)."""
        return [
            cap
            for cap in self.capabilities.values()
            if isinstance(cap, capability_type)
        ]

    def _log_error(self, what: str, capability: Capability, e: Exception) -> None:
        self.server.window_log_message(
            LogMessageParams(
                type=MessageType.Error,
                message=f"{what} error in {capability.name}: {type(e).__name__}: {e}"
            )
        )

    async def handle_completion(self, params: CompletionParams) -> CompletionList:
        """
        Handle completion requests by delegating to capable handlers.

        This aggregates results from all completion capabilities that
        can handle the request.
        """
        all_items: list[CompletionItem] = []

        for capability in self.get_capabilities_by_type(CompletionCapability):
            try:
                if await capability.can_handle(params):
                    result = await capability.complete(params)  # pyright: ignore
                    all_items.extend(result.items)
            except Exception as e:
                self._log_error("Completion", capability, e)

        return CompletionList(is_incomplete=False, items=all_items)

    async def handle_hover(self, params: HoverParams) -> Hover | None:
        """
        Handle hover requests by delegating to capable handlers.

        Returns the first non-None hover result
        """
        for capability in self.get_capabilities_by_type(HoverCapability):
            try:
                if await capability.can_handle(params):
                    result = await capability.hover(params)  # pyright: ignore
                    if result:
                        return result
            except Exception as e:
                self._log_error("Hover", capability, e)

        return None

    async def resolve_completion(self, item: CompletionItem) -> CompletionItem:
        """Pass a completion item through every completion capability's resolve."""
        for capability in self.get_capabilities_by_type(CompletionCapability):
            try:
                item = await capability.resolve(item)  # pyright: ignore
            except Exception as e:
                self._log_error("Completion resolve", capability, e)

        return item
