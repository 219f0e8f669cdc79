"""
Emoji-related LSP capabilities.

Offers emoji whose code contains the last word typed in the document.
"""

from __future__ import annotations

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    MessageType,
)

from emojils.lsp.capabilities.capabilities import CompletionCapability
from emojils.lsp.document_store import DocumentNotFoundError
from emojils.lsp.words import last_word
from emojils.services.base import Failure
from emojils.services.emoji import Emoji


def emoji_completion_item(emoji: Emoji) -> CompletionItem:
    return CompletionItem(
        label=f"{emoji.moji} {emoji.code}",
        kind=CompletionItemKind.Text,
        detail=emoji.code,
        insert_text=emoji.moji,
    )


class EmojiCompletionCapability(CompletionCapability):
    """Provides emoji completions from emojidex."""

    @property
    def name(self) -> str:
        return "emoji_completion"

    @property
    def description(self) -> str:
        return "Suggest emoji matching the last word of the document"

    async def can_handle(self, params: CompletionParams) -> bool:
        return params.text_document.uri in self.document_store

    async def complete(self, params: CompletionParams) -> CompletionList:
        """
        Search emoji for the last alphabetic word in the document.

        The query comes from the whole text, not from the cursor position.
        """
        empty = CompletionList(is_incomplete=False, items=[])

        try:
            text = self.document_store.get(params.text_document.uri)
        except DocumentNotFoundError:
            return empty

        query = last_word(text)
        if query is None:
            return empty

        result = await self.server.emojidex.search(query)
        if isinstance(result, Failure):
            self.log(f"Emoji search for {query!r} failed: {result.error}", MessageType.Warning)
            return empty

        items = [
            emoji_completion_item(emoji)
            for emoji in result.value
            if emoji.is_single_codepoint
        ]
        return CompletionList(is_incomplete=False, items=items)
