"""
Translation-related LSP capabilities.

Hovering a word shows its translation and thesaurus definitions.
"""

from __future__ import annotations

import asyncio

from lsprotocol.types import (
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    MessageType,
)

from emojils.lsp.capabilities.capabilities import HoverCapability
from emojils.lsp.document_store import DocumentNotFoundError
from emojils.lsp.words import word_at_position
from emojils.services.base import Failure
from emojils.services.dictionary import DictionaryEntry

NOT_FOUND = "Translation not found"


def format_translation(
    word: str, translation: str, language: str, entries: list[DictionaryEntry]
) -> str:
    """
    Render a translation as markdown.

        **cat** - кошка (RU)
        - *noun* a small domesticated carnivore
    """
    lines = [f"**{word}** - {translation} ({language.upper()})"]
    for entry in entries:
        lines.append(
            f"- *{entry.part_of_speech}* {'; '.join(entry.short_definitions)}"
        )
    return "\n".join(lines)


class TranslationHoverCapability(HoverCapability):
    """Translates the word under the cursor and adds thesaurus definitions."""

    @property
    def name(self) -> str:
        return "translation_hover"

    @property
    def description(self) -> str:
        return "Show translation and definitions of the hovered word"

    async def can_handle(self, params: HoverParams) -> bool:
        return True

    def _word_at(self, text: str, params: HoverParams) -> str:
        lines = text.split("\n")
        line_number = params.position.line
        line = lines[line_number] if line_number < len(lines) else ""
        return word_at_position(line, params.position.character)

    async def hover(self, params: HoverParams) -> Hover | None:
        uri = params.text_document.uri
        try:
            text = self.document_store.get(uri)
        except DocumentNotFoundError as e:
            self.log(str(e), MessageType.Warning)
            return Hover(contents=NOT_FOUND)

        word = self._word_at(text, params)
        if not word:
            return Hover(contents=NOT_FOUND)

        language = self.server.settings.target_language
        translation, definitions = await asyncio.gather(
            self.server.translator.translate(word, language),
            self.server.thesaurus.lookup(word),
        )

        for result in (translation, definitions):
            if isinstance(result, Failure):
                self.log(f"Lookup of {word!r} failed: {result.error}", MessageType.Warning)
                return Hover(contents=NOT_FOUND)

        return Hover(
            contents=MarkupContent(
                kind=MarkupKind.Markdown,
                value=format_translation(
                    word, translation.value, language, definitions.value
                ),
            )
        )
