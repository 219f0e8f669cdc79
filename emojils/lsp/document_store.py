"""
In-memory store of open documents.

Holds the latest known text of every document the editor opened, keyed by
URI. There is no version tracking and no diff application: the server
declares full-document sync, so every change event carries the whole text
and simply replaces the stored entry.
"""

from __future__ import annotations

from collections.abc import Sequence

from lsprotocol.types import TextDocumentContentChangeEvent


class DocumentNotFoundError(KeyError):
    """Raised when a document was never opened."""

    def __init__(self, uri: str) -> None:
        super().__init__(uri)
        self.uri = uri

    def __str__(self) -> str:
        return f"Document not open: {self.uri}"


class DocumentStore:
    """Maps document URIs to their current text."""

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    def open(self, uri: str, text: str) -> None:
        """Insert or overwrite the entry for uri."""
        self._documents[uri] = text

    def change(
        self, uri: str, content_changes: Sequence[TextDocumentContentChangeEvent]
    ) -> None:
        """
        Replace the entry for uri with the text of the change payload.

        Ranges on partial events are ignored, the text is stored verbatim.
        When several events arrive together the last one wins.
        """
        if not content_changes:
            return
        self._documents[uri] = content_changes[-1].text

    def get(self, uri: str) -> str:
        """
        Return the current text of uri.

        Raises:
            DocumentNotFoundError: If the document was never opened
        """
        try:
            return self._documents[uri]
        except KeyError:
            raise DocumentNotFoundError(uri) from None

    def __contains__(self, uri: object) -> bool:
        return uri in self._documents

    def __len__(self) -> int:
        return len(self._documents)
