from unittest.mock import Mock

import pytest
from lsprotocol.types import (
    CompletionItem,
    CompletionList,
    CompletionParams,
    Hover,
    HoverParams,
    LogMessageParams,
    MessageType,
    Position,
    TextDocumentIdentifier,
)

from emojils.lsp.capabilities.capabilities import (
    CapabilityManager,
    CompletionCapability,
    HoverCapability,
)
from emojils.lsp.capabilities.emoji_capabilities import EmojiCompletionCapability
from emojils.lsp.capabilities.translation_capabilities import (
    TranslationHoverCapability,
)
from emojils.lsp.document_store import DocumentStore

DOC = TextDocumentIdentifier(uri="file:///test.txt")


class StaticHover(HoverCapability):
    def __init__(self, server, result, handles=True):
        super().__init__(server)
        self.result = result
        self.handles = handles

    @property
    def name(self) -> str:
        return "static_hover"

    @property
    def description(self) -> str:
        return "Returns a fixed hover"

    async def can_handle(self, params) -> bool:
        return self.handles

    async def hover(self, params):
        return self.result


class BrokenHover(StaticHover):
    @property
    def name(self) -> str:
        return "broken_hover"

    async def hover(self, params):
        raise RuntimeError("boom")


class StaticCompletion(CompletionCapability):
    def __init__(self, server, labels):
        super().__init__(server)
        self.labels = labels

    @property
    def name(self) -> str:
        return "static_completion"

    @property
    def description(self) -> str:
        return "Returns fixed items"

    async def can_handle(self, params) -> bool:
        return True

    async def complete(self, params):
        return CompletionList(
            is_incomplete=False,
            items=[CompletionItem(label=label) for label in self.labels],
        )

    async def resolve(self, item):
        item.detail = "resolved"
        return item


class BrokenCompletion(StaticCompletion):
    @property
    def name(self) -> str:
        return "broken_completion"

    async def complete(self, params):
        raise ValueError("bad payload")


@pytest.fixture
def server():
    server = Mock()
    server.document_store = DocumentStore()
    server.window_log_message = Mock()
    return server


@pytest.fixture
def hover_params():
    return HoverParams(text_document=DOC, position=Position(line=0, character=0))


@pytest.fixture
def completion_params():
    return CompletionParams(text_document=DOC, position=Position(line=0, character=0))


def test_default_capabilities(server):
    manager = CapabilityManager(server)

    assert isinstance(
        manager.capabilities["translation_hover"], TranslationHoverCapability
    )
    assert isinstance(
        manager.capabilities["emoji_completion"], EmojiCompletionCapability
    )
    assert manager.get_capabilities_by_type(HoverCapability) == [
        manager.capabilities["translation_hover"]
    ]


def test_register_all_is_idempotent(server):
    capability = Mock()
    manager = CapabilityManager(server, capabilities={"mock": capability})

    manager.register_all()
    manager.register_all()

    capability.register.assert_called_once()


@pytest.mark.asyncio
async def test_hover_returns_first_result(server, hover_params):
    first = Hover(contents="first")
    manager = CapabilityManager(
        server,
        capabilities={
            "skipped": StaticHover(server, Hover(contents="skipped"), handles=False),
            "first": StaticHover(server, first),
            "second": StaticHover(server, Hover(contents="second")),
        },
    )

    assert await manager.handle_hover(hover_params) is first


@pytest.mark.asyncio
async def test_hover_error_is_logged_not_raised(server, hover_params):
    fallback = Hover(contents="fallback")
    manager = CapabilityManager(
        server,
        capabilities={
            "broken": BrokenHover(server, None),
            "fallback": StaticHover(server, fallback),
        },
    )

    assert await manager.handle_hover(hover_params) is fallback

    log_params = server.window_log_message.call_args[0][0]
    assert isinstance(log_params, LogMessageParams)
    assert log_params.type == MessageType.Error
    assert "broken_hover" in log_params.message
    assert "boom" in log_params.message


@pytest.mark.asyncio
async def test_hover_without_result(server, hover_params):
    manager = CapabilityManager(
        server, capabilities={"none": StaticHover(server, None)}
    )

    assert await manager.handle_hover(hover_params) is None


@pytest.mark.asyncio
async def test_completion_aggregates_items(server, completion_params):
    manager = CapabilityManager(
        server,
        capabilities={
            "a": StaticCompletion(server, ["one"]),
            "broken": BrokenCompletion(server, ["never"]),
            "b": StaticCompletion(server, ["two", "three"]),
        },
    )

    result = await manager.handle_completion(completion_params)

    assert result.is_incomplete is False
    assert [item.label for item in result.items] == ["one", "two", "three"]
    assert server.window_log_message.called


@pytest.mark.asyncio
async def test_resolve_completion(server):
    manager = CapabilityManager(
        server, capabilities={"a": StaticCompletion(server, [])}
    )

    item = await manager.resolve_completion(CompletionItem(label="x"))

    assert item.detail == "resolved"


@pytest.mark.asyncio
async def test_resolve_completion_default_is_identity(server):
    manager = CapabilityManager(server)
    item = CompletionItem(label="🍕 pizza", detail="pizza", insert_text="🍕")

    assert await manager.resolve_completion(item) is item
