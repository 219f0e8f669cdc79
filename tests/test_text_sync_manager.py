from unittest.mock import Mock

import pytest
from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    LogMessageParams,
    MessageType,
    PublishDiagnosticsParams,
    TextDocumentContentChangeWholeDocument,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)

from emojils.lsp.document_store import DocumentStore
from emojils.lsp.text_sync_manager import TextSyncManager

URI = "file:///test/notes.txt"


@pytest.fixture
def server():
    """Create a mock server for testing."""
    server = Mock()
    server.document_store = DocumentStore()
    server.window_log_message = Mock()
    server.text_document_publish_diagnostics = Mock()
    return server


@pytest.fixture
def text_sync(server):
    """Create TextSyncManager instance."""
    return TextSyncManager(server)


def open_params(text: str) -> DidOpenTextDocumentParams:
    return DidOpenTextDocumentParams(
        text_document=TextDocumentItem(
            uri=URI, language_id="plaintext", version=1, text=text
        )
    )


def change_params(text: str) -> DidChangeTextDocumentParams:
    return DidChangeTextDocumentParams(
        text_document=VersionedTextDocumentIdentifier(uri=URI, version=2),
        content_changes=[TextDocumentContentChangeWholeDocument(text=text)],
    )


@pytest.mark.asyncio
async def test_did_open_stores_document(text_sync, server):
    await text_sync.did_open(open_params("I love pizza"))

    assert server.document_store.get(URI) == "I love pizza"
    log_params = server.window_log_message.call_args[0][0]
    assert log_params.type == MessageType.Info
    assert URI in log_params.message


@pytest.mark.asyncio
async def test_did_change_overwrites_document(text_sync, server):
    await text_sync.did_open(open_params("I love pizza"))
    await text_sync.did_change(change_params("I love tacos"))

    assert server.document_store.get(URI) == "I love tacos"


@pytest.mark.asyncio
async def test_did_change_publishes_empty_diagnostics(text_sync, server):
    await text_sync.did_change(change_params("anything"))

    server.text_document_publish_diagnostics.assert_called_once_with(
        PublishDiagnosticsParams(uri=URI, diagnostics=[])
    )


@pytest.mark.asyncio
async def test_did_open_does_not_publish_diagnostics(text_sync, server):
    await text_sync.did_open(open_params("text"))

    server.text_document_publish_diagnostics.assert_not_called()


@pytest.mark.asyncio
async def test_hook_registration(text_sync):
    """Test that hooks can be registered."""
    async def test_hook(params):
        pass

    text_sync.add_on_change_hook(test_hook)

    assert len(text_sync._on_change_hooks) == 1
    assert text_sync._on_change_hooks[0] == test_hook


@pytest.mark.asyncio
async def test_hooks_see_updated_store(text_sync, server):
    seen = []

    async def on_open(params):
        seen.append(("open", server.document_store.get(params.text_document.uri)))

    async def on_change(params):
        seen.append(("change", server.document_store.get(params.text_document.uri)))

    text_sync.add_on_open_hook(on_open)
    text_sync.add_on_change_hook(on_change)

    await text_sync.did_open(open_params("one"))
    await text_sync.did_change(change_params("two"))

    assert seen == [("open", "one"), ("change", "two")]


@pytest.mark.asyncio
async def test_multiple_hooks_execution_order(text_sync):
    """Test that multiple hooks run in registration order."""
    execution_order = []

    async def hook1(params):
        execution_order.append(1)

    async def hook2(params):
        execution_order.append(2)

    async def hook3(params):
        execution_order.append(3)

    text_sync.add_on_open_hook(hook1)
    text_sync.add_on_open_hook(hook2)
    text_sync.add_on_open_hook(hook3)

    await text_sync._broadcast_on_open(open_params("text"))

    assert execution_order == [1, 2, 3]


@pytest.mark.asyncio
async def test_hook_error_isolation(text_sync, server):
    """Test that hook errors don't prevent other hooks from running."""
    hook2_called = False

    async def failing_hook(params):
        raise ValueError("Test error")

    async def successful_hook(params):
        nonlocal hook2_called
        hook2_called = True

    text_sync.add_on_change_hook(failing_hook)
    text_sync.add_on_change_hook(successful_hook)

    # Should not raise exception
    await text_sync.did_change(change_params("text"))

    # Second hook should still run
    assert hook2_called

    # Error should be logged, diagnostics still cleared
    call_args = server.window_log_message.call_args_list[-1][0][0]
    assert isinstance(call_args, LogMessageParams)
    assert call_args.type == MessageType.Error
    assert "failing_hook" in call_args.message
    assert server.text_document_publish_diagnostics.called
