from lsprotocol.types import (
    COMPLETION_ITEM_RESOLVE,
    INITIALIZE,
    SHUTDOWN,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    HoverParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
)

from emojils.config import Settings
from emojils.lsp.capabilities.capabilities import CapabilityManager
from emojils.lsp.emoji_language_server import EmojiLanguageServer
from emojils.lsp.text_sync_manager import TextSyncManager

SERVER_NAME = "emojils"
SERVER_VERSION = "0.1.0"


def create_server(settings: Settings | None = None) -> EmojiLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - Request/response lifecycle
    - Notifications and event handling

    Features are registered here, before the server starts, so that they
    are advertised in the initialize response.
    """
    if settings is None:
        settings = Settings.from_env()

    server = EmojiLanguageServer(SERVER_NAME, SERVER_VERSION, settings)

    server.text_sync_manager = TextSyncManager(server)
    server.text_sync_manager.register_handlers()

    server.capability_manager = CapabilityManager(server)
    server.capability_manager.register_all()

    @server.feature(INITIALIZE)
    async def initialize(ls: EmojiLanguageServer, params: InitializeParams):
        ls.window_log_message(
            LogMessageParams(MessageType.Info, f"{SERVER_NAME} {SERVER_VERSION} initialized")
        )

        for variable in ls.settings.missing_keys():
            ls.window_log_message(
                LogMessageParams(
                    MessageType.Warning,
                    f"{variable} is not set, hover translations are disabled",
                )
            )

    @server.feature(SHUTDOWN)
    async def shutdown(ls: EmojiLanguageServer, params: None):
        await ls.close_http_client()

    # Register aggregated handlers
    @server.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(resolve_provider=True))
    async def completion(ls: EmojiLanguageServer, params: CompletionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return CompletionList(is_incomplete=False, items=[])

    @server.feature(COMPLETION_ITEM_RESOLVE)
    async def completion_resolve(ls: EmojiLanguageServer, item: CompletionItem):
        if ls.capability_manager:
            return await ls.capability_manager.resolve_completion(item)
        return item

    @server.feature(TEXT_DOCUMENT_HOVER)
    async def hover(ls: EmojiLanguageServer, params: HoverParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_hover(params)
        return None

    return server
