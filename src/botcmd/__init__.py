"""Text-command interpreter for chat bots."""

from botcmd.constants import ADMIN_BITS, MOD_OR_ADMIN_BITS, MODERATOR_BITS
from botcmd.core.common.exceptions import (
    BotCommandError,
    CommandPermissionError,
    ConfigurationError,
    MacroExpansionError,
    ParsingError,
)
from botcmd.core.config.app_config import (
    BotCommandConfig,
    configure_logging,
    load_config,
)
from botcmd.core.domain.arguments import ArgumentBag
from botcmd.core.domain.command_schema import (
    CommandBuilder,
    CommandSchema,
    HelpWarning,
)
from botcmd.core.domain.dispatch_context import DispatchContext
from botcmd.core.domain.invocation import InvocationContext
from botcmd.core.domain.parameters import ArgType, ParameterSpec
from botcmd.core.domain.permissions import SpecialRestriction
from botcmd.core.domain.references import ChannelRef, ServerRef, UserRef
from botcmd.core.interfaces.directory_interface import IChatPlatform, IDirectory
from botcmd.core.services.background_task_runner import BackgroundTaskRunner
from botcmd.core.services.dispatcher import Dispatcher

__all__ = [
    "ADMIN_BITS",
    "MODERATOR_BITS",
    "MOD_OR_ADMIN_BITS",
    "ArgType",
    "ArgumentBag",
    "BackgroundTaskRunner",
    "BotCommandConfig",
    "BotCommandError",
    "ChannelRef",
    "CommandBuilder",
    "CommandPermissionError",
    "CommandSchema",
    "ConfigurationError",
    "DispatchContext",
    "Dispatcher",
    "HelpWarning",
    "IChatPlatform",
    "IDirectory",
    "InvocationContext",
    "MacroExpansionError",
    "ParameterSpec",
    "ParsingError",
    "ServerRef",
    "SpecialRestriction",
    "UserRef",
    "configure_logging",
    "load_config",
]
