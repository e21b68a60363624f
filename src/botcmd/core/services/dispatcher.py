"""
Entry point for inbound chat messages.

``Dispatcher.dispatch`` is called once per message, possibly from several
platform threads at once. A known command goes through the permission
gate and the parameter matcher and its task is handed to the platform's
background executor. An unknown name is looked up as a macro; its
expansions are dispatched again, inline and recursively, up to
``max_macro_depth`` levels deep.
"""

from __future__ import annotations

import functools
import re

from botcmd.core.common.exceptions import (
    CommandPermissionError,
    MacroExpansionError,
    ParsingError,
)
from botcmd.core.common.logging_utils import LogContext, get_logger
from botcmd.core.domain.command_schema import CommandSchema
from botcmd.core.domain.dispatch_context import DispatchContext
from botcmd.core.domain.invocation import InvocationContext
from botcmd.core.domain.references import ChannelRef, ServerRef, UserRef
from botcmd.core.services.command_registry import CommandRegistry
from botcmd.core.services.help_formatter import HelpFormatter
from botcmd.core.services.macro_expander import MacroExpander
from botcmd.core.services.parameter_matcher import ParameterMatcher
from botcmd.core.services.permission_evaluator import PermissionEvaluator
from botcmd.core.services.tokenizer import tokenize

logger = get_logger(__name__)

_NAME_PATTERN = re.compile(r"\S*")


def extract_command_name(text: str, prefix: str) -> str | None:
    """Return the word right after ``prefix``, or None if ``text`` is not a command."""
    if not text.startswith(prefix):
        return None
    name = _NAME_PATTERN.match(text, len(prefix)).group(0)  # type: ignore[union-attr]
    return name or None


class Dispatcher:
    """Routes command text to registered commands or macros."""

    def __init__(
        self, context: DispatchContext, registry: CommandRegistry | None = None
    ) -> None:
        self._context = context
        self._platform = context.platform
        self._config = context.config
        self._registry = registry if registry is not None else CommandRegistry()
        self._evaluator = PermissionEvaluator(
            self._platform, context.permission_bit_supplier
        )
        self._matcher = ParameterMatcher(self._platform)
        self._macros = MacroExpander(context.macro_resolver)
        self._help = HelpFormatter(self._registry, self._evaluator)

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def help(self) -> HelpFormatter:
        return self._help

    def start(self) -> None:
        """Start accepting commands; registration is allowed from here on."""
        if self._registry.is_active:
            logger.debug("dispatcher_already_started")
            return
        self._registry.activate()
        logger.info("dispatcher_started", prefix=self._config.command_prefix)

    def register(self, schema: CommandSchema) -> None:
        self._registry.register(schema)

    def dispatch(
        self, text: str, user: UserRef, channel: ChannelRef, server: ServerRef
    ) -> None:
        """Handle one inbound message."""
        self._dispatch(text, user, channel, server, depth=0)

    def _dispatch(
        self,
        text: str,
        user: UserRef,
        channel: ChannelRef,
        server: ServerRef,
        depth: int,
    ) -> None:
        if self._platform.is_automated_sender(user):
            return

        prefix = self._config.command_prefix
        name = extract_command_name(text, prefix)
        if name is None:
            return

        with LogContext(logger, command=name, user_id=user.id, depth=depth) as log:
            schema = self._registry.get(name)
            if schema is None:
                try:
                    self._run_macro(name, text, user, channel, server, depth)
                except MacroExpansionError as exc:
                    log.warning("macro_depth_exceeded", limit=exc.depth)
                return

            try:
                self._evaluator.check(schema, server, user)
            except CommandPermissionError:
                log.info("permission_denied")
                self._platform.send_message(
                    channel, self._config.permission_denied_message
                )
                return

            try:
                arguments = self._matcher.match(schema, text, server, prefix)
            except ParsingError as exc:
                log.info("parse_failed", reason=exc.message)
                self._platform.send_message(
                    channel, self._config.parse_error_prefix + exc.message
                )
                return

            invocation = InvocationContext(
                arguments=arguments,
                user=user,
                channel=channel,
                server=server,
                platform=self._platform,
            )
            self._platform.submit_background_task(
                functools.partial(schema.task, invocation)
            )
            log.debug("task_submitted", arguments=len(arguments))

    def _run_macro(
        self,
        name: str,
        text: str,
        user: UserRef,
        channel: ChannelRef,
        server: ServerRef,
        depth: int,
    ) -> None:
        commands = self._macros.expand(server, name, tokenize(text), user.id)
        if commands is None:
            return
        if depth >= self._config.max_macro_depth:
            raise MacroExpansionError(depth=self._config.max_macro_depth)
        for command in commands:
            self._dispatch(command, user, channel, server, depth + 1)
