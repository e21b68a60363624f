from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from botcmd.core.domain.arguments import ArgumentBag
from botcmd.core.domain.references import ChannelRef, ServerRef, UserRef

if TYPE_CHECKING:  # Avoid runtime circular import
    from botcmd.core.interfaces.directory_interface import (  # pragma: no cover
        IChatPlatform,
    )


@dataclass(slots=True)
class InvocationContext:
    """Everything a command task gets to work with.

    One instance per invocation; it is discarded once the task returns.
    """

    arguments: ArgumentBag
    user: UserRef
    channel: ChannelRef
    server: ServerRef
    platform: IChatPlatform

    def reply(self, text: str, *format_args: Any) -> Any:
        """Send a message to the invoking channel.

        ``format_args`` are applied with ``%`` formatting when given.
        """
        content = text % format_args if format_args else text
        return self.platform.send_message(self.channel, content)
