"""
Function references supplied by the host application at startup.

Both are read-only once dispatch has started; swapping them while messages
are being dispatched is not supported.
"""

from __future__ import annotations

from collections.abc import Callable

from botcmd.core.domain.references import ServerRef, UserRef

# (server, user) -> the user's internal permission bit field
PermissionBitSupplier = Callable[[ServerRef, UserRef], int]

# (server, command name) -> macro body, or None when no macro of that name exists
MacroResolver = Callable[[ServerRef, str], str | None]
