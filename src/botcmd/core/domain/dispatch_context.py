from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from botcmd.core.config.app_config import BotCommandConfig

if TYPE_CHECKING:  # Avoid runtime circular import
    from botcmd.core.interfaces.directory_interface import (  # pragma: no cover
        IChatPlatform,
    )
    from botcmd.core.interfaces.supplier_interface import (  # pragma: no cover
        MacroResolver,
        PermissionBitSupplier,
    )


@dataclass(slots=True)
class DispatchContext:
    """Collaborators a dispatcher is built from.

    The suppliers are fixed for the dispatcher's lifetime; build a new
    dispatcher to change them.
    """

    platform: IChatPlatform
    config: BotCommandConfig = field(default_factory=BotCommandConfig)
    permission_bit_supplier: PermissionBitSupplier | None = None
    macro_resolver: MacroResolver | None = None
