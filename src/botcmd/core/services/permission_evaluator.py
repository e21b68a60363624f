"""
Decides whether a user may run a command.

Three gates are checked in order and the first one that applies decides:

1. special restrictions: grant only to a matching bot/server owner
2. external capabilities: the user must hold every one of them
3. internal permission bits from the host's bit supplier

Requirements at or below ``ADMIN_RANGE_CEILING`` are moderator-tier: any
overlap with ``required | ADMIN_BITS`` is enough, so holding the admin bit
alone passes them. Higher requirements need every required bit.
"""

from __future__ import annotations

import logging

from botcmd.constants import ADMIN_BITS, ADMIN_RANGE_CEILING
from botcmd.core.common.exceptions import CommandPermissionError
from botcmd.core.domain.command_schema import CommandSchema
from botcmd.core.domain.permissions import PermissionRequirement, SpecialRestriction
from botcmd.core.domain.references import ServerRef, UserRef
from botcmd.core.interfaces.directory_interface import IDirectory
from botcmd.core.interfaces.supplier_interface import PermissionBitSupplier

logger = logging.getLogger(__name__)


class PermissionEvaluator:
    """Evaluates :class:`PermissionRequirement` gates for an invoker."""

    def __init__(
        self,
        directory: IDirectory,
        bit_supplier: PermissionBitSupplier | None = None,
    ) -> None:
        self._directory = directory
        self._bit_supplier = bit_supplier

    def is_allowed(
        self, requirement: PermissionRequirement, server: ServerRef, user: UserRef
    ) -> bool:
        if requirement.is_unrestricted:
            return True

        if requirement.special_restrictions:
            return self._passes_special(requirement, server, user)

        if requirement.required_capabilities:
            held = self._directory.external_capabilities_of(server, user)
            if not requirement.required_capabilities <= set(held):
                return False

        # Holding every capability still leaves the bit requirement to pass
        return self._passes_bits(requirement.permission_bits, server, user)

    def check(self, schema: CommandSchema, server: ServerRef, user: UserRef) -> None:
        """Raise if ``user`` may not run ``schema``.

        Raises:
            CommandPermissionError: Without saying which gate failed.
        """
        if not self.is_allowed(schema.permissions, server, user):
            logger.debug("User %s denied command %s", user.id, schema.name)
            raise CommandPermissionError(command_name=schema.name)

    def _passes_special(
        self, requirement: PermissionRequirement, server: ServerRef, user: UserRef
    ) -> bool:
        restrictions = requirement.special_restrictions
        if SpecialRestriction.BOT_OWNER in restrictions and self._directory.is_bot_owner(
            user
        ):
            return True
        if (
            SpecialRestriction.SERVER_OWNER in restrictions
            and self._directory.owner_of(server).id == user.id
        ):
            return True
        # NOBODY, or no matching owner role
        return False

    def _passes_bits(self, required: int, server: ServerRef, user: UserRef) -> bool:
        if required == 0:
            return True
        if self._bit_supplier is None:
            return True
        user_bits = self._bit_supplier(server, user)
        if required <= ADMIN_RANGE_CEILING:
            return (user_bits & (required | ADMIN_BITS)) != 0
        return (user_bits & required) == required
