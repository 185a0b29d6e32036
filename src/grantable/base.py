"""Grantable protocol.

A grantable is anything that can be given to, taken from, or checked
against a recipient: items, money, permissions, timed effects, and groups
of those.
"""

from typing import Protocol, runtime_checkable

from src.grantable.capabilities import Recipient, Services


@runtime_checkable
class Grantable(Protocol):
    """Protocol implemented by every reward kind."""

    def grant(self, recipient: Recipient, services: Services | None = None) -> bool:
        """Give this grantable to the recipient.

        Returns:
            True if the recipient received all of it.
        """
        ...

    def take(self, recipient: Recipient, services: Services | None = None) -> bool:
        """Remove an equivalent grantable from the recipient.

        Returns:
            True if it was removed.
        """
        ...

    def has(self, recipient: Recipient, services: Services | None = None) -> bool:
        """Check whether the recipient has this grantable or an equivalent."""
        ...

    def to_string(self) -> str:
        """Return the canonical descriptor for this grantable."""
        ...
