"""Permission grantable.

Descriptors look like ``#arena.vip``, ``p:arena.vip``, ``perm:arena.vip``
or ``permission:arena.vip``. The key is opaque and stored verbatim.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.grantable.capabilities import NO_SERVICES, Recipient, Services
from src.grantable.errors import EmptyInputError
from src.grantable.info import GrantableInfo, compile_pattern, strip_prefix


@dataclass(frozen=True)
class Permission:
    """A permission node.

    Attributes:
        permission: The permission key, e.g. "arena.vip".
    """

    info: ClassVar[GrantableInfo] = GrantableInfo(prefix="p(erm(ission))", symbol="#")

    permission: str

    def grant(self, recipient: Recipient, services: Services | None = None) -> bool:
        backend = (services or NO_SERVICES).permissions
        return backend is not None and backend.add(recipient, self.permission)

    def take(self, recipient: Recipient, services: Services | None = None) -> bool:
        backend = (services or NO_SERVICES).permissions
        return backend is not None and backend.remove(recipient, self.permission)

    def has(self, recipient: Recipient, services: Services | None = None) -> bool:
        backend = (services or NO_SERVICES).permissions
        return backend is not None and backend.has(recipient, self.permission)

    def to_string(self) -> str:
        return f"perm:{self.permission}"

    def __str__(self) -> str:
        return f"Permission[{self.permission}]"

    @classmethod
    def parse(cls, text: str) -> "Permission":
        """Parse a permission, with or without its prefix.

        Raises:
            EmptyInputError: If no permission key is left.
        """
        if text is None:
            raise EmptyInputError("Permission cannot be None")

        return cls.from_body(strip_prefix(_PATTERN, text.strip()))

    @classmethod
    def from_body(cls, body: str) -> "Permission":
        """Create a permission from a key that has no prefix."""
        body = body.strip()
        if not body:
            raise EmptyInputError("The empty string is not a valid permission", token=body)
        return cls(body)


_PATTERN = compile_pattern(Permission.info)
