"""Composite grantable.

A group is written as a parenthesized descriptor, ``(iron_sword, $5)``,
and holds the parsed elements in order.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from src.grantable.base import Grantable
from src.grantable.capabilities import Recipient, Services
from src.grantable.errors import EmptyInputError

if TYPE_CHECKING:
    from src.grantable.registry import Registry


class Group:
    """Ordered collection of grantables.

    grant and take visit every element, even after one fails, and report
    True only if all of them succeeded. has is True only if every element
    reports True.
    """

    def __init__(self, elements: list[Grantable] | None = None) -> None:
        self.elements: list[Grantable] = list(elements or [])

    def add(self, element: Grantable) -> None:
        self.elements.append(element)

    def grant(self, recipient: Recipient, services: Services | None = None) -> bool:
        results = [element.grant(recipient, services) for element in self.elements]
        return all(results)

    def take(self, recipient: Recipient, services: Services | None = None) -> bool:
        results = [element.take(recipient, services) for element in self.elements]
        return all(results)

    def has(self, recipient: Recipient, services: Services | None = None) -> bool:
        return all(element.has(recipient, services) for element in self.elements)

    def to_string(self) -> str:
        return "(" + ", ".join(element.to_string() for element in self.elements) + ")"

    def __iter__(self) -> Iterator[Grantable]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Grantable:
        return self.elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.elements == other.elements

    def __str__(self) -> str:
        return "Group[{" + ", ".join(str(element) for element in self.elements) + "}]"

    def __repr__(self) -> str:
        return f"Group({self.elements!r})"

    @classmethod
    def parse(cls, text: str, registry: "Registry | None" = None) -> "Group":
        """Parse a group token.

        One leading "(" and one trailing ")" are stripped if present, and
        the rest is parsed as a descriptor.

        Args:
            text: Group token, e.g. "(perm:a.b, $5)".
            registry: Registry to dispatch the elements with; defaults to
                the process-wide registry.
        """
        if text is None:
            raise EmptyInputError("Group cannot be None")

        from src.grantable.registry import default_registry

        registry = registry or default_registry

        text = text.strip()
        if text.startswith("("):
            text = text[1:].strip()
        if text.endswith(")"):
            text = text[:-1].strip()

        return cls(registry.parse_all(text))
