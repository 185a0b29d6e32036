"""Currency grantable.

Money from the economy backend. Descriptors look like ``$500``,
``$3.14``, ``eco:5`` or ``economy:12.5``.
"""

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from src.grantable.capabilities import NO_SERVICES, Recipient, Services
from src.grantable.errors import EmptyInputError, InvalidValueError
from src.grantable.info import GrantableInfo, compile_pattern, strip_prefix


# Plain decimal: no locale separators, no nan/inf
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Currency:
    """An amount of money.

    Attributes:
        value: Amount to deposit, withdraw or check.
    """

    info: ClassVar[GrantableInfo] = GrantableInfo(prefix="eco(nomy)", symbol="$")

    value: float

    def grant(self, recipient: Recipient, services: Services | None = None) -> bool:
        economy = (services or NO_SERVICES).economy
        if economy is None:
            return False
        return economy.deposit(recipient.name, self.value)

    def take(self, recipient: Recipient, services: Services | None = None) -> bool:
        economy = (services or NO_SERVICES).economy
        if economy is None:
            return False
        return economy.withdraw(recipient.name, self.value)

    def has(self, recipient: Recipient, services: Services | None = None) -> bool:
        economy = (services or NO_SERVICES).economy
        return economy is not None and economy.has(recipient.name, self.value)

    def to_string(self) -> str:
        if self.value == int(self.value):
            return f"${int(self.value)}"
        return f"${self.value!r}"

    def __str__(self) -> str:
        return f"Currency[{self.to_string()}]"

    @classmethod
    def parse(cls, text: str) -> "Currency":
        """Parse a currency value.

        Args:
            text: A decimal number, optionally with a ``$`` or ``eco:`` prefix.

        Returns:
            The parsed Currency.

        Raises:
            EmptyInputError: If there is no value.
            InvalidValueError: If the value is not a decimal number.

        Examples:
            >>> Currency.parse("$3.14")
            Currency(value=3.14)
            >>> Currency.parse("eco:5")
            Currency(value=5.0)
        """
        if text is None:
            raise EmptyInputError("Currency value cannot be None")

        text = text.strip()
        if text == "$":
            text = ""
        return cls.from_body(strip_prefix(_PATTERN, text))

    @classmethod
    def from_body(cls, body: str) -> "Currency":
        """Parse a currency value that has no prefix."""
        body = body.strip()
        if not body:
            raise EmptyInputError("Currency value cannot be empty", token=body)

        if not DECIMAL_PATTERN.fullmatch(body):
            raise InvalidValueError(f"'{body}' is not a valid currency value", token=body)
        value = float(body)
        if not math.isfinite(value):
            raise InvalidValueError(f"'{body}' is out of range for a currency value", token=body)
        return cls(value)


_PATTERN = compile_pattern(Currency.info)
