"""Grantable kind registry and token dispatcher.

The registry maps each kind to a compiled prefix pattern and a parse
function. Dispatch tries custom kinds first (in registration order), then
the built-in Currency, Permission and Effect kinds, and finally falls back
to Item, which has no prefix.

Usage:
    >>> from src.grantable.registry import parse_all
    >>> [g.to_string() for g in parse_all("iron_sword, $5, #arena.vip")]
    ['iron_sword', '$5', 'perm:arena.vip']
"""

import re
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from src.grantable.base import Grantable
from src.grantable.currency import Currency
from src.grantable.effect import Effect
from src.grantable.errors import EmptyInputError, InvalidValueError, RegistrationError, UnknownKindError
from src.grantable.group import Group
from src.grantable.info import GrantableInfo, compile_pattern, strip_prefix
from src.grantable.item import Item
from src.grantable.permission import Permission
from src.grantable.tokenizer import Tokenizer, tokenize


BUILTIN_KINDS = (Currency, Permission, Effect)

ParseFunction = Callable[[str], Grantable]


@dataclass(frozen=True)
class RegistryEntry:
    """A registered kind.

    Attributes:
        kind: The grantable class.
        info: Its symbol and prefix.
        pattern: Compiled token pattern; group 2 is the body.
        parse: Function turning a body into a grantable.
        order: Registration order within its table.
    """

    kind: type
    info: GrantableInfo
    pattern: re.Pattern[str]
    parse: ParseFunction
    order: int

    def matches(self, token: str) -> bool:
        return self.pattern.fullmatch(token) is not None

    def parse_token(self, token: str) -> Grantable:
        return self.parse(strip_prefix(self.pattern, token))


def _build_entry(
    kind: type,
    info: GrantableInfo | None,
    parse: ParseFunction | None,
    order: int,
) -> RegistryEntry:
    info = info or getattr(kind, "info", None)
    if not isinstance(info, GrantableInfo):
        raise RegistrationError(f"{kind.__name__} has no GrantableInfo", token=kind.__name__)

    parse = parse or getattr(kind, "from_body", None) or getattr(kind, "parse", None)
    if not callable(parse):
        raise RegistrationError(f"{kind.__name__} has no parse function", token=kind.__name__)

    # Raises before anything is stored
    pattern = compile_pattern(info)
    return RegistryEntry(kind=kind, info=info, pattern=pattern, parse=parse, order=order)


class Registry:
    """Table of grantable kinds used to dispatch tokens.

    Registration is serialised by a lock. The entry tables are replaced
    rather than mutated, so dispatch can read them without locking.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._core: tuple[RegistryEntry, ...] = tuple(
            _build_entry(kind, None, None, order) for order, kind in enumerate(BUILTIN_KINDS)
        )
        self._custom: tuple[RegistryEntry, ...] = ()

    @property
    def entries(self) -> tuple[RegistryEntry, ...]:
        """All entries in dispatch order: custom first, then built-in."""
        return self._custom + self._core

    def get_entry(self, kind: type) -> RegistryEntry | None:
        for entry in self.entries:
            if entry.kind is kind:
                return entry
        return None

    def is_registered(self, kind: type) -> bool:
        return self.get_entry(kind) is not None

    def register(
        self,
        kind: type,
        info: GrantableInfo | None = None,
        parse: ParseFunction | None = None,
    ) -> RegistryEntry:
        """Register a custom grantable kind.

        Args:
            kind: The grantable class.
            info: Symbol and prefix; defaults to ``kind.info``.
            parse: Body parser; defaults to ``kind.from_body`` or
                ``kind.parse``.

        Returns:
            The new entry, or the existing one if the kind is already known.

        Raises:
            RegistrationError: If the metadata is invalid. Nothing is
                installed in that case.
        """
        existing = self.get_entry(kind)
        if existing is not None:
            return existing

        with self._lock:
            existing = self.get_entry(kind)
            if existing is not None:
                return existing
            entry = _build_entry(kind, info, parse, len(self._custom))
            self._custom = self._custom + (entry,)
            return entry

    def find_entry(self, token: str) -> RegistryEntry | None:
        """Return the first entry whose pattern matches the whole token."""
        for entry in self.entries:
            if entry.matches(token):
                return entry
        return None

    def dispatch(self, token: str) -> Grantable:
        """Parse one token into a grantable.

        Raises:
            EmptyInputError: If the token is empty.
            MalformedGroupError: On bad group syntax.
            InvalidValueError: If the matched kind rejects the body.
            UnknownKindError: If no kind matches and the token is not a
                valid item either.
        """
        if token is None or not token.strip():
            raise EmptyInputError("Token cannot be empty", token=token)

        token = token.strip()
        if token.startswith("("):
            return Group.parse(token, registry=self)

        entry = self.find_entry(token)
        if entry is not None:
            return entry.parse_token(token)

        try:
            return Item.parse(token)
        except InvalidValueError as e:
            raise UnknownKindError(f"'{token}' is not a known reward: {e}", token=token) from e

    def parse_all(self, text: str) -> list[Grantable]:
        """Tokenize a descriptor and dispatch every token."""
        return [self.dispatch(token) for token in tokenize(text)]

    def _pattern_for(self, kind: type) -> re.Pattern[str] | None:
        entry = self.get_entry(kind)
        if entry is not None:
            return entry.pattern
        info = getattr(kind, "info", None)
        if isinstance(info, GrantableInfo):
            return compile_pattern(info)
        return None

    def trim(self, kind: type, token: str) -> str:
        """Strip a kind's prefix from a token if it has one.

        Works for unregistered kinds too, as long as they carry an info.
        """
        pattern = self._pattern_for(kind)
        if pattern is None:
            return token
        return strip_prefix(pattern, token)

    def parse_as(self, kind: type, token: str) -> Grantable:
        """Parse a token as a specific kind, skipping dispatch."""
        if kind is Group:
            return Group.parse(token, registry=self)
        if kind is Item:
            return Item.parse(token)

        entry = self.get_entry(kind)
        if entry is not None:
            return entry.parse_token(token.strip())

        parse = getattr(kind, "parse", None)
        if not callable(parse):
            raise RegistrationError(f"{kind.__name__} has no parse function", token=kind.__name__)
        return parse(self.trim(kind, token.strip()))


class GrantableParser:
    """Token-by-token parser over one descriptor.

    Examples:
        >>> parser = GrantableParser("wool:red:5, $10")
        >>> parser.next_item().amount
        5
        >>> parser.next()
        Currency(value=10.0)
    """

    def __init__(self, text: str, registry: Registry | None = None) -> None:
        self.registry = registry or default_registry
        self._tokens = Tokenizer(text)

    def has_next(self) -> bool:
        return self._tokens.has_next()

    def next(self) -> Grantable:
        """Parse the next token with normal dispatch."""
        return self.registry.dispatch(self._tokens.next())

    def next_item(self) -> Item:
        return Item.parse(self._tokens.next())

    def next_currency(self) -> Currency:
        return Currency.parse(self._tokens.next())

    def next_permission(self) -> Permission:
        return Permission.parse(self._tokens.next())

    def next_effect(self) -> Effect:
        return Effect.parse(self._tokens.next())

    def next_as(self, kind: type) -> Grantable:
        """Parse the next token as the given kind."""
        return self.registry.parse_as(kind, self._tokens.next())

    def __iter__(self) -> Iterator[Grantable]:
        while self.has_next():
            yield self.next()


default_registry = Registry()


def register(kind: type, info: GrantableInfo | None = None, parse: ParseFunction | None = None) -> RegistryEntry:
    """Register a custom kind with the process-wide registry."""
    return default_registry.register(kind, info=info, parse=parse)


def parse(token: str) -> Grantable:
    """Parse a single token with the process-wide registry."""
    return default_registry.dispatch(token)


def parse_all(text: str) -> list[Grantable]:
    """Parse a whole descriptor with the process-wide registry."""
    return default_registry.parse_all(text)
