"""Prefix metadata for grantable kinds.

Every kind that takes part in dispatch describes how its tokens start:
an optional one-character shorthand symbol (``$5``) and a keyword prefix
expression followed by a colon (``eco:5``). Optional parts of the keyword
are wrapped in parentheses, so ``p(erm(ission))`` accepts ``p``, ``perm``
and ``permission``.
"""

import re
from dataclasses import dataclass

from src.grantable.errors import RegistrationError


# Characters that already mean something in the descriptor grammar or in
# the config files the descriptors live in.
QUOTE_SYMBOLS = frozenset("'\"`´")
BRACKET_SYMBOLS = frozenset("()[]{}")
SLASH_SYMBOLS = frozenset("\\/|")
SEPARATOR_SYMBOLS = frozenset(",:;")

PREFIX_CHARS = re.compile(r"^[A-Za-z0-9_.()-]+$")


@dataclass(frozen=True)
class GrantableInfo:
    """Symbol and keyword prefix of a grantable kind.

    Attributes:
        prefix: Keyword expression, e.g. "eco(nomy)".
        symbol: Optional shorthand character, e.g. "$".
    """

    prefix: str
    symbol: str | None = None


def validate_prefix(prefix: str) -> None:
    """Check that a keyword expression is well formed.

    Raises:
        RegistrationError: On empty input, unsupported characters or
            unbalanced parentheses. The message marks the position with a
            caret.
    """
    if not prefix or not prefix.replace("(", "").replace(")", ""):
        raise RegistrationError("Prefix cannot be empty", token=prefix)
    if not PREFIX_CHARS.match(prefix):
        raise RegistrationError(
            f"Prefix may only contain letters, digits, '_', '.', '-' and parentheses: {prefix}",
            token=prefix,
        )

    open_positions: list[int] = []
    for i, char in enumerate(prefix):
        if char == "(":
            open_positions.append(i)
        elif char == ")":
            if not open_positions:
                _unmatched_parenthesis(prefix, i, "Unmatched close parenthesis")
            open_positions.pop()

    if open_positions:
        _unmatched_parenthesis(prefix, open_positions[-1], "Unmatched open parenthesis")


def _unmatched_parenthesis(prefix: str, position: int, reason: str) -> None:
    marker = " " * position + "^"
    raise RegistrationError(f"{reason}:\n{prefix}\n{marker}", token=prefix)


def validate_symbol(symbol: str | None) -> None:
    """Check that a shorthand symbol does not clash with the grammar.

    Raises:
        RegistrationError: If the symbol is not a single character, or is
            alphanumeric, whitespace, a quote or tick, a bracket, a slash or
            pipe, or a separator.
    """
    if symbol is None:
        return
    if len(symbol) != 1:
        raise RegistrationError(f"Symbol must be a single character: '{symbol}'", token=symbol)
    if symbol.isalnum():
        raise RegistrationError(f"Alpha-numeric symbols are not supported: {symbol}", token=symbol)
    if symbol.isspace():
        raise RegistrationError("Whitespace is not a valid parser symbol", token=symbol)
    if symbol in QUOTE_SYMBOLS:
        raise RegistrationError(f"Quotes and ticks are invalid parser symbols: {symbol}", token=symbol)
    if symbol in BRACKET_SYMBOLS:
        raise RegistrationError(
            f"Parentheses, brackets, and braces are invalid parser symbols: {symbol}",
            token=symbol,
        )
    if symbol in SLASH_SYMBOLS:
        raise RegistrationError(f"Slashes and pipes are invalid parser symbols: {symbol}", token=symbol)
    if symbol in SEPARATOR_SYMBOLS:
        raise RegistrationError(f"Separators are invalid parser symbols: {symbol}", token=symbol)


def validate_info(info: GrantableInfo) -> None:
    """Validate both parts of the metadata."""
    validate_prefix(info.prefix)
    validate_symbol(info.symbol)


def prefix_to_regex(prefix: str) -> str:
    """Translate a keyword expression into a regular expression.

    Examples:
        >>> prefix_to_regex("p(erm(ission))")
        'p(?:erm(?:ission)?)?'
    """
    parts = []
    for char in prefix:
        if char == "(":
            parts.append("(?:")
        elif char == ")":
            parts.append(")?")
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def compile_pattern(info: GrantableInfo) -> re.Pattern[str]:
    """Compile the token pattern for a kind.

    Group 1 is the prefix (symbol, or keyword plus colon) and group 2 is the
    value body. The symbol form needs no colon.
    """
    validate_info(info)
    head = prefix_to_regex(info.prefix) + ":"
    if info.symbol is not None:
        head = re.escape(info.symbol) + "|" + head
    return re.compile(f"({head})([^,]+)")


def strip_prefix(pattern: re.Pattern[str], token: str) -> str:
    """Return the body of a token, or the token itself if it has no prefix."""
    match = pattern.fullmatch(token)
    if match:
        return match.group(2)
    return token
