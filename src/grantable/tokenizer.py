"""Descriptor tokenizer.

Splits a descriptor such as ``"iron_sword, (wool:red:2, $5), #arena.vip"``
into its top-level tokens. A parenthesized group is always one token, no
matter how many commas it contains.
"""

from src.grantable.errors import EmptyInputError, MalformedGroupError


def _find_group_end(text: str, start: int) -> int:
    """Return the index just past the parenthesis closing the group at start."""
    depth = 0
    for pos in range(start, len(text)):
        char = text[pos]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return pos + 1
    raise MalformedGroupError(f"Unmatched open parenthesis: '{text[start:]}'", token=text[start:])


def tokenize(text: str) -> list[str]:
    """Split a descriptor into top-level tokens.

    Args:
        text: Raw descriptor string.

    Returns:
        Trimmed, non-empty tokens in input order. Group tokens keep their
        enclosing parentheses.

    Raises:
        EmptyInputError: If text is None.
        MalformedGroupError: On a stray close parenthesis, an unclosed
            group, or text between a group and the next comma.

    Examples:
        >>> tokenize("a,(b,c),d")
        ['a', '(b,c)', 'd']
    """
    if text is None:
        raise EmptyInputError("Input cannot be None")

    text = text.strip()
    tokens: list[str] = []
    pos = 0

    while pos < len(text):
        if text[pos] == ")":
            raise MalformedGroupError(f"Unmatched close parenthesis at position {pos}: '{text}'", token=text)

        comma: int
        if text[pos] == "(":
            end = _find_group_end(text, pos)
            token = text[pos:end]
            comma = text.find(",", end)
            if comma == -1:
                comma = len(text)
            trailing = text[end:comma].strip()
            if trailing:
                raise MalformedGroupError(
                    f"Unexpected '{trailing}' after group '{token}'", token=token + trailing
                )
        else:
            comma = text.find(",", pos)
            if comma == -1:
                comma = len(text)
            token = text[pos:comma].strip()

        if token:
            tokens.append(token)

        # Skip the comma and any spaces after it
        pos = comma + 1
        while pos < len(text) and text[pos] == " ":
            pos += 1

    return tokens


class Tokenizer:
    """Single-pass token queue over a descriptor.

    Examples:
        >>> tokens = Tokenizer("$5, perm:arena.vip")
        >>> tokens.next()
        '$5'
        >>> tokens.has_next()
        True
    """

    def __init__(self, text: str) -> None:
        self._tokens = tokenize(text)
        self._pos = 0

    def has_next(self) -> bool:
        """Check if any tokens remain."""
        return self._pos < len(self._tokens)

    def next(self) -> str:
        """Return the next token.

        Raises:
            EmptyInputError: If the tokenizer is exhausted.
        """
        if not self.has_next():
            raise EmptyInputError("No more tokens in input")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def __iter__(self):
        while self.has_next():
            yield self.next()

    def __len__(self) -> int:
        return len(self._tokens) - self._pos
