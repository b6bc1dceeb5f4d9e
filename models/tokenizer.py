"""Command line tokenizer."""

from models.errors import TokenizeError, TokenizeErrorKind

QUOTE_CHARS = ("'", '"')

# str.isspace() also accepts the ASCII information separators; they are not
# whitespace on the command line.
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(ch: str) -> bool:
    """Return True if ``ch`` separates tokens."""
    return ch.isspace() and ch not in INFORMATION_SEPARATORS


def strip_whitespace(line: str) -> str:
    """Trim leading and trailing whitespace as defined by is_whitespace."""
    start, end = 0, len(line)
    while start < end and is_whitespace(line[start]):
        start += 1
    while end > start and is_whitespace(line[end - 1]):
        end -= 1
    return line[start:end]


def tokenize(line: str) -> list[str]:
    """Split a raw command line into argument tokens.

    Tokens are separated by runs of unquoted whitespace. A single or double
    quote opens a literal span that ends at the next occurrence of the same
    quote character; the quotes themselves are dropped. Quotes do not nest
    and no escape sequences are recognized. Quoted and unquoted text that
    touch each other form one token, and a token that ends up empty (for
    example a bare ``""``) is not emitted.

    Args:
        line: The raw command line.

    Returns:
        The tokens in order. Empty or all-whitespace input yields ``[]``.

    Raises:
        TokenizeError: If the line ends inside a quoted span.

    Example:
        >>> tokenize('echo "a b" c')
        ['echo', 'a b', 'c']
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None

    for ch in line:
        if quote is not None:
            if ch == quote:
                quote = None
            else:
                current.append(ch)
            continue

        if ch in QUOTE_CHARS:
            quote = ch
        elif is_whitespace(ch):
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)

    if quote is not None:
        raise TokenizeError(TokenizeErrorKind.UNCLOSED_QUOTE, "Unclosed quote")

    if current:
        tokens.append("".join(current))

    return tokens
