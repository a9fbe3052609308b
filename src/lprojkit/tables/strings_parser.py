"""Parser for the .strings table format.

A .strings file is an old-style property list restricted to a flat
dictionary of strings:

    /* Title of the main window */
    "window.title" = "Documents";
    // Line comments are accepted too
    greeting = "Hello, %@!";
    "ok";

The shorthand ``"ok";`` maps the key to itself. Keys and values are
either double-quoted strings with backslash escapes or unquoted tokens.

Files produced by Xcode are usually UTF-16 with a byte order mark, older
ones UTF-8. Compiled bundles may also contain XML or binary property
lists, which are handed to plistlib.

Python 3.13+. Zero external dependencies.
"""

import codecs
import plistlib

from lprojkit.diagnostics import ErrorTemplate, SourceSpan, StringsSyntaxError

__all__ = ["decode_strings", "parse_strings", "parse_strings_data"]

# Characters allowed in unquoted tokens (NeXTSTEP plist grammar).
_UNQUOTED_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$+/:.-"
)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "\\": "\\",
    "\n": "\n",
}

_OCTAL_DIGITS = "01234567"
_HEX_DIGITS = "0123456789abcdefABCDEF"


class _StringsParser:
    """Recursive-descent parser over a single source string."""

    __slots__ = ("_pos", "_source")

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def _span(self, pos: int | None = None) -> SourceSpan:
        return SourceSpan.at(self._source, self._pos if pos is None else pos)

    @property
    def _is_eof(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self, offset: int = 0) -> str | None:
        target = self._pos + offset
        if target >= len(self._source):
            return None
        return self._source[target]

    def parse(self) -> dict[str, str]:
        entries: dict[str, str] = {}
        self._skip_trivia()
        while not self._is_eof:
            key = self._parse_token("a key")
            self._skip_trivia()
            if self._peek() == ";":
                value = key
            else:
                self._expect("=")
                self._skip_trivia()
                value = self._parse_token("a value")
                self._skip_trivia()
            self._expect(";")
            # Later duplicates win, matching CFPropertyList behavior.
            entries[key] = value
            self._skip_trivia()
        return entries

    def _expect(self, char: str) -> None:
        current = self._peek()
        if current is None:
            raise StringsSyntaxError(ErrorTemplate.unexpected_eof(self._span(), repr(char)))
        if current != char:
            raise StringsSyntaxError(
                ErrorTemplate.expected_token(self._span(), repr(char), current)
            )
        self._pos += 1

    def _skip_trivia(self) -> None:
        """Skip whitespace and comments."""
        source = self._source
        while not self._is_eof:
            char = source[self._pos]
            if char.isspace() or char == "\ufeff":
                self._pos += 1
            elif char == "/" and self._peek(1) == "*":
                start = self._pos
                end = source.find("*/", self._pos + 2)
                if end == -1:
                    raise StringsSyntaxError(ErrorTemplate.unterminated_comment(self._span(start)))
                self._pos = end + 2
            elif char == "/" and self._peek(1) == "/":
                end = source.find("\n", self._pos)
                self._pos = len(source) if end == -1 else end + 1
            else:
                return

    def _parse_token(self, expected: str) -> str:
        current = self._peek()
        if current is None:
            raise StringsSyntaxError(ErrorTemplate.unexpected_eof(self._span(), expected))
        if current == '"':
            return self._parse_quoted()
        if current in _UNQUOTED_CHARS:
            start = self._pos
            while not self._is_eof and self._source[self._pos] in _UNQUOTED_CHARS:
                self._pos += 1
            return self._source[start : self._pos]
        raise StringsSyntaxError(ErrorTemplate.expected_token(self._span(), expected, current))

    def _parse_quoted(self) -> str:
        start = self._pos
        self._pos += 1  # opening quote
        chunks: list[str] = []
        source = self._source
        while True:
            if self._is_eof:
                raise StringsSyntaxError(ErrorTemplate.unterminated_string(self._span(start)))
            char = source[self._pos]
            if char == '"':
                self._pos += 1
                return "".join(chunks)
            if char == "\\":
                chunks.append(self._parse_escape())
            else:
                chunks.append(char)
                self._pos += 1

    def _parse_escape(self) -> str:
        start = self._pos
        self._pos += 1  # backslash
        char = self._peek()
        if char is None:
            raise StringsSyntaxError(ErrorTemplate.unterminated_string(self._span(start)))

        if char in _SIMPLE_ESCAPES:
            self._pos += 1
            return _SIMPLE_ESCAPES[char]

        if char in "uU":
            code = self._read_code_unit(start)
            if 0xD800 <= code <= 0xDBFF:
                # Characters outside the BMP are written as a UTF-16 pair: \UD83D\UDE00
                low = self._read_low_surrogate()
                if low is None:
                    raise StringsSyntaxError(
                        ErrorTemplate.invalid_escape(self._span(start), f"\\U{code:04X}")
                    )
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            if 0xDC00 <= code <= 0xDFFF:
                raise StringsSyntaxError(
                    ErrorTemplate.invalid_escape(self._span(start), f"\\U{code:04X}")
                )
            return chr(code)

        if char in _OCTAL_DIGITS:
            # Up to three octal digits: \101 -> "A"
            digits = char
            while len(digits) < 3:
                nxt = self._peek(len(digits))
                if nxt is None or nxt not in _OCTAL_DIGITS:
                    break
                digits += nxt
            self._pos += len(digits)
            return chr(int(digits, 8))

        # Unknown escapes keep the escaped character.
        self._pos += 1
        return char

    def _read_code_unit(self, start: int) -> int:
        """Consume the "u" and four hex digits of a Unicode escape."""
        escape = self._source[self._pos]
        digits = self._source[self._pos + 1 : self._pos + 5]
        if len(digits) != 4 or any(d not in _HEX_DIGITS for d in digits):
            raise StringsSyntaxError(
                ErrorTemplate.invalid_escape(self._span(start), "\\" + escape + digits)
            )
        self._pos += 5
        return int(digits, 16)

    def _read_low_surrogate(self) -> int | None:
        """Consume a following \\uXXXX escape if it holds a low surrogate."""
        if self._peek() != "\\" or self._peek(1) not in ("u", "U"):
            return None
        digits = self._source[self._pos + 2 : self._pos + 6]
        if len(digits) != 4 or any(d not in _HEX_DIGITS for d in digits):
            return None
        code = int(digits, 16)
        if not 0xDC00 <= code <= 0xDFFF:
            return None
        self._pos += 6
        return code


def parse_strings(source: str) -> dict[str, str]:
    """Parse .strings source text into a key/value mapping.

    Args:
        source: Decoded .strings source

    Returns:
        Mapping of keys to values in file order

    Raises:
        StringsSyntaxError: If the source is malformed

    Example:
        >>> parse_strings('"hello" = "Hallo"; /* note */ bye = "Tschüss";')
        {'hello': 'Hallo', 'bye': 'Tschüss'}
    """
    return _StringsParser(source).parse()


def decode_strings(data: bytes) -> str:
    """Decode .strings bytes, honoring UTF-8 and UTF-16 byte order marks.

    Without a BOM the data is decoded as UTF-8, falling back to UTF-16 when
    the bytes look like BOM-less UTF-16 (NUL bytes in the first pair).

    Raises:
        UnicodeDecodeError: If the bytes are not valid in the detected encoding
    """
    if data.startswith(codecs.BOM_UTF8):
        return data[len(codecs.BOM_UTF8) :].decode("utf-8")
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return data.decode("utf-16")
    if len(data) >= 2 and data[0] == 0:
        return data.decode("utf-16-be")
    if len(data) >= 2 and data[1] == 0:
        return data.decode("utf-16-le")
    return data.decode("utf-8")


def parse_strings_data(data: bytes) -> dict[str, str]:
    """Parse the raw bytes of a .strings file.

    XML and binary property lists are delegated to plistlib; everything else
    goes through the text parser.

    Raises:
        StringsSyntaxError: If text source is malformed
        UnicodeDecodeError: If text source cannot be decoded
        plistlib.InvalidFileException: If an XML or binary plist is corrupt
        ValueError: If a property list root is not a dictionary of strings
    """
    stripped = data.lstrip()
    if data.startswith(b"bplist") or stripped.startswith(b"<?xml"):
        root = plistlib.loads(data)
        if not isinstance(root, dict):
            msg = f"Expected dictionary at property list root, got {type(root).__name__}"
            raise ValueError(msg)
        return {str(key): str(value) for key, value in root.items()}
    return parse_strings(decode_strings(data))
