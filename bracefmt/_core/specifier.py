import dataclasses
import logging
import string
import sys
from typing import Optional

from bracefmt._core.config import DEFAULT_SYNTAX, SyntaxConfig
from bracefmt._core.flags import Align, Base, FormatFlags

logger: logging.Logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ParsedSpecifier:
    """Result of parsing the inside of one placeholder

    Attributes:
        flags: flags to render the bound value with
        cursor: offset in the template just past the placeholder
    """

    flags: FormatFlags
    cursor: int


def _digit_run_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in string.digits:
        end += 1
    return end


def _read_number(text: str, start: int, end: int) -> Optional[int]:
    try:
        number = int(text[start:end])
    except ValueError:
        number = None

    if number is None or number > sys.maxsize:
        logger.debug("Number at offset %d in '%s' is too large", start, text)
        return None

    return number


def parse_specifiers(
    text: str, cursor: int, syntax: SyntaxConfig = DEFAULT_SYNTAX
) -> Optional[ParsedSpecifier]:
    """Parse the specifier characters of a placeholder

    Scanning stops at the closing marker or at the end of the text, an
    unterminated placeholder is treated as closed by the end of the text.

    Example:

        >>> parse_specifiers("{5*-}", 1).flags
        FormatFlags(base=<Base.DECIMAL: 1>, align=<Align.LEFT: 2>, width=5, fill='*', precision=None)

    Args:
        text: whole template
        cursor: offset just past the opening marker
        syntax: marker characters

    Returns:
        parsed flags and the offset just past the closing marker, or None if
        the placeholder contained a character that is not a specifier
    """
    fields: dict = {}
    i = cursor

    while i < len(text) and text[i] != syntax.close:
        c = text[i]

        if c == syntax.hexadecimal:
            fields["base"] = Base.HEXADECIMAL
            i += 1
        elif c == syntax.octal:
            fields["base"] = Base.OCTAL
            i += 1
        elif c == syntax.left:
            fields["align"] = Align.LEFT
            i += 1
        elif c == syntax.precision:
            end = _digit_run_end(text, i + 1)
            if end > i + 1:
                precision = _read_number(text, i + 1, end)
                if precision is None:
                    return None
                fields["precision"] = precision
            i = end
        elif c in string.digits:
            end = _digit_run_end(text, i)
            width = _read_number(text, i, end)
            if width is None:
                return None
            fields["width"] = width
            i = end
            # The character after the width is the fill, unless it closes the placeholder
            if i < len(text) and text[i] != syntax.close:
                fields["fill"] = text[i]
                i += 1
        else:
            logger.debug("Unrecognised specifier '%s' at offset %d in '%s'", c, i, text)
            return None

    return ParsedSpecifier(FormatFlags(**fields), min(i + 1, len(text)))
