import enum
import logging
from collections.abc import Sequence
from typing import Any, Optional, Protocol, runtime_checkable

from bracefmt._core import exceptions
from bracefmt._core.config import DEFAULT_SYNTAX, SyntaxConfig
from bracefmt._core.flags import render_value
from bracefmt._core.specifier import parse_specifiers

logger: logging.Logger = logging.getLogger(__name__)


@runtime_checkable
class Sink(Protocol):
    """Anything text can be written to, eg sys.stdout or io.StringIO"""

    def write(self, s: str, /) -> Any: ...


class RenderOutcome(enum.Enum):
    """How a render finished"""

    # Every placeholder was substituted
    COMPLETE = 1
    # A placeholder contained an unknown specifier, the rest was written as-is
    MALFORMED_SPECIFIER = 2
    # Ran out of values, the rest was written as-is
    VALUES_EXHAUSTED = 3


def _log_surplus(values: Sequence[Any], used: int) -> None:
    if used < len(values):
        logger.debug("Ignoring %d unused values: %s", len(values) - used, values[used:])


def render_plain(
    sink: Sink,
    template: str,
    values: Sequence[Any],
    *,
    syntax: SyntaxConfig = DEFAULT_SYNTAX,
) -> RenderOutcome:
    """Substitute every plain placeholder in template with the next value

    Args:
        sink: where output is written
        template: text containing placeholders
        values: values to substitute, in order
        syntax: marker characters, only open and close are used

    Returns:
        whether every placeholder was substituted
    """
    token = syntax.plain_token
    cursor = 0
    used = 0

    while True:
        found = template.find(token, cursor)

        if found == -1:
            sink.write(template[cursor:])
            _log_surplus(values, used)
            return RenderOutcome.COMPLETE

        sink.write(template[cursor:found])

        if used == len(values):
            logger.debug(
                "No value left for placeholder at offset %d in '%s'", found, template
            )
            sink.write(template[found:])
            return RenderOutcome.VALUES_EXHAUSTED

        sink.write(render_value(values[used]))
        used += 1
        cursor = found + len(token)


def render_flagged(
    sink: Sink,
    template: str,
    values: Sequence[Any],
    *,
    syntax: SyntaxConfig = DEFAULT_SYNTAX,
) -> RenderOutcome:
    """Substitute every placeholder in template with the next value, formatted
    using the specifiers inside the placeholder

    If a placeholder is malformed or there are no values left for it, the
    template from that placeholder onwards is written unchanged. Values left
    over once the template has no more placeholders are ignored.

    Example:

        >>> import io
        >>> out = io.StringIO()
        >>> render_flagged(out, "{#} {5*-}|", [255, 7])
        <RenderOutcome.COMPLETE: 1>
        >>> out.getvalue()
        'ff 7****|'

    Args:
        sink: where output is written
        template: text containing placeholders
        values: values to substitute, in order
        syntax: marker characters

    Returns:
        whether every placeholder was substituted
    """
    cursor = 0
    used = 0

    while True:
        found = template.find(syntax.open, cursor)

        if found == -1:
            sink.write(template[cursor:])
            _log_surplus(values, used)
            return RenderOutcome.COMPLETE

        sink.write(template[cursor:found])

        parsed = parse_specifiers(template, found + 1, syntax)

        if parsed is None:
            logger.debug(
                "Malformed placeholder at offset %d in '%s', writing the rest unchanged",
                found,
                template,
            )
            sink.write(template[found:])
            return RenderOutcome.MALFORMED_SPECIFIER

        if used == len(values):
            logger.debug(
                "No value left for placeholder at offset %d in '%s'", found, template
            )
            sink.write(template[found:])
            return RenderOutcome.VALUES_EXHAUSTED

        sink.write(render_value(values[used], parsed.flags))
        used += 1
        cursor = parsed.cursor


def check_template(
    template: str,
    value_count: Optional[int] = None,
    *,
    plain: bool = False,
    syntax: SyntaxConfig = DEFAULT_SYNTAX,
) -> int:
    """Check a template up front instead of relying on the literal fallback

    Args:
        template: text containing placeholders
        value_count: number of values that will be passed, if known
        plain: check plain placeholders, which never contain specifiers
        syntax: marker characters

    Raises:
        MalformedSpecifierError: if a placeholder contains an unknown specifier
        MissingValueError: if there are more placeholders than value_count

    Returns:
        number of placeholders in the template
    """
    cursor = 0
    placeholders = 0

    while True:
        if plain:
            found = template.find(syntax.plain_token, cursor)
        else:
            found = template.find(syntax.open, cursor)

        if found == -1:
            return placeholders

        if plain:
            next_cursor = found + len(syntax.plain_token)
        else:
            parsed = parse_specifiers(template, found + 1, syntax)
            if parsed is None:
                raise exceptions.MalformedSpecifierError(template, found)
            next_cursor = parsed.cursor

        placeholders += 1

        if value_count is not None and placeholders > value_count:
            raise exceptions.MissingValueError(template, placeholders, value_count)

        cursor = next_cursor
