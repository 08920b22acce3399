import io
import logging
import sys
from typing import Any, Optional

from bracefmt._core.config import DEFAULT_SYNTAX, SyntaxConfig
from bracefmt._core.flags import render_value
from bracefmt._core.renderer import RenderOutcome, Sink, render_flagged, render_plain

logger: logging.Logger = logging.getLogger(__name__)


def osprintf(
    sink: Sink,
    fmt: str,
    *values: Any,
    plain: bool = False,
    syntax: SyntaxConfig = DEFAULT_SYNTAX,
) -> RenderOutcome:
    """Format values into fmt and write the result to sink

    Args:
        sink: where output is written
        fmt: template with placeholders
        values: values to substitute, in order
        plain: only substitute '{}' placeholders, without specifiers
        syntax: marker characters

    Returns:
        whether every placeholder was substituted
    """
    if plain:
        return render_plain(sink, fmt, values, syntax=syntax)
    else:
        return render_flagged(sink, fmt, values, syntax=syntax)


def olprintf(
    sink: Sink,
    fmt: str,
    *values: Any,
    plain: bool = False,
    syntax: SyntaxConfig = DEFAULT_SYNTAX,
) -> RenderOutcome:
    """Same as osprintf, followed by a newline"""
    outcome = osprintf(sink, fmt, *values, plain=plain, syntax=syntax)
    sink.write("\n")
    return outcome


def printf(
    fmt: str, *values: Any, plain: bool = False, syntax: SyntaxConfig = DEFAULT_SYNTAX
) -> RenderOutcome:
    """Same as osprintf, writing to stdout"""
    return osprintf(sys.stdout, fmt, *values, plain=plain, syntax=syntax)


def lprintf(
    fmt: str, *values: Any, plain: bool = False, syntax: SyntaxConfig = DEFAULT_SYNTAX
) -> RenderOutcome:
    """Same as olprintf, writing to stdout"""
    return olprintf(sys.stdout, fmt, *values, plain=plain, syntax=syntax)


def println(*values: Any, sink: Optional[Sink] = None) -> None:
    """Write every value separated by a space, then a newline

    Args:
        values: values to write with their default textual form
        sink: where output is written, stdout if not given
    """
    if sink is None:
        sink = sys.stdout

    sink.write(" ".join(render_value(v) for v in values))
    sink.write("\n")


def format_string(
    fmt: str, *values: Any, plain: bool = False, syntax: SyntaxConfig = DEFAULT_SYNTAX
) -> str:
    """Format values into fmt and return the result

    Example:

        >>> format_string("{} is {#} in hex", 255, 255)
        '255 is ff in hex'
        >>> format_string("{}{}", "x")
        'x{}'
    """
    buffer = io.StringIO()
    outcome = osprintf(buffer, fmt, *values, plain=plain, syntax=syntax)
    logger.debug("Formatted '%s' with outcome %s", fmt, outcome)
    return buffer.getvalue()
