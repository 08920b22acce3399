"""Brace-placeholder printf with inline specifiers"""

from warnings import filterwarnings

from beartype.claw import beartype_this_package
from beartype.roar import BeartypeDecorHintPep585DeprecationWarning

beartype_this_package()

filterwarnings("ignore", category=BeartypeDecorHintPep585DeprecationWarning)

from bracefmt._core.config import SyntaxConfig, load_syntax_config  # noqa: E402
from bracefmt._core.exceptions import (  # noqa: E402
    BracefmtException,
    InvalidConfigurationException,
    MalformedSpecifierError,
    MissingValueError,
)
from bracefmt._core.flags import Align, Base, FormatFlags, render_value  # noqa: E402
from bracefmt._core.renderer import (  # noqa: E402
    RenderOutcome,
    Sink,
    check_template,
    render_flagged,
    render_plain,
)
from bracefmt._core.specifier import ParsedSpecifier, parse_specifiers  # noqa: E402
from bracefmt.printer import (  # noqa: E402
    format_string,
    lprintf,
    olprintf,
    osprintf,
    println,
    printf,
)

__version__ = "1.0.0"

__all__ = [
    "Align",
    "Base",
    "BracefmtException",
    "FormatFlags",
    "InvalidConfigurationException",
    "MalformedSpecifierError",
    "MissingValueError",
    "ParsedSpecifier",
    "RenderOutcome",
    "Sink",
    "SyntaxConfig",
    "check_template",
    "format_string",
    "load_syntax_config",
    "lprintf",
    "olprintf",
    "osprintf",
    "parse_specifiers",
    "println",
    "printf",
    "render_flagged",
    "render_plain",
    "render_value",
]
