from typing import Optional


class BracefmtException(Exception):
    """Base exception

    Fields are internal and might change in future without warning

    Attributes:
        template: template that caused this issue, if known
    """

    template: Optional[str] = None


class MalformedSpecifierError(BracefmtException):
    """A placeholder contained a character that is not a known specifier"""

    def __init__(self, template: str, offset: int) -> None:
        super().__init__(
            f"Malformed placeholder at offset {offset} in template '{template}'"
        )
        self.template = template
        self.offset = offset


class MissingValueError(BracefmtException):
    """Template has more placeholders than values were given"""

    def __init__(self, template: str, placeholders: int, values: int) -> None:
        super().__init__(
            f"Template '{template}' has at least {placeholders} placeholders but only {values} values were given"
        )
        self.template = template
        self.placeholders = placeholders
        self.values = values


class InvalidConfigurationException(BracefmtException):
    """A configuration value (from the cli or a syntax file) was invalid"""


class UnexpectedDocumentsError(BracefmtException):
    """Multiple documents were found in a YAML file when only one was expected"""
