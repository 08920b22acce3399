import dataclasses
import logging
import os
from collections.abc import Mapping
from typing import Union

from bracefmt._core import exceptions
from bracefmt._core.loader import load_single_document_yaml

logger: logging.Logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class SyntaxConfig:
    """Marker characters recognised in templates

    Attributes:
        open: starts a placeholder
        close: ends a placeholder
        hexadecimal: switches integers to base 16
        octal: switches integers to base 8
        left: left-justifies the value inside its width
        precision: followed by digits, sets the number of decimals
    """

    open: str = "{"
    close: str = "}"
    hexadecimal: str = "#"
    octal: str = "~"
    left: str = "-"
    precision: str = "."

    def __post_init__(self) -> None:
        markers = dataclasses.asdict(self)

        for name, marker in markers.items():
            if len(marker) != 1:
                raise exceptions.InvalidConfigurationException(
                    f"Marker '{name}' must be a single character, got '{marker}'"
                )
            if marker.isdigit():
                raise exceptions.InvalidConfigurationException(
                    f"Marker '{name}' cannot be a digit, got '{marker}'"
                )

        if len(set(markers.values())) != len(markers):
            raise exceptions.InvalidConfigurationException(
                f"Markers must all be different, got {markers}"
            )

    @property
    def plain_token(self) -> str:
        """Placeholder used when substituting without specifiers"""
        return self.open + self.close

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "SyntaxConfig":
        valid_keys = {f.name for f in dataclasses.fields(cls)}
        unexpected = set(mapping) - valid_keys

        if unexpected:
            raise exceptions.InvalidConfigurationException(
                "Unexpected keys {} in syntax config - expected some of {}".format(
                    sorted(unexpected), sorted(valid_keys)
                )
            )

        for name, marker in mapping.items():
            if not isinstance(marker, str):
                raise exceptions.InvalidConfigurationException(
                    f"Marker '{name}' should be a string, got {type(marker)}"
                )

        return cls(**mapping)


DEFAULT_SYNTAX = SyntaxConfig()


def load_syntax_config(paths: list[Union[str, os.PathLike]]) -> SyntaxConfig:
    """Given a list of file paths to syntax files, load each of them and
    build a config from the joined contents.

    Files later in the list override keys from earlier ones.

    Args:
        paths: List of filenames to load from

    Returns:
        syntax built from the files, or the default syntax if no files were given
    """
    joined: dict = {}

    for filename in paths:
        contents = load_single_document_yaml(filename)

        if contents is None:
            logger.debug("Syntax file %s is empty", filename)
            continue
        if not isinstance(contents, Mapping):
            raise exceptions.InvalidConfigurationException(
                f"Syntax file {filename} should contain a mapping, got {type(contents)}"
            )

        joined.update(contents)

    logger.debug("Loaded syntax config %s from %s", joined, paths)

    return SyntaxConfig.from_mapping(joined)
