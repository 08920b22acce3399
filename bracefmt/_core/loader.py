import logging
import os
from typing import Any, Union

import yaml

from bracefmt._core import exceptions

logger: logging.Logger = logging.getLogger(__name__)


def load_single_document_yaml(filename: Union[str, os.PathLike]) -> Any:
    """
    Load a yaml file and expect only one document

    Args:
        filename: path to document

    Returns:
        content of file

    Raises:
        UnexpectedDocumentsError: If more than one document was in the file
    """

    logger.debug("Loading yaml document from %s", filename)

    with open(filename, "r", encoding="utf-8") as fileobj:
        try:
            contents = yaml.load(fileobj, Loader=yaml.SafeLoader)
        except yaml.composer.ComposerError as e:
            msg = "Expected only one document in this file but found multiple"
            raise exceptions.UnexpectedDocumentsError(msg) from e

    return contents
