"""
Reference template loading.
"""
import logging
from pathlib import Path
from typing import Union

from ..core.errors import TemplateLoadError

logger = logging.getLogger(__name__)


def load_reference_template(path: Union[str, Path]) -> str:
    """
    Read the reference contract used as an example in the prompt.

    The file is read on every call so edits on disk are picked up without a
    restart.

    Raises:
        TemplateLoadError: if the file is missing or unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read file {path}: {e}")
        raise TemplateLoadError(path) from e
