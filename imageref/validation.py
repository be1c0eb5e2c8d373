"""
Input validation for image references.

Provides the naming rules applied on top of the reference grammar.
"""

import logging
import re

from .config import config
from .errors import InvalidFormat

logger = logging.getLogger(__name__)

ID_REGEXP = re.compile(r"^[a-f0-9]{64}$")


def is_id(name: str) -> bool:
    """
    Check whether name is a full image ID (64 lowercase hex characters).

    Example:
        >>> is_id("a" * 64)
        True
        >>> is_id("ubuntu")
        False
    """
    return ID_REGEXP.match(name) is not None


def validate_id(name: str) -> None:
    """
    Reject repository names that are image IDs.

    Args:
        name: Normalized repository name

    Raises:
        InvalidFormat: If name is a 64-character hexadecimal string

    Note:
        64-character hex strings are reserved for content-addressed image IDs,
        a repository with such a name could never be told apart from one.
    """
    if is_id(name):
        logger.debug(f"Repository name is an image ID: {name}")
        raise InvalidFormat(
            f"Invalid repository name ({name}), cannot specify 64-byte hexadecimal strings"
        )


def validate_reference_length(remote: str) -> None:
    """
    Validate the length of a raw reference string.

    Raises:
        InvalidFormat: If remote is empty or longer than MAX_REFERENCE_LENGTH
    """
    if not remote or len(remote) > config.MAX_REFERENCE_LENGTH:
        logger.warning(f"Invalid reference length: {len(remote)}")
        raise InvalidFormat(
            f"Invalid reference: must be 1-{config.MAX_REFERENCE_LENGTH} characters"
        )

    logger.debug(f"Reference length validated: {remote}")
