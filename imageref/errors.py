"""
Error types raised while parsing and normalizing image references.

All errors derive from ImageReferenceError so callers can catch every rejection
with a single except clause, while still telling grammar failures apart from
domain rule violations.
"""


class ImageReferenceError(ValueError):
    """Base class for every rejected image reference."""

    kind = "invalid_reference"


class ReferenceSyntaxError(ImageReferenceError):
    """The string is not a grammatically valid reference."""

    kind = "syntax_error"


class InvalidFormat(ImageReferenceError):
    """
    The reference is grammatically valid but breaks a naming rule.

    Raised for repository paths that are not lowercase and for names that are
    64-character hexadecimal strings (reserved for image IDs).
    """

    kind = "invalid_format"
