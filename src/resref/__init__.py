"""Resource reference (``rr://``) identifiers: grammar, parsing and building."""

from .grammar import MAX_PROPERTIES, RR_PREFIX, RR_URI_PATTERN, is_valid
from .reference import Builder, InvalidFormatError, ResourceReference, parse

__all__ = [
    "MAX_PROPERTIES",
    "RR_PREFIX",
    "RR_URI_PATTERN",
    "is_valid",
    "Builder",
    "InvalidFormatError",
    "ResourceReference",
    "parse",
]
