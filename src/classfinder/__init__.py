"""Class discovery under a dotted package prefix."""

from .finder import ClassFinder, list_classes

__all__ = [
    "ClassFinder",
    "list_classes",
]
