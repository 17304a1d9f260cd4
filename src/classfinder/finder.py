"""Discover classes defined under a dotted package prefix."""
from __future__ import annotations

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Iterator, List, Optional, Sequence

from utils.logging import get_logger


LOGGER = get_logger(__name__)


def _with_nested(cls: type) -> Iterator[type]:
    yield cls
    for name, member in sorted(vars(cls).items()):
        if inspect.isclass(member) and member.__qualname__ == f"{cls.__qualname__}.{name}":
            yield from _with_nested(member)


def _classes_defined_in(module: ModuleType) -> List[type]:
    classes: List[type] = []
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ == module.__name__:
            classes.extend(_with_nested(obj))
    return classes


class ClassFinder:
    """Find all classes importable from ``package_name`` and its subpackages."""

    def __init__(
        self,
        package_name: str,
        *,
        exclude: Sequence[str] = (),
        skip_errors: bool = False,
    ) -> None:
        self.package_name = package_name
        self.exclude = frozenset(exclude)
        self.skip_errors = skip_errors

    def _is_excluded(self, module_name: str) -> bool:
        relative = module_name[len(self.package_name):].lstrip(".")
        return any(segment in self.exclude for segment in relative.split(".") if segment)

    def _import(self, module_name: str) -> Optional[ModuleType]:
        try:
            return importlib.import_module(module_name)
        except Exception as exc:
            if not self.skip_errors:
                raise
            LOGGER.warning("Skipping module %s: %s", module_name, exc)
            return None

    def _walk(self, module: ModuleType) -> Iterator[ModuleType]:
        yield module
        search_path = getattr(module, "__path__", None)
        if search_path is None:
            return
        for info in pkgutil.iter_modules(search_path, prefix=f"{module.__name__}."):
            if self._is_excluded(info.name):
                continue
            child = self._import(info.name)
            if child is not None:
                yield from self._walk(child)

    def iter_modules(self) -> Iterator[ModuleType]:
        """Yield the root module followed by every non-excluded submodule."""

        yield from self._walk(importlib.import_module(self.package_name))

    def get_classes(self) -> List[type]:
        """Return the classes defined in every visited module."""

        classes: List[type] = []
        for module in self.iter_modules():
            found = _classes_defined_in(module)
            LOGGER.debug("Found %d classes in %s", len(found), module.__name__)
            classes.extend(found)
        return classes


def list_classes(package_name: str, *, exclude: Sequence[str] = (), skip_errors: bool = False) -> List[type]:
    """Shortcut for ``ClassFinder(...).get_classes()``."""

    return ClassFinder(package_name, exclude=exclude, skip_errors=skip_errors).get_classes()
