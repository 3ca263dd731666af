"""
Sorter registry.

Sorters are looked up by name so the CLI, the verifier and the complexity
benchmark can be pointed at any of them from configuration. Built-in sorters
register themselves with `register_sorter`; a sorter living elsewhere is named
by a 'package.module:attr' reference, where `attr` is a sorter class or a
zero-argument factory.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, MutableSequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from sortlab.sorters import SortStats

logger = logging.getLogger(__name__)


class Sorter(Protocol):
    """Protocol for in-place sorters."""

    name: str

    def sort(
        self, seq: MutableSequence[Any], stats: SortStats | None = None
    ) -> MutableSequence[Any]: ...


_BUILTIN_SORTERS: dict[str, type] = {}


def register_sorter(name: str) -> Callable[[type], type]:
    """Class decorator adding a sorter under `name`."""

    def _decorator(cls: type) -> type:
        if name in _BUILTIN_SORTERS and _BUILTIN_SORTERS[name] is not cls:
            logger.warning(
                f"Sorter name '{name}' re-registered: "
                f"{_BUILTIN_SORTERS[name].__qualname__} replaced by {cls.__qualname__}"
            )
        _BUILTIN_SORTERS[name] = cls
        return cls

    return _decorator


def available_sorters() -> list[str]:
    return sorted(_BUILTIN_SORTERS)


def _import_sorter(reference: str) -> Sorter:
    """Build a sorter from 'module:attr', naming the step that failed"""
    module_name, _, attr_name = reference.partition(":")
    if not module_name or not attr_name:
        raise ValueError(f"Sorter reference '{reference}' must look like 'module:attr'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Sorter reference '{reference}': cannot import module: {e}") from e

    factory = getattr(module, attr_name, None)
    if factory is None:
        raise ValueError(
            f"Sorter reference '{reference}': module '{module_name}' has no attribute "
            f"'{attr_name}'"
        )
    if not callable(factory):
        raise ValueError(f"Sorter reference '{reference}': '{attr_name}' is not callable")

    sorter = factory()
    if not callable(getattr(sorter, "sort", None)):
        raise ValueError(
            f"Sorter reference '{reference}': {type(sorter).__name__} has no sort() method"
        )
    return sorter


def get_sorter(name: str) -> Sorter:
    """Instantiate a sorter by registered name or 'module:attr' reference."""
    if name in _BUILTIN_SORTERS:
        return _BUILTIN_SORTERS[name]()

    if ":" not in name:
        raise ValueError(
            f"Unknown sorter '{name}'. Available sorters: {', '.join(available_sorters())}"
        )

    try:
        return _import_sorter(name)
    except ValueError as e:
        logger.warning(str(e))
        raise
