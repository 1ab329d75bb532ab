"""
unitfold.units
==============

Registry-backed unit lookup.

``unitfold.units.u`` is a ``UnitNamespace`` over ``DEFAULT_REGISTRY``, so
``u.N`` or ``u("volt")`` return registered units. The registry module is
only imported when ``u`` is first touched, so importing ``unitfold`` does
not bootstrap any units.
"""

from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:  # pragma: no cover
    from unitfold.units.registry import UnitNamespace, UnitsRegistry

_LAZY_NAMES = ("u",)


def _get_default_registry() -> "UnitsRegistry":
    from unitfold.units import registry

    # Looked up on every call so a swapped-in DEFAULT_REGISTRY is honoured.
    return registry.DEFAULT_REGISTRY


def _default_namespace() -> "UnitNamespace":
    return _get_default_registry().as_namespace()


def __getattr__(name: str) -> Any:
    if name == "u":
        return _default_namespace()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> List[str]:
    return sorted(set(globals()) | set(_LAZY_NAMES))
