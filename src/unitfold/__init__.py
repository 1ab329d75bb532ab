"""
unitfold: a small dimensional-analysis algebra.

Units carry a 5-slot dimension vector (length, time, mass, current, reserved),
a conversion scalar and a display name. Compound units are folded from
``(unit, exponent)`` pairs, which derives their dimension, scalar and name.
The registry and its ``u`` namespace are imported lazily from
``unitfold.units`` to keep import free of side effects.
"""

from importlib import metadata as _metadata


__author__ = "unitfold developers"
__license__ = "MIT"

# Installed metadata first; an uninstalled checkout reads its own pyproject.toml.
try:
    __version__ = _metadata.version("unitfold")
except _metadata.PackageNotFoundError:
    import tomllib
    from pathlib import Path

    _pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        with open(_pyproject, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except FileNotFoundError:
        __version__ = "0.0.0"

from unitfold.core.dimensions import Dimension
from unitfold.core.unit import BaseUnit, CompoundUnit, base, compound

__all__ = [
    "__version__", "__author__", "__license__",
    "Dimension", "BaseUnit", "CompoundUnit", "base", "compound",
]
