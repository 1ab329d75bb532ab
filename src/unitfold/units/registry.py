"""
unitfold.units.registry
=======================

A thread-safe registry of units keyed by symbol.

Compound units defined through the registry reference their constituents by
symbol, so every dependency must already be registered when the compound is
built. This makes construction order explicit and rules out self-reference
and cycles without any graph walking.

Key points
----------
- Encapsulates state in a `UnitsRegistry` class (re-entrant lock).
- Data-driven bootstrap of the base units and the derived N -> J -> W -> V chain.
- Aliases (e.g., "meter" → "m") resolved on lookup.
- Clear public API: `register`, `register_alias`, `define_base`,
  `define_compound`, `get`, `has`, `all`.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import ClassVar, Dict, Iterable, Mapping, Optional, Tuple, Union

from unitfold.core.dimensions import CURRENT, LENGTH, MASS, TIME, DimLike
from unitfold.core.unit import BaseUnit, CompoundUnit, Unit

_log = logging.getLogger(__name__)

UnitRef = Union[str, Unit]


def normalize_symbol(s: str) -> str:
    """Strip surrounding whitespace and apply Unicode NFC normalization."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip())


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Thread-safe registry of `BaseUnit` / `CompoundUnit` objects.

    The registry does *not* parse expressions; compound units are declared
    as explicit ``(symbol, exponent)`` lists.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, Unit] = {}
        self._aliases: Dict[str, str] = {}

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    def __len__(self) -> int:
        with self._lock:
            return len(self._units)

    # -------------------------- public API ---------------------------------
    def register(self, unit: Unit, replace: bool = False, symbol: Optional[str] = None) -> None:
        """Register (or overwrite if replace is True) a unit under ``symbol``.

        ``symbol`` defaults to the unit's name. Use `register_alias` to add
        additional spellings without duplication.
        """
        if not isinstance(unit, Unit):
            raise TypeError(f"Expected a unit, got {type(unit).__name__}")

        key = normalize_symbol(symbol if symbol is not None else unit.name)
        if not key:
            raise ValueError("Cannot register a unit without a symbol.")

        with self._lock:
            if key in UnitNamespace._reserved_names:
                raise ValueError(
                    f"Cannot register unit '{key}': "
                    "name conflicts with UnitNamespace attribute/method."
                )

            if not replace:
                if key in self._units:
                    raise ValueError(
                        f"Cannot register unit '{key}': "
                        "a unit with this name already exists."
                    )
                if key in self._aliases:
                    raise ValueError(
                        f"Cannot register unit '{key}': "
                        "an alias with this name already exists."
                    )

            # A replaced alias would otherwise win over the unit in `get`.
            self._aliases.pop(key, None)
            self._units[key] = unit
            _log.debug("Registered unit %r", key)

    def register_alias(self, alias: str, canonical: str, replace: bool = False) -> None:
        key = normalize_symbol(alias)
        target = normalize_symbol(canonical)

        with self._lock:
            if key in UnitNamespace._reserved_names:
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if target not in self._units:
                raise ValueError(
                    f"Cannot register alias '{alias}': unknown unit symbol '{canonical}'."
                )
            if key == target:
                raise ValueError(f"Cannot register alias '{alias}' for itself.")
            if not replace and (key in self._units or key in self._aliases):
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    f"the name '{key}' is already in use."
                )
            if key in self._units:
                _log.debug("Alias %r replaces the unit registered under that name", key)
                self._units.pop(key)
            self._aliases[key] = target

    def define_base(self, symbol: str, dimension: DimLike, scalar: float = 1.0,
                    replace: bool = False) -> BaseUnit:
        """Create and register a `BaseUnit`."""
        unit = BaseUnit(symbol, scalar, dimension)
        self.register(unit, replace)
        return unit

    def define_compound(
        self,
        symbol: str,
        pairs: Iterable[Tuple[UnitRef, int]],
        name: Optional[str] = None,
        replace: bool = False,
    ) -> CompoundUnit:
        """Fold already-registered units into a `CompoundUnit` stored under ``symbol``.

        Each reference may be a symbol (looked up here) or a unit object.
        Raises `ValueError` if a referenced symbol is not registered yet.
        The display name is ``name`` if given, else the generated one.
        """
        with self._lock:
            resolved = [(self._resolve(ref, symbol), exp) for ref, exp in pairs]
            unit = CompoundUnit.from_units(resolved, name=name)
            self.register(unit, replace, symbol=symbol)
        return unit

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except ValueError:
            return False

    def get(self, symbol: str) -> Unit:
        """Lookup a unit by symbol or alias.

        Raises `ValueError` if unknown.
        """
        sym = normalize_symbol(symbol)
        with self._lock:
            sym = self._aliases.get(sym, sym)
            u = self._units.get(sym)
            if u is not None:
                return u
        raise ValueError(f"Unknown unit symbol: {symbol}")

    def all(self) -> Mapping[str, Unit]:
        with self._lock:
            return dict(self._units)

    def aliases(self) -> Mapping[str, str]:
        with self._lock:
            return dict(self._aliases)

    def as_namespace(self) -> UnitNamespace:
        return UnitNamespace(self)

    # ------------------------- internals -----------------------------------
    def _resolve(self, ref: UnitRef, defining: str) -> Unit:
        if not isinstance(ref, str):
            return ref
        if normalize_symbol(ref) == normalize_symbol(defining):
            raise ValueError(f"Compound unit '{defining}' cannot reference itself.")
        try:
            return self.get(ref)
        except ValueError:
            raise ValueError(
                f"Cannot define '{defining}': unit '{ref}' is not registered yet."
            ) from None


class UnitNamespace:
    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: "UnitsRegistry") -> None:
        self._reg = reg

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec)

    def __call__(self, spec: "str") -> "Unit":
        return self._reg.get(spec)

    def __getattr__(self, name: "str") -> "Unit":
        try:
            return self._reg.get(name)
        except ValueError as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit symbols for autocomplete."""
        base_dir = set(super().__dir__())
        return sorted(base_dir | set(self._reg.all()) | set(self._reg.aliases()))

UnitNamespace._reserved_names = set(dir(UnitNamespace))


# ---------------------------------------------------------------------------
# Bootstrap a default registry
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> UnitsRegistry:
    reg = UnitsRegistry()

    # Base units (symbol, dimension)
    base_units = (
        ("m",  LENGTH),    # length
        ("s",  TIME),      # time
        ("kg", MASS),      # mass
        ("A",  CURRENT),   # electric current
    )

    # Scaled base units (symbol, scalar, dimension)
    scaled_units = (
        ("g",   1e-3,   MASS),
        ("km",  1e3,    LENGTH),
        ("min", 60.0,   TIME),
        ("h",   3600.0, TIME),
    )

    # Derived (symbol, pairs), in dependency order; names are generated
    derived_units = (
        ("N",  (("m", 1), ("kg", 1), ("s", -2))),   # force
        ("J",  (("N", 1), ("m", 1))),               # energy
        ("W",  (("J", 1), ("s", -1))),              # power
        ("V",  (("W", 1), ("A", -1))),              # voltage
        ("Hz", (("s", -1),)),                       # frequency
        ("C",  (("A", 1), ("s", 1))),               # charge
        ("Pa", (("N", 1), ("m", -2))),              # pressure
    )

    for sym, dim in base_units:
        reg.define_base(sym, dim)
    for sym, scalar, dim in scaled_units:
        reg.define_base(sym, dim, scalar)
    for sym, pairs in derived_units:
        reg.define_compound(sym, pairs)

    # Common aliases
    reg.register_alias("meter", "m")
    reg.register_alias("second", "s")
    reg.register_alias("kilogram", "kg")
    reg.register_alias("ampere", "A")
    reg.register_alias("newton", "N")
    reg.register_alias("joule", "J")
    reg.register_alias("watt", "W")
    reg.register_alias("volt", "V")

    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
]
