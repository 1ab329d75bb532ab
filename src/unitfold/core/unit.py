"""
unitfold.core.unit
==================

Base and compound physical units.

A ``BaseUnit`` is declared directly with its dimension and scalar. A
``CompoundUnit`` is folded from an ordered sequence of ``(unit, exponent)``
pairs: dimensions add according to the exponents, scalars multiply
according to the same exponents, and the name is generated from the pairs
unless one is given explicitly. Both are immutable; the fold runs once, at
construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import isfinite
from typing import Iterable, Optional, Protocol, Tuple, Union, runtime_checkable

from unitfold.core.dimensions import Dim, DimLike, Dimension, accumulate, dim_scale, zero
from unitfold.core.utils import generate_name

_log = logging.getLogger(__name__)

UnitPair = Tuple["Unit", int]


@runtime_checkable
class Unit(Protocol):
    name: str
    dimension: Dim
    scalar: float


def _check_exponent(exp: object) -> int:
    if isinstance(exp, bool) or not isinstance(exp, int):
        raise TypeError(f"Unit exponent must be an int, got {type(exp).__name__}")
    return exp


class _UnitAlgebra:
    """Composition operators shared by both unit variants."""

    __slots__ = ()

    def __mul__(self, other: object) -> "CompoundUnit":
        if not isinstance(other, Unit):
            return NotImplemented
        return CompoundUnit.from_units([(self, 1), (other, 1)])  # type: ignore[list-item]

    def __truediv__(self, other: object) -> "CompoundUnit":
        if not isinstance(other, Unit):
            return NotImplemented
        return CompoundUnit.from_units([(self, 1), (other, -1)])  # type: ignore[list-item]

    def __rtruediv__(self, n: object) -> "CompoundUnit":
        if isinstance(n, bool) or n != 1:
            raise TypeError(
                f"Invalid operation: cannot divide {n!r} by a unit ({self.name}). "  # type: ignore[attr-defined]
                "Only 1/unit (reciprocal) is supported."
            )
        return CompoundUnit.from_units([(self, -1)])  # type: ignore[list-item]

    def __pow__(self, n: int, modulo: object = None) -> "CompoundUnit":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for units.")
        return CompoundUnit.from_units([(self, _check_exponent(n))])  # type: ignore[list-item]

    def __str__(self) -> str:
        return self.name  # type: ignore[attr-defined]


@dataclass(frozen=True, slots=True, repr=False)
class BaseUnit(_UnitAlgebra):
    """A fundamental unit declared with a literal dimension and scalar."""

    name: str
    scalar: float
    dimension: Dim

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimension", Dimension(self.dimension))
        if isinstance(self.scalar, bool) or not isinstance(self.scalar, (int, float)):
            raise TypeError(f"scalar must be a real number, got {type(self.scalar).__name__}")
        if not (self.scalar > 0 and isfinite(self.scalar)):
            raise ValueError("scalar must be a positive, finite number")
        object.__setattr__(self, "scalar", float(self.scalar))

    def rename(self, name: str) -> "BaseUnit":
        return BaseUnit(name, self.scalar, self.dimension)

    def __repr__(self) -> str:
        return (
            f"BaseUnit(name={self.name!r}, scalar={self.scalar!r}, "
            f"dimension={self.dimension.as_tuple()!r})"
        )


@dataclass(frozen=True, slots=True, repr=False)
class CompoundUnit(_UnitAlgebra):
    """
    A unit derived from other units raised to integer powers.

    Only ``units`` and an optional ``name`` are accepted; ``dimension`` and
    ``scalar`` are always folded from ``units`` and cannot be passed in.
    ``name`` defaults to the generated one.

    >>> CompoundUnit(((m, 1), (kg, 1), (s, -2))).name
    'm * kg * s^-2'
    """

    units: Tuple[UnitPair, ...]
    name: Optional[str] = None
    scalar: float = field(init=False)
    dimension: Dim = field(init=False)

    def __post_init__(self) -> None:
        units: list[UnitPair] = []
        for unit, exp in self.units:
            if not isinstance(unit, Unit):
                raise TypeError(
                    f"Compound unit components must be units, got {type(unit).__name__}"
                )
            units.append((unit, _check_exponent(exp)))

        dimension = zero()
        scalar = 1.0
        for unit, exp in units:
            if exp == 0:
                _log.debug("Ignoring zero exponent for %r in compound unit", unit.name)
            dimension = accumulate(dimension, dim_scale(unit.dimension, exp))
            scalar *= unit.scalar ** exp

        name = self.name
        if name is None:
            name = generate_name(units)
        elif not isinstance(name, str):
            raise TypeError(f"Compound unit name must be a str, got {type(name).__name__}")

        object.__setattr__(self, "units", tuple(units))
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "scalar", float(scalar))
        object.__setattr__(self, "dimension", dimension)
        _log.debug("Built compound unit %r with dimension %s", name, dimension.as_tuple())

    @classmethod
    def from_units(
        cls, pairs: Iterable[Tuple[Unit, int]], name: Optional[str] = None
    ) -> "CompoundUnit":
        """
        Fold ``(unit, exponent)`` pairs into a new unit.

        Parameters
        ----------
        pairs : iterable of (Unit, int)
            Constituent units in order. Every unit must already be fully
            constructed; exponents may be negative. A zero exponent is a
            no-op for dimension, scalar and the generated name.
        name : str, optional
            Used verbatim when given; otherwise the name is generated from
            ``pairs`` (``"m * kg * s^-2"``).

        Examples
        --------
        >>> newton = CompoundUnit.from_units([(m, 1), (kg, 1), (s, -2)])
        >>> newton.dimension.as_tuple(), newton.scalar, newton.name
        ((1, -2, 1, 0, 0), 1.0, 'm * kg * s^-2')
        """
        return cls(tuple(pairs), name)

    def rename(self, name: str) -> "CompoundUnit":
        return CompoundUnit(self.units, name)

    def __repr__(self) -> str:
        parts = ", ".join(f"({u.name!r}, {e})" for u, e in self.units)
        return (
            f"CompoundUnit(name={self.name!r}, scalar={self.scalar!r}, "
            f"dimension={self.dimension.as_tuple()!r}, units=[{parts}])"
        )


AnyUnit = Union[BaseUnit, CompoundUnit]


def base(name: str, dimension: DimLike, scalar: float = 1.0) -> BaseUnit:
    """Convenience constructor for ``BaseUnit``."""
    return BaseUnit(name, scalar, Dimension(dimension))


def compound(pairs: Iterable[Tuple[Unit, int]], name: Optional[str] = None) -> CompoundUnit:
    """Function form of ``CompoundUnit.from_units``."""
    return CompoundUnit.from_units(pairs, name=name)


__all__ = ["Unit", "BaseUnit", "CompoundUnit", "AnyUnit", "base", "compound"]
