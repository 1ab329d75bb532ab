# unitfold.core.dimensions

from __future__ import annotations
from typing import Iterable, Union, Tuple, TypeAlias, Any
from numbers import Real

# --- Public typing -----------------------------------------------------------
Dim: TypeAlias = "Dimension"
DimTuple = Tuple[int, int, int, int, int]
DimLike = Union["Dimension", DimTuple, Iterable[int]]

_LABELS = ("L", "T", "M", "I", "R")


def _as_exponent(x: Any) -> int:
    if isinstance(x, bool) or not isinstance(x, Real):
        raise ValueError(f"Dimension components must be integers, got {x!r}")
    if x != int(x):
        raise ValueError(f"Dimension components must be integral, got {x!r}")
    return int(x)

# --- Core object -------------------------------------------------------------

class Dimension(tuple):
    """
    Immutable 5-length vector of integer exponents (L, T, M, I, R).

    The last slot is reserved and carries no physical meaning yet.
    Tuple subclass => hashable, comparable with plain tuples, usable as dict keys.
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0, 0, 0, 0, 0)) -> "Dimension":
        if isinstance(data, Dimension):
            return tuple.__new__(cls, data)

        try:
            items = iter(data)
        except TypeError:
            raise TypeError(
                f"Dimension requires an iterable of 5 integers, got {type(data).__name__}"
            ) from None

        t = tuple(_as_exponent(x) for x in items)
        if len(t) != 5:
            raise ValueError("Dimension must have length 5 (L, T, M, I, R).")
        return tuple.__new__(cls, t)

    # --- Algebra (operator overloads) ---
    def __add__(self, other: Any) -> "Dimension":  # type: ignore[override]
        """Component-wise sum; never tuple concatenation."""
        if not isinstance(other, (tuple, list)):
            return NotImplemented
        o = Dimension(other)
        return Dimension(x + y for x, y in zip(self, o, strict=True))

    def __radd__(self, other: Any) -> "Dimension":
        # Subclass reflected ops win over tuple.__add__, so (1, 0, 0, 0, 0) + LENGTH lands here.
        return self.__add__(other)

    def __mul__(self, k: Any) -> "Dimension":  # type: ignore[override]
        """Scale every exponent by an integer; never tuple repetition."""
        if isinstance(k, bool) or not isinstance(k, int):
            raise TypeError(
                f"Dimension can only be scaled by an int, got {type(k).__name__}"
            )
        return Dimension(x * k for x in self)

    def __rmul__(self, k: Any) -> "Dimension":  # type: ignore[override]
        return self.__mul__(k)

    def __neg__(self) -> "Dimension":
        return self * -1

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return all(x == 0 for x in self)

    def as_tuple(self) -> DimTuple:
        # explicit narrow type for external APIs
        return tuple(self)  # type: ignore[return-value]

    def __repr__(self) -> str:
        parts = ""
        for n, v in zip(_LABELS, self, strict=True):
            if v != 0:
                parts += f"[{n}^{v}]"
        return parts

# --- Function forms ----------------------------------------------------------

def zero() -> Dimension:
    """Additive identity: all exponents 0."""
    return Dimension((0, 0, 0, 0, 0))

def dim_add(a: DimLike, b: DimLike) -> Dimension:
    return Dimension(a) + Dimension(b)

def accumulate(acc: DimLike, d: DimLike) -> Dimension:
    """Fold step used while building compound units.

    ``Dimension`` is immutable, so the in-place form ``acc += d`` rebinds
    ``acc``; this returns exactly what that rebinding produces.
    """
    acc = Dimension(acc)
    acc += Dimension(d)
    return acc

def dim_scale(d: DimLike, k: int) -> Dimension:
    return Dimension(d) * k

# --- Public constants ---------------------------------------------------------

DIM_0: Dim    = zero()
LENGTH: Dim   = Dimension((1, 0, 0, 0, 0))
TIME: Dim     = Dimension((0, 1, 0, 0, 0))
MASS: Dim     = Dimension((0, 0, 1, 0, 0))
CURRENT: Dim  = Dimension((0, 0, 0, 1, 0))
RESERVED: Dim = Dimension((0, 0, 0, 0, 1))
