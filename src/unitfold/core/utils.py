"""
unitfold.core.utils
===================

Formatting helpers for unit names and dimensions.

``generate_name`` builds the display name of a compound unit from its
constituent ``(unit, exponent)`` pairs; ``format_dim`` renders a dimension
vector in a readable scientific style (e.g. 'kg·m²/s³·A').
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Tuple

from unitfold.core.dimensions import Dim

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitfold.core.unit import Unit

NAME_SEPARATOR = " * "

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def _name_fragment(name: str, exp: int) -> str:
    if exp == 1:
        return name
    if exp == 0:
        return ""
    return f"{name}^{exp}"


def generate_name(pairs: Iterable[Tuple["Unit", int]]) -> str:
    """
    Join ``name``, ``name^exp`` fragments in their original order.

    Exponent 1 keeps the bare name, exponent 0 contributes nothing.

    >>> generate_name([(m, 1), (kg, 1), (s, -2)])
    'm * kg * s^-2'
    """
    fragments = (_name_fragment(unit.name, exp) for unit, exp in pairs)
    return NAME_SEPARATOR.join(f for f in fragments if f)


# ---------- Dimension → pretty unit string ----------
def format_dim(dim: Dim) -> str:
    """
    Turn a dimension tuple (L,T,M,I,R) into 'kg·m/s²' style.
    Conventional order: M, L, T, I, R.
    """
    # indices: L=0 T=1 M=2 I=3 R=4
    labels: List[str] = ["m", "s", "kg", "A", "R"]
    order: List[int] = [2, 0, 1, 3, 4]  # M, L, T, I, R

    num: List[str] = []
    den: List[str] = []
    for i in order:
        e = dim[i]
        if e > 0:
            num.append(labels[i] + _sup(e))
        elif e < 0:
            den.append(labels[i] + _sup(-e))

    numerator = "·".join(num) if num else "1"
    denominator = "·".join(den)
    return f"{numerator}/{denominator}" if denominator else numerator
