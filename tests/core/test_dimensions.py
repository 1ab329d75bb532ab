import pytest

from unitfold.core.dimensions import (
    CURRENT,
    DIM_0,
    LENGTH,
    MASS,
    RESERVED,
    TIME,
    Dim,
    Dimension,
    accumulate,
    dim_add,
    dim_scale,
    zero,
)

SAMPLES = [
    DIM_0,
    LENGTH,
    TIME,
    (1, -2, 1, 0, 0),
    (2, -3, 1, -1, 0),
    (-4, 0, 3, 2, 1),
]

# --- Basic structure & base vectors -------------------------------------------------

def test_base_vectors_shape_and_types():
    for b in [DIM_0, LENGTH, TIME, MASS, CURRENT, RESERVED]:
        assert isinstance(b, tuple)
        assert isinstance(b, Dimension)
        assert len(b) == 5
        assert all(type(x) is int for x in b)

def test_dimensional_basis():
    # (L, T, M, I, R)
    assert LENGTH   == (1, 0, 0, 0, 0)
    assert TIME     == (0, 1, 0, 0, 0)
    assert MASS     == (0, 0, 1, 0, 0)
    assert CURRENT  == (0, 0, 0, 1, 0)
    assert RESERVED == (0, 0, 0, 0, 1)
    assert DIM_0    == (0, 0, 0, 0, 0)

def test_zero_is_additive_identity_and_fresh_value():
    assert zero() == DIM_0
    assert zero().is_dimensionless

# --- Algebraic laws ----------------------------------------------------------------

@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_add_commutative(a: Dim, b: Dim):
    assert dim_add(a, b) == dim_add(b, a)

@pytest.mark.parametrize("a,b,c", [
    (LENGTH, TIME, MASS),
    ((1, -2, 1, 0, 0), (2, -3, 1, -1, 0), (-4, 0, 3, 2, 1)),
    (DIM_0, CURRENT, (0, 0, 0, -1, 0)),
])
def test_add_associative(a: Dim, b: Dim, c: Dim):
    assert dim_add(dim_add(a, b), c) == dim_add(a, dim_add(b, c))

@pytest.mark.parametrize("a", SAMPLES)
def test_add_identity(a: Dim):
    assert dim_add(a, zero()) == a
    assert dim_add(zero(), a) == a

@pytest.mark.parametrize("d", SAMPLES)
@pytest.mark.parametrize("k,m", [(0, 0), (1, 2), (-2, 3), (4, -4), (-1, -5)])
def test_scale_distributes_over_integer_sum(d: Dim, k: int, m: int):
    assert dim_scale(d, k + m) == dim_add(dim_scale(d, k), dim_scale(d, m))

@pytest.mark.parametrize("d,k,expected", [
    (LENGTH, 0, DIM_0),
    (LENGTH, 1, LENGTH),
    (TIME, -2, (0, -2, 0, 0, 0)),
    ((1, -1, 2, 0, 3), 3, (3, -3, 6, 0, 9)),
])
def test_dim_scale(d: Dim, k: int, expected: Dim):
    assert dim_scale(d, k) == expected

def test_component_wise_sum():
    assert dim_add((1, -2, 1, 0, 0), (1, 0, 0, 0, 0)) == (2, -2, 1, 0, 0)

# --- accumulate (in-place fold step) ------------------------------------------------

@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_accumulate_matches_add(a: Dim, b: Dim):
    assert accumulate(a, b) == dim_add(a, b)

def test_augmented_add_rebinds_and_leaves_original_untouched():
    acc = zero()
    start = acc
    acc += LENGTH
    acc += dim_scale(TIME, -2)
    assert acc == (1, -2, 0, 0, 0)
    assert start == DIM_0
    assert isinstance(acc, Dimension)

# --- Operators ----------------------------------------------------------------------

def test_plus_is_componentwise_not_concatenation():
    out = LENGTH + MASS
    assert out == (1, 0, 1, 0, 0)
    assert len(out) == 5

def test_plain_tuple_on_either_side_of_plus():
    t = (0, 1, 0, 0, 0)
    assert LENGTH + t == (1, 1, 0, 0, 0)
    assert t + LENGTH == (1, 1, 0, 0, 0)
    assert isinstance(t + LENGTH, Dimension)

def test_times_int_scales_from_either_side():
    assert LENGTH * 3 == (3, 0, 0, 0, 0)
    assert 3 * LENGTH == (3, 0, 0, 0, 0)
    assert -TIME == (0, -1, 0, 0, 0)

@pytest.mark.parametrize("k", [2.5, "2", (1, 0, 0, 0, 0), True])
def test_scale_rejects_non_int(k):
    with pytest.raises(TypeError):
        _ = LENGTH * k

def test_plus_int_fails():
    with pytest.raises(TypeError, match="unsupported operand type"):
        _ = LENGTH + 2

# --- Construction -------------------------------------------------------------------

def test_dimension_constructs_from_iterable_and_coerces_ints():
    d = Dimension([1.0, 0, -1, 0, 0])
    assert d == (1, 0, -1, 0, 0)
    assert all(type(x) is int for x in d)

def test_dimension_rejects_wrong_length():
    with pytest.raises(ValueError):
        Dimension((1, 2, 3))

def test_dimension_rejects_non_integral_component():
    with pytest.raises(ValueError):
        Dimension((0.5, 0, 0, 0, 0))

def test_dimension_requires_iterable():
    with pytest.raises(TypeError, match="Dimension requires an iterable"):
        Dimension(5)

def test_default_dimension_is_zero():
    assert Dimension() == DIM_0

# --- Equality, hashing, helpers -----------------------------------------------------

def test_equality_with_plain_tuple_and_hashing():
    t = (1, -2, 1, 0, 0)
    d = Dimension(t)
    assert d == t
    assert hash(d) == hash(t)
    assert d != (1, -2, 1, 0, 1)

def test_dimension_as_dict_key():
    m = {Dimension((1, 0, 0, 0, 0)): "ok"}
    m[(1, 0, 0, 0, 0)] = "overwritten"
    assert m[LENGTH] == "overwritten"

def test_as_tuple_returns_plain_tuple_not_dimension():
    t = (LENGTH + TIME).as_tuple()
    assert type(t) is tuple
    assert t == (1, 1, 0, 0, 0)

def test_is_dimensionless():
    assert DIM_0.is_dimensionless is True
    assert LENGTH.is_dimensionless is False
    assert (LENGTH + -LENGTH).is_dimensionless is True

# --- repr -----------------------------------------------------------------------------

@pytest.mark.parametrize("dim, expected", [
    (DIM_0, ""),
    (LENGTH, "[L^1]"),
    (TIME, "[T^1]"),
    (MASS, "[M^1]"),
    (CURRENT, "[I^1]"),
    (RESERVED, "[R^1]"),
    (Dimension((1, -2, 1, 0, 0)), "[L^1][T^-2][M^1]"),
])
def test_repr(dim, expected):
    assert repr(dim) == expected
