import numpy as np
import pytest
from conic_geom.algebra.complex import Complex
from conic_geom.algebra.matrix import (
    ComplexMatrix3,
    RowMajorAccessors,
    adjugate,
    determinant,
    determinant2,
    dominant_column,
    dominant_row,
    transpose,
)


def _sample():
    return ComplexMatrix3.from_rows([
        [Complex(2, 1), 3, -1],
        [0, Complex(1, -2), 4],
        [5, Complex(0, 1), 1],
    ])


def test_construction_and_accessors():
    m = ComplexMatrix3.from_real(np.arange(9.0).reshape(3, 3))
    assert m.m00 == Complex(0, 0)
    assert m.m12 == Complex(5, 0)
    assert m[2, 1] == Complex(7, 0)
    assert m.row(1) == (Complex(3, 0), Complex(4, 0), Complex(5, 0))
    assert m.column(2) == (Complex(2, 0), Complex(5, 0), Complex(8, 0))


def test_wrong_entry_count_rejected():
    with pytest.raises(ValueError):
        ComplexMatrix3((Complex.ONE,) * 8)
    with pytest.raises(ValueError):
        ComplexMatrix3.from_real(np.eye(2))


def test_determinant_matches_numpy():
    m = _sample()
    assert complex(determinant(m)) == pytest.approx(complex(np.linalg.det(m.to_numpy())))
    assert determinant2(Complex(1, 0), 2, 3, 4) == Complex(-2, 0)


def test_adjugate_is_determinant_times_inverse():
    """adj(M) · M = det(M) · I."""
    m = _sample()
    product = adjugate(m).to_numpy() @ m.to_numpy()
    assert np.allclose(product, complex(determinant(m)) * np.eye(3))


def test_transpose_and_arithmetic():
    m = _sample()
    t = transpose(m)
    assert np.allclose(t.to_numpy(), m.to_numpy().T)
    assert np.allclose((m + m).to_numpy(), 2 * m.to_numpy())
    assert np.allclose(m.scaled(Complex.I).to_numpy(), 1j * m.to_numpy())
    assert m.max_magnitude() == pytest.approx(5.0)


def test_is_zero():
    assert ComplexMatrix3.from_real(np.zeros((3, 3))).is_zero()
    almost = ComplexMatrix3.from_real(np.full((3, 3), 1e-12))
    assert not almost.is_zero()
    assert almost.is_zero(1e-9)


def test_dominant_row_ignores_last_entry_by_default():
    m = ComplexMatrix3.from_real([
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 9.0],
        [0.0, 2.0, 0.0],
    ])
    assert dominant_row(m) == m.row(2)
    assert dominant_row(m, check_last=True) == m.row(1)


def test_dominant_row_ties_keep_earliest():
    m = ComplexMatrix3.from_real([
        [1.0, 1.0, 0.0],
        [2.0, 0.0, 5.0],
        [0.0, 2.0, 0.0],
    ])
    assert dominant_row(m) == m.row(0)


def test_dominant_column_is_dominant_row_of_transpose():
    m = ComplexMatrix3.from_real([
        [1.0, 0.0, 0.1],
        [0.0, 0.5, 0.1],
        [3.0, 0.0, 9.0],
    ])
    assert dominant_column(m) == m.column(0)
    assert dominant_column(m, check_last=True) == m.column(2)


def test_row_major_accessors_need_an_entry_lookup():
    with pytest.raises(TypeError):
        RowMajorAccessors()

    class Identity(RowMajorAccessors):
        def entry(self, row, col):
            return 1.0 if row == col else 0.0

    m = Identity()
    assert (m.m00, m.m11, m.m22, m.m01, m.m20) == (1.0, 1.0, 1.0, 0.0, 0.0)
