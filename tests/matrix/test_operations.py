"""
Tests for matrix arithmetic, products, norms and homogeneous helpers.

Every test that builds matrices runs under both storage orders via the
storage_order fixture.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.layout import COL_MAJOR, ROW_MAJOR, use_storage_order
from pymatrix.matrix import (
    Matrix,
    Vector,
    hlift,
    hproject,
    l1_norm,
    l2_norm,
    linf_norm,
    make_diagonal,
    multiply_ab,
    multiply_abt,
    multiply_atb,
    multiply_atbt,
    multiply_dm,
    multiply_md,
    multiply_mv,
    multiply_vm,
    outer_product,
    transpose,
)


@pytest.fixture
def A23():
    return Matrix[2, 3]([1, 2, 3, 4, 5, 6])


@pytest.fixture
def B32():
    return Matrix[3, 2]([7, 8, 9, 10, 11, 12])


def _random(rng, rows, cols):
    return Matrix[rows, cols](rng.standard_normal(rows * cols))


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_unary(self, storage_order, A23):
        assert +A23 == A23
        assert +A23 is not A23
        np.testing.assert_array_equal((-A23).to_numpy(), -A23.to_numpy())

    def test_add_negation_is_zero(self, storage_order, rng):
        M = _random(rng, 3, 4)
        assert M + (-M) == Matrix[3, 4].zero()

    def test_add_sub(self, storage_order, A23):
        B = Matrix[2, 3]([6, 5, 4, 3, 2, 1])
        assert A23 + B == Matrix[2, 3]([7] * 6)
        assert A23 - B == Matrix[2, 3]([-5, -3, -1, 1, 3, 5])

    def test_compound_in_place(self, storage_order, A23):
        M = A23.copy()
        alias = M
        M += A23
        M -= Matrix[2, 3]([1] * 6)
        assert M is alias
        assert M == Matrix[2, 3]([1, 3, 5, 7, 9, 11])

    def test_shape_mismatch_rejected(self):
        with pytest.raises(DimensionError):
            Matrix[3, 3]() + Matrix[2, 2]()
        with pytest.raises(DimensionError):
            M = Matrix[2, 3]()
            M -= Matrix[3, 2]()

    def test_scalar_multiplication(self, storage_order, A23):
        expected = Matrix[2, 3]([2, 4, 6, 8, 10, 12])
        assert A23 * 2 == expected
        assert 2 * A23 == expected
        assert np.float64(2.0) * A23 == expected
        M = A23.copy()
        M *= 2
        assert M == expected

    def test_scalar_division(self, storage_order):
        M = Matrix[2, 2]([2, 4, 6, 8])
        assert M / 2 == Matrix[2, 2]([1, 2, 3, 4])
        M /= 4
        assert M == Matrix[2, 2]([0.5, 1, 1.5, 2])

    def test_division_by_zero_is_zero_matrix(self, storage_order, A23):
        with np.errstate(all='raise'):
            result = A23 / 0
            assert result == Matrix[2, 3].zero()
            M = A23.copy()
            M /= 0.0
            assert M == Matrix[2, 3].zero()

    def test_mixed_layout_addition(self):
        with use_storage_order(ROW_MAJOR):
            A = Matrix[2, 3]([1, 2, 3, 4, 5, 6])
        with use_storage_order(COL_MAJOR):
            B = Matrix[2, 3]([1, 1, 1, 2, 2, 2])
        np.testing.assert_array_equal((A + B).to_numpy(), [[2, 3, 4], [6, 7, 8]])


# ═══════════════════════════════════════════════════════════════════════
# Norms and transpose
# ═══════════════════════════════════════════════════════════════════════


class TestNorms:

    def test_zero_matrix_norms(self, storage_order):
        Z = Matrix[3, 2].zero()
        assert l1_norm(Z) == 0.0
        assert l2_norm(Z) == 0.0
        assert linf_norm(Z) == 0.0

    def test_values(self, storage_order):
        M = Matrix[2, 2]([3, -4, 0, 0])
        assert l1_norm(M) == pytest.approx(7.0)
        assert l2_norm(M) == pytest.approx(5.0)
        assert linf_norm(M) == pytest.approx(4.0)

    def test_linf_uses_absolute_values(self, storage_order):
        assert linf_norm(Matrix[1, 2]([-9, 1])) == pytest.approx(9.0)

    def test_empty_matrix(self):
        assert linf_norm(Matrix[0, 3]()) == 0.0

    def test_l2_matches_frobenius(self, storage_order, rng):
        M = _random(rng, 4, 3)
        assert l2_norm(M) == pytest.approx(np.linalg.norm(M.to_numpy()))


class TestTranspose:

    def test_shape_and_values(self, storage_order, A23):
        T = transpose(A23)
        assert type(T) is Matrix[3, 2]
        for r in range(2):
            for c in range(3):
                assert T[c, r] == A23[r, c]

    def test_involution(self, storage_order, rng):
        M = _random(rng, 3, 5)
        assert transpose(transpose(M)) == M


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixVector:

    def test_identity_times_vector(self, storage_order, rng):
        V = Vector[4](rng.standard_normal(4))
        assert Matrix[4, 4].identity() * V == V

    def test_matrix_vector(self, storage_order, A23):
        result = A23 * Vector[3]([1, 0, -1])
        assert type(result) is Vector[2]
        assert result == Vector[2]([-2, -2])
        assert A23 @ Vector[3]([1, 0, -1]) == result
        assert multiply_mv(A23, Vector[3]([1, 0, -1])) == result

    def test_vector_matrix(self, storage_order, A23):
        result = Vector[2]([1, 1]) * A23
        assert type(result) is Vector[3]
        assert result == Vector[3]([5, 7, 9])
        assert Vector[2]([1, 1]) @ A23 == result
        assert multiply_vm(Vector[2]([1, 1]), A23) == result

    def test_length_mismatch(self, A23):
        with pytest.raises(DimensionError):
            A23 * Vector[2]()
        with pytest.raises(DimensionError):
            Vector[3]() * A23


class TestMatrixMatrix:

    def test_operator_matches_multiply_ab(self, storage_order, A23, B32):
        product = A23 * B32
        assert type(product) is Matrix[2, 2]
        assert product == multiply_ab(A23, B32)
        assert product == A23 @ B32
        np.testing.assert_array_equal(product.to_numpy(), [[58, 64], [139, 154]])

    def test_identity_squared(self, storage_order):
        I = Matrix[3, 3].identity()
        assert I * I == I

    def test_transposed_variants(self, storage_order, rng):
        A = _random(rng, 2, 3)
        B = _random(rng, 4, 3)
        C = _random(rng, 3, 4)
        D = _random(rng, 3, 2)
        E = _random(rng, 2, 3)

        ABt = multiply_abt(A, B)
        assert type(ABt) is Matrix[2, 4]
        assert np.allclose(ABt.to_numpy(), multiply_ab(A, transpose(B)).to_numpy())

        CtD = multiply_atb(C, D)
        assert type(CtD) is Matrix[4, 2]
        assert np.allclose(CtD.to_numpy(), multiply_ab(transpose(C), D).to_numpy())

        CtEt = multiply_atbt(C, E)
        assert type(CtEt) is Matrix[4, 2]
        assert np.allclose(CtEt.to_numpy(),
                           multiply_ab(transpose(C), transpose(E)).to_numpy())

    def test_inner_dimension_mismatch(self, A23):
        with pytest.raises(DimensionError, match="inner dimensions"):
            multiply_ab(A23, A23)
        with pytest.raises(DimensionError):
            multiply_abt(A23, Matrix[2, 2]())
        with pytest.raises(DimensionError):
            multiply_atb(A23, Matrix[3, 3]())
        with pytest.raises(DimensionError):
            multiply_atbt(A23, Matrix[3, 3]())


class TestDiagonalProducts:

    def test_multiply_md_scales_columns(self, storage_order, A23):
        result = multiply_md(A23, Vector[3]([1, 10, 100]))
        np.testing.assert_array_equal(result.to_numpy(), [[1, 20, 300], [4, 50, 600]])

    def test_multiply_dm_scales_rows(self, storage_order, A23):
        result = multiply_dm(Vector[2]([2, -1]), A23)
        np.testing.assert_array_equal(result.to_numpy(), [[2, 4, 6], [-4, -5, -6]])

    def test_matches_full_diagonal(self, storage_order, rng):
        M = _random(rng, 3, 3)
        D = Vector[3](rng.standard_normal(3))
        diag = Matrix[3, 3]()
        make_diagonal(D, diag)
        assert np.allclose(multiply_md(M, D).to_numpy(), (M * diag).to_numpy())
        assert np.allclose(multiply_dm(D, M).to_numpy(), (diag * M).to_numpy())

    def test_length_mismatch(self, A23):
        with pytest.raises(DimensionError):
            multiply_md(A23, Vector[2]())
        with pytest.raises(DimensionError):
            multiply_dm(Vector[3](), A23)


class TestOuterProduct:

    def test_elements(self, storage_order):
        U = Vector[3]([1, 2, 3])
        V = Vector[2]([-1, 4])
        P = outer_product(U, V)
        assert type(P) is Matrix[3, 2]
        for r in range(3):
            for c in range(2):
                assert P[r, c] == U[r] * V[c]


# ═══════════════════════════════════════════════════════════════════════
# Diagonal and homogeneous helpers
# ═══════════════════════════════════════════════════════════════════════


class TestMakeDiagonal:

    def test_overwrites_target(self, storage_order):
        M = Matrix[3, 3]([9] * 9)
        assert make_diagonal(Vector[3]([1, 2, 3]), M) is None
        np.testing.assert_array_equal(M.to_numpy(), np.diag([1.0, 2.0, 3.0]))

    def test_requires_square_target(self):
        with pytest.raises(DimensionError):
            make_diagonal(Vector[2](), Matrix[2, 3]())

    def test_requires_matching_length(self):
        with pytest.raises(DimensionError):
            make_diagonal(Vector[2](), Matrix[3, 3]())


class TestHomogeneous:

    def test_hlift(self, storage_order):
        M = Matrix[2, 2]([1, 2, 3, 4])
        H = hlift(M)
        assert type(H) is Matrix[3, 3]
        np.testing.assert_array_equal(H.to_numpy(), [[1, 2, 0], [3, 4, 0], [0, 0, 1]])

    def test_hproject(self, storage_order):
        M = Matrix[3, 3]([1, 2, 3, 4, 5, 6, 7, 8, 9])
        P = hproject(M)
        assert type(P) is Matrix[2, 2]
        np.testing.assert_array_equal(P.to_numpy(), [[1, 2], [4, 5]])

    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_round_trip(self, storage_order, rng, n):
        M = _random(rng, n, n)
        assert hproject(hlift(M)) == M

    def test_hproject_needs_order_two(self):
        with pytest.raises(DimensionError, match=">= 2"):
            hproject(Matrix[1, 1]())

    def test_non_square_rejected(self):
        with pytest.raises(DimensionError):
            hlift(Matrix[2, 3]())
        with pytest.raises(DimensionError):
            hproject(Matrix[3, 2]())
