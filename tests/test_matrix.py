"""Unit tests for matrices and affine transforms.

Tests cover:
- Construction, equality and multiplication
- Transpose, submatrix, minor, cofactor and determinant
- Inverse and the singular-matrix error
- Translation, scaling, rotation and shearing
- Transform chaining order
- View transform
"""

import math

import pytest


class TestMatrixBasics:
    """Tests for construction, equality and products."""

    def test_construct_and_index(self):
        """Test element access on a 4x4 matrix."""
        from whitted.core.matrix import Matrix

        m = Matrix([[1, 2, 3, 4], [5.5, 6.5, 7.5, 8.5], [9, 10, 11, 12], [13.5, 14.5, 15.5, 16.5]])
        assert m.size == 4
        assert m[0, 3] == 4.0
        assert m[1, 0] == 5.5
        assert m[3, 2] == 15.5

    def test_non_square_raises(self):
        """Test that non-square data is rejected."""
        from whitted.core.matrix import Matrix

        with pytest.raises(ValueError):
            Matrix([[1, 2, 3], [4, 5, 6]])

    def test_equality(self):
        """Test value equality between matrices."""
        from whitted.core.matrix import Matrix

        a = Matrix([[1, 2], [3, 4]])
        assert a == Matrix([[1, 2], [3, 4]])
        assert a != Matrix([[1, 2], [3, 5]])

    def test_matrix_product(self):
        """Test multiplying two 4x4 matrices."""
        from whitted.core.matrix import Matrix

        a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
        expected = Matrix(
            [[20, 22, 50, 48], [44, 54, 114, 108], [40, 58, 110, 102], [16, 26, 46, 42]]
        )
        assert a @ b == expected

    def test_matrix_times_point(self):
        """Test multiplying a matrix by a point uses w = 1."""
        from whitted.core.matrix import Matrix
        from whitted.core.tuples import point

        a = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert a @ point(1, 2, 3) == point(18, 24, 33)

    def test_identity_product(self):
        """Test that the identity leaves matrices and points unchanged."""
        from whitted.core.matrix import Matrix, identity
        from whitted.core.tuples import point

        a = Matrix([[0, 1, 2, 4], [1, 2, 4, 8], [2, 4, 8, 16], [4, 8, 16, 32]])
        assert a @ identity() == a
        assert identity() @ point(1, 2, 3) == point(1, 2, 3)

    def test_transpose(self):
        """Test transposing a matrix and the identity."""
        from whitted.core.matrix import Matrix, identity

        a = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        assert a.transpose() == Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert identity().transpose() == identity()


class TestDeterminant:
    """Tests for determinants and their building blocks."""

    def test_2x2_determinant(self):
        """Test the closed-form 2x2 determinant."""
        from whitted.core.matrix import Matrix

        assert Matrix([[1, 5], [-3, 2]]).determinant() == 17.0

    def test_submatrix(self):
        """Test removing a row and column."""
        from whitted.core.matrix import Matrix

        a = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
        assert a.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])

    def test_minor_and_cofactor(self):
        """Test that cofactors negate minors at odd positions."""
        from whitted.core.matrix import Matrix

        a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert a.minor(0, 0) == -12.0
        assert a.cofactor(0, 0) == -12.0
        assert a.minor(1, 0) == 25.0
        assert a.cofactor(1, 0) == -25.0

    def test_4x4_determinant(self):
        """Test cofactor expansion on a 4x4 matrix."""
        from whitted.core.matrix import Matrix

        a = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert a.cofactor(0, 0) == 690.0
        assert a.cofactor(0, 1) == 447.0
        assert a.cofactor(0, 2) == 210.0
        assert a.cofactor(0, 3) == 51.0
        assert a.determinant() == -4071.0


class TestInverse:
    """Tests for inversion."""

    def test_invertible(self):
        """Test the invertibility check."""
        from whitted.core.matrix import Matrix

        assert Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]]).is_invertible()
        assert not Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]]).is_invertible()

    def test_inverse_values(self):
        """Test the inverse of a general 4x4 matrix."""
        from whitted.core.matrix import Matrix

        a = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        expected = Matrix(
            [
                [0.21805, 0.45113, 0.24060, -0.04511],
                [-0.80827, -1.45677, -0.44361, 0.52068],
                [-0.07895, -0.22368, -0.05263, 0.19737],
                [-0.52256, -0.81391, -0.30075, 0.30639],
            ]
        )
        assert a.inverse().isclose(expected)

    def test_product_times_inverse(self):
        """Test that multiplying a product by an inverse recovers the factor."""
        from whitted.core.matrix import Matrix

        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        assert (a @ b @ b.inverse()).isclose(a)

    def test_inverse_undoes_transform(self):
        """Test that the inverse maps a transformed vector back."""
        from whitted.core.matrix import rotation_y, scaling, shearing, translation
        from whitted.core.tuples import vector

        m = translation(1, -2, 3) @ rotation_y(0.7) @ scaling(2, 3, 0.5) @ shearing(1, 0, 0, 1, 0, 0)
        v = vector(0.3, -1.2, 4.5)
        assert (m.inverse() @ (m @ v)).isclose(v)

    def test_singular_matrix_raises(self):
        """Test that inverting a singular matrix raises NotInvertibleError."""
        from whitted.core.matrix import scaling
        from whitted.errors import NotInvertibleError

        with pytest.raises(NotInvertibleError):
            scaling(1, 0, 1).inverse()

    def test_inverse_is_cached(self):
        """Test that the inverse is computed once per matrix."""
        from whitted.core.matrix import translation

        m = translation(1, 2, 3)
        assert m.inverse() is m.inverse()


class TestTransforms:
    """Tests for the named affine constructors."""

    def test_translation_moves_points_not_vectors(self):
        """Test that translation ignores vectors."""
        from whitted.core.matrix import translation
        from whitted.core.tuples import point, vector

        t = translation(5, -3, 2)
        assert t @ point(-3, 4, 5) == point(2, 1, 7)
        assert t.inverse() @ point(-3, 4, 5) == point(-8, 7, 3)
        assert t @ vector(-3, 4, 5) == vector(-3, 4, 5)

    def test_scaling(self):
        """Test scaling points, vectors, and reflection by negative scale."""
        from whitted.core.matrix import scaling
        from whitted.core.tuples import point, vector

        assert scaling(2, 3, 4) @ point(-4, 6, 8) == point(-8, 18, 32)
        assert scaling(2, 3, 4) @ vector(-4, 6, 8) == vector(-8, 18, 32)
        assert scaling(-1, 1, 1) @ point(2, 3, 4) == point(-2, 3, 4)

    def test_rotation_x(self):
        """Test a quarter turn around x."""
        from whitted.core.matrix import rotation_x
        from whitted.core.tuples import point

        p = point(0, 1, 0)
        half = math.sqrt(2) / 2
        assert (rotation_x(math.pi / 4) @ p).isclose(point(0, half, half))
        assert (rotation_x(math.pi / 2) @ p).isclose(point(0, 0, 1))

    def test_rotation_y(self):
        """Test a quarter turn around y."""
        from whitted.core.matrix import rotation_y
        from whitted.core.tuples import point

        assert (rotation_y(math.pi / 2) @ point(0, 0, 1)).isclose(point(1, 0, 0))

    def test_rotation_z(self):
        """Test a quarter turn around z."""
        from whitted.core.matrix import Axis, rotation
        from whitted.core.tuples import point

        assert (rotation(Axis.Z, math.pi / 2) @ point(0, 1, 0)).isclose(point(-1, 0, 0))

    @pytest.mark.parametrize(
        "params, expected",
        [
            ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
        ],
    )
    def test_shearing(self, params, expected):
        """Test each shearing coefficient in isolation."""
        from whitted.core.matrix import shearing
        from whitted.core.tuples import point

        assert shearing(*params) @ point(2, 3, 4) == point(*expected)

    def test_chained_transforms_apply_right_to_left(self):
        """Test that a chained transform applies the rightmost first."""
        from whitted.core.matrix import rotation_x, scaling, translation
        from whitted.core.tuples import point

        transform = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
        assert (transform @ point(1, 0, 1)).isclose(point(15, 0, 7))


class TestViewTransform:
    """Tests for the camera view transform."""

    def test_default_orientation_is_identity(self):
        """Test looking down -z from the origin."""
        from whitted.core.matrix import identity, view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        assert t.isclose(identity())

    def test_looking_in_positive_z_mirrors(self):
        """Test that looking down +z flips x and z."""
        from whitted.core.matrix import scaling, view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        assert t.isclose(scaling(-1, 1, -1))

    def test_moves_the_world(self):
        """Test that the view transform moves the world, not the eye."""
        from whitted.core.matrix import translation, view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        assert t.isclose(translation(0, 0, -8))

    def test_arbitrary_view(self):
        """Test an arbitrary view direction."""
        from whitted.core.matrix import Matrix, view_transform
        from whitted.core.tuples import point, vector

        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        expected = Matrix(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]
        )
        assert t.isclose(expected)
