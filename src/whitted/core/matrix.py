"""Square matrices and affine transformation helpers.

Matrices are stored as read-only NumPy float64 arrays in row-major order.
Determinant, minors, cofactors and the inverse use cofactor expansion with a
2x2 base case, so 2x2, 3x3 and 4x4 matrices are all supported; 4x4 is the
canonical size for transforms.

Transforms compose right to left: ``translation(...) * rotation_y(...) *
scaling(...)`` scales first, then rotates, then translates.

Shapes, patterns and the camera never hold a bare matrix. They hold a
Transformation, which bundles a matrix with its inverse and inverse-transpose
computed once at construction time. Surface normals must be mapped back to
world space with the inverse-transpose to stay perpendicular under non-uniform
scaling.

Example:
    >>> from src.whitted.core.matrix import Transformation, identity, scaling, translation
    >>> t = Transformation.make(translation(0.0, 1.0, 0.0) * scaling(2.0, 2.0, 2.0))
    >>> t.inverse * t.matrix == identity()
    True
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuple import EPSILON, Tuple

SUPPORTED_SIZES = (2, 3, 4)


class Matrix:
    """An immutable square matrix of doubles.

    Args:
        rows: Row-major values, either nested sequences or a 2D array.

    Raises:
        ValueError: If the input is not square or its size is unsupported.
    """

    __slots__ = ("_content",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        content = np.array(rows, dtype=np.float64)
        if content.ndim != 2 or content.shape[0] != content.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {content.shape}")
        if content.shape[0] not in SUPPORTED_SIZES:
            raise ValueError(
                f"Unsupported matrix size {content.shape[0]} (expected one of {SUPPORTED_SIZES})"
            )
        content.flags.writeable = False
        self._content = content

    @property
    def size(self) -> int:
        return int(self._content.shape[0])

    def at(self, row: int, col: int) -> float:
        return float(self._content[row, col])

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._content.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(
            np.allclose(self._content, other._content, rtol=0.0, atol=EPSILON)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._content.tolist()!r})"

    def __mul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.multiply_tuple(other)
        return NotImplemented

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix-matrix product ``self x other``."""
        if other.size != self.size:
            raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
        return Matrix(self._content @ other._content)

    def multiply_tuple(self, t: Tuple) -> Tuple:
        """Apply a 4x4 matrix to a homogeneous tuple."""
        x, y, z, w = self._content @ np.array((t.x, t.y, t.z, t.w), dtype=np.float64)
        return Tuple(float(x), float(y), float(z), float(w))

    def transpose(self) -> Matrix:
        return Matrix(self._content.T)

    def sub_matrix(self, row: int, col: int) -> Matrix:
        """Drop one row and one column."""
        content = np.delete(np.delete(self._content, row, axis=0), col, axis=1)
        return Matrix(content)

    def determinant(self) -> float:
        if self.size == 2:
            return self.at(0, 0) * self.at(1, 1) - self.at(0, 1) * self.at(1, 0)
        return sum(self.at(0, col) * self.cofactor(0, col) for col in range(self.size))

    def minor(self, row: int, col: int) -> float:
        return self.sub_matrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    @property
    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Invert the matrix from its cofactors.

        Each cofactor is divided by the determinant and written to the
        transposed position, which yields the inverse in one pass.

        Returns:
            The inverse matrix.

        Raises:
            ValueError: If the determinant is zero. A singular transform is a
                scene construction error and has no fallback value.
        """
        det = self.determinant()
        if det == 0.0:
            raise ValueError("Matrix cannot be inverted because its determinant is 0")
        size = self.size
        inverse = np.empty((size, size), dtype=np.float64)
        for row in range(size):
            for col in range(size):
                inverse[col, row] = self.cofactor(row, col) / det
        return Matrix(inverse)


# =============================================================================
# Transform Builders
# =============================================================================


def identity(size: int = 4) -> Matrix:
    return Matrix(np.identity(size, dtype=np.float64))


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Rotation around the x axis (left-handed, angle in radians)."""
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cos_r, -sin_r, 0.0],
            [0.0, sin_r, cos_r, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    """Rotation around the y axis (left-handed, angle in radians)."""
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [cos_r, 0.0, sin_r, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sin_r, 0.0, cos_r, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    """Rotation around the z axis (left-handed, angle in radians)."""
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [cos_r, -sin_r, 0.0, 0.0],
            [sin_r, cos_r, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each axis in proportion to the other two.

    Args:
        xy: Moves x in proportion to y.
        xz: Moves x in proportion to z.
        yx: Moves y in proportion to x.
        yz: Moves y in proportion to z.
        zx: Moves z in proportion to x.
        zy: Moves z in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Build the world-to-camera matrix for an eye looking at a point.

    Args:
        from_point: Position of the eye.
        to_point: Point of the scene to look at.
        up: Approximate up direction; it need not be perpendicular to the
            view direction.

    Returns:
        The orientation matrix multiplied by the translation that moves the
        eye to the origin.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation.multiply(translation(-from_point.x, -from_point.y, -from_point.z))


# =============================================================================
# Cached Transformation
# =============================================================================


@dataclass(frozen=True)
class Transformation:
    """A transform matrix together with its cached inverse and inverse-transpose.

    The three matrices are only ever built together by ``make``, so they stay
    consistent; replacing a transform means building a new Transformation.

    Attributes:
        matrix: The object-to-world (or pattern-to-object, or camera) matrix.
        inverse: The inverse of ``matrix``.
        inverse_transpose: The transpose of ``inverse``, used for normals.
    """

    matrix: Matrix
    inverse: Matrix
    inverse_transpose: Matrix

    @classmethod
    def identity(cls) -> Transformation:
        m = identity()
        return cls(matrix=m, inverse=m, inverse_transpose=m)

    @classmethod
    def make(cls, matrix: Matrix) -> Transformation:
        """Build a Transformation, inverting ``matrix`` once.

        Raises:
            ValueError: If ``matrix`` is singular.
        """
        inverse = matrix.inverse()
        return cls(matrix=matrix, inverse=inverse, inverse_transpose=inverse.transpose())
