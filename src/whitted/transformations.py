# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from math import sin, cos, radians
from whitted.geometry import Vec, Point, Normal
from whitted.misc import are_close


class NonInvertibleTransformationError(Exception):
    """Raised when a transformation has no inverse (e.g., a scaling by zero)"""

    def __init__(self, error_message):
        super().__init__(error_message)


def _matr_prod(a, b):
    result = [[0.0 for i in range(4)] for j in range(4)]
    for i in range(4):
        for j in range(4):
            for k in range(4):
                result[i][j] += a[i][k] * b[k][j]

    return result


def _are_matr_close(m1, m2):
    for i in range(4):
        for j in range(4):
            if not are_close(m1[i][j], m2[i][j]):
                return False

    return True


def _submatrix(m, row, col):
    return [[m[i][j] for j in range(len(m)) if j != col]
            for i in range(len(m)) if i != row]


def _cofactor(m, row, col):
    minor = _determinant(_submatrix(m, row, col))
    return minor if (row + col) % 2 == 0 else -minor


def _determinant(m):
    if len(m) == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]

    # Laplace expansion along the first row
    return sum(m[0][col] * _cofactor(m, 0, col) for col in range(len(m)))


def _matr_inverse(m):
    det = _determinant(m)
    if are_close(det, 0.0, epsilon=1e-12):
        raise NonInvertibleTransformationError(f"the matrix {m} has no inverse (determinant is {det})")

    # The inverse is the transposed matrix of cofactors divided by the determinant
    return [[_cofactor(m, col, row) / det for col in range(4)] for row in range(4)]


IDENTITY_MATR4x4 = [[1.0, 0.0, 0.0, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]]


class Transformation:
    """An affine transformation

    The class keeps both the 4×4 matrix `m` and its inverse `invm`, so that
    inverting a transformation never requires any computation. Use one of the
    factory functions in this module (:func:`.translation`, :func:`.scaling`,
    etc.) or :meth:`.Transformation.from_matrix` to build a transformation:
    the constructor trusts the caller to pass a consistent pair of matrices."""

    def __init__(self, m=IDENTITY_MATR4x4, invm=IDENTITY_MATR4x4):
        self.m = m
        self.invm = invm

    @staticmethod
    def from_matrix(m):
        """Create a transformation from a 4×4 matrix, computing its inverse

        Raise :class:`.NonInvertibleTransformationError` if the matrix is singular."""
        return Transformation(m=[list(row) for row in m], invm=_matr_inverse(m))

    def __mul__(self, other):
        if isinstance(other, Vec):
            row0, row1, row2, row3 = self.m
            return Vec(x=other.x * row0[0] + other.y * row0[1] + other.z * row0[2],
                       y=other.x * row1[0] + other.y * row1[1] + other.z * row1[2],
                       z=other.x * row2[0] + other.y * row2[1] + other.z * row2[2])
        elif isinstance(other, Point):
            row0, row1, row2, row3 = self.m
            p = Point(x=other.x * row0[0] + other.y * row0[1] + other.z * row0[2] + row0[3],
                      y=other.x * row1[0] + other.y * row1[1] + other.z * row1[2] + row1[3],
                      z=other.x * row2[0] + other.y * row2[1] + other.z * row2[2] + row2[3])
            w = other.x * row3[0] + other.y * row3[1] + other.z * row3[2] + row3[3]

            if w == 1.0:
                return p
            else:
                return Point(p.x / w, p.y / w, p.z / w)
        elif isinstance(other, Normal):
            # Normals are transformed using the transpose of the inverse matrix
            row0, row1, row2, _ = self.invm
            return Normal(x=other.x * row0[0] + other.y * row1[0] + other.z * row2[0],
                          y=other.x * row0[1] + other.y * row1[1] + other.z * row2[1],
                          z=other.x * row0[2] + other.y * row1[2] + other.z * row2[2])
        elif isinstance(other, Transformation):
            result_m = _matr_prod(self.m, other.m)
            result_invm = _matr_prod(other.invm, self.invm)  # Reverse order! (A B)^-1 = B^-1 A^-1
            return Transformation(m=result_m, invm=result_invm)
        else:
            raise TypeError(f"Invalid type {type(other)} multiplied to a Transformation object")

    def is_consistent(self):
        """Return True if `invm` is really the inverse of `m`"""
        prod = _matr_prod(self.m, self.invm)
        return _are_matr_close(prod, IDENTITY_MATR4x4)

    def __repr__(self):
        row0, row1, row2, row3 = self.m
        fmtstring = "   [{0:6.3e} {1:6.3e} {2:6.3e} {3:6.3e}],\n"
        result = "[\n"
        result += fmtstring.format(*row0)
        result += fmtstring.format(*row1)
        result += fmtstring.format(*row2)
        result += fmtstring.format(*row3)
        result += "]"
        return result

    def is_close(self, other):
        return _are_matr_close(self.m, other.m) and _are_matr_close(self.invm, other.invm)

    def inverse(self):
        return Transformation(m=self.invm, invm=self.m)


def check_invertible(transformation: Transformation) -> Transformation:
    """Return `transformation` unchanged, or raise an error if it cannot be inverted

    Objects and patterns call this when they receive a transformation, so that a
    singular matrix is caught while the scene is being built."""
    if not transformation.is_consistent():
        raise NonInvertibleTransformationError(
            f"transformation {transformation} is not invertible or its inverse is wrong"
        )

    return transformation


def translation(vec):
    return Transformation(
        m=[[1.0, 0.0, 0.0, vec.x],
           [0.0, 1.0, 0.0, vec.y],
           [0.0, 0.0, 1.0, vec.z],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1.0, 0.0, 0.0, -vec.x],
              [0.0, 1.0, 0.0, -vec.y],
              [0.0, 0.0, 1.0, -vec.z],
              [0.0, 0.0, 0.0, 1.0]],
    )


def scaling(vec):
    if vec.x == 0.0 or vec.y == 0.0 or vec.z == 0.0:
        raise NonInvertibleTransformationError(f"scaling factors {vec} cannot be zero")

    return Transformation(
        m=[[vec.x, 0.0, 0.0, 0.0],
           [0.0, vec.y, 0.0, 0.0],
           [0.0, 0.0, vec.z, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1 / vec.x, 0.0, 0.0, 0.0],
              [0.0, 1 / vec.y, 0.0, 0.0],
              [0.0, 0.0, 1 / vec.z, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_x(angle_deg: float):
    sinang, cosang = sin(radians(angle_deg)), cos(radians(angle_deg))
    return Transformation(
        m=[[1.0, 0.0, 0.0, 0.0],
           [0.0, cosang, -sinang, 0.0],
           [0.0, sinang, cosang, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1.0, 0.0, 0.0, 0.0],
              [0.0, cosang, sinang, 0.0],
              [0.0, -sinang, cosang, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_y(angle_deg: float):
    sinang, cosang = sin(radians(angle_deg)), cos(radians(angle_deg))
    return Transformation(
        m=[[cosang, 0.0, sinang, 0.0],
           [0.0, 1.0, 0.0, 0.0],
           [-sinang, 0.0, cosang, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[cosang, 0.0, -sinang, 0.0],
              [0.0, 1.0, 0.0, 0.0],
              [sinang, 0.0, cosang, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_z(angle_deg: float):
    sinang, cosang = sin(radians(angle_deg)), cos(radians(angle_deg))
    return Transformation(
        m=[[cosang, -sinang, 0.0, 0.0],
           [sinang, cosang, 0.0, 0.0],
           [0.0, 0.0, 1.0, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[cosang, sinang, 0.0, 0.0],
              [-sinang, cosang, 0.0, 0.0],
              [0.0, 0.0, 1.0, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def shearing(xy=0.0, xz=0.0, yx=0.0, yz=0.0, zx=0.0, zy=0.0):
    """Return a shearing transformation

    Each parameter tells how much the first coordinate moves in proportion to the
    second one: e.g., `xy` moves `x` in proportion to `y`."""
    return Transformation.from_matrix([[1.0, xy, xz, 0.0],
                                       [yx, 1.0, yz, 0.0],
                                       [zx, zy, 1.0, 0.0],
                                       [0.0, 0.0, 0.0, 1.0]])


def view_transform(from_point: Point, to_point: Point, up: Vec):
    """Return the transformation that orients the world relative to an eye

    The eye is placed at `from_point` and looks at `to_point`; `up` tells roughly
    which direction is «up». The result maps world coordinates into camera
    coordinates, where the eye sits at the origin and looks along -z."""
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    if are_close(left.norm(), 0.0):
        raise NonInvertibleTransformationError("the «up» vector cannot be parallel to the line of sight")

    true_up = left.cross(forward)
    orientation = Transformation.from_matrix([[left.x, left.y, left.z, 0.0],
                                              [true_up.x, true_up.y, true_up.z, 0.0],
                                              [-forward.x, -forward.y, -forward.z, 0.0],
                                              [0.0, 0.0, 0.0, 1.0]])
    return orientation * translation(Vec(-from_point.x, -from_point.y, -from_point.z))
