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

from math import sqrt
from typing import List

from whitted.geometry import Point, Normal
from whitted.misc import PARALLEL_EPSILON
from whitted.ray import Ray


class Shape:
    """A generic 3D shape, living in its own canonical reference frame

    This is an abstract class, and you should only use it to derive concrete
    classes. Be sure to redefine :meth:`.Shape.local_intersect` and
    :meth:`.Shape.local_normal_at`. A shape knows nothing about its position in
    the world nor about its material: see :class:`.SceneObject` for that.
    """

    def local_intersect(self, ray: Ray) -> List[float]:
        """Return the distances along `ray` where it crosses the shape

        The ray is expressed in the shape's local frame. The result is either an
        empty list or a list of two values (possibly equal, possibly negative)."""
        raise NotImplementedError(
            "Shape.local_intersect is an abstract method and cannot be called directly"
        )

    def local_normal_at(self, point: Point) -> Normal:
        """Return the normal to the surface at `point`, in the shape's local frame"""
        raise NotImplementedError(
            "Shape.local_normal_at is an abstract method and cannot be called directly"
        )


class Sphere(Shape):
    """A 3D unit sphere centered on the origin of the axes"""

    def local_intersect(self, ray: Ray) -> List[float]:
        """Solve the quadratic equation |O + t D|² = 1

        Both roots are returned, even if they are negative (the sphere is behind
        the ray) or identical (the ray is tangent to the sphere)."""
        origin_vec = ray.origin.to_vec()
        a = ray.dir.squared_norm()
        b = 2.0 * origin_vec.dot(ray.dir)
        c = origin_vec.squared_norm() - 1.0

        delta = b * b - 4.0 * a * c
        if delta < 0.0:
            return []

        sqrt_delta = sqrt(delta)
        return [(-b - sqrt_delta) / (2.0 * a), (-b + sqrt_delta) / (2.0 * a)]

    def local_normal_at(self, point: Point) -> Normal:
        return Normal(point.x, point.y, point.z)


class Plane(Shape):
    """The xz plane (y = 0) in its local frame"""

    def local_intersect(self, ray: Ray) -> List[float]:
        if abs(ray.dir.y) < PARALLEL_EPSILON:
            return []

        t = -ray.origin.y / ray.dir.y
        # The plane is crossed once, but every shape reports hits in pairs
        return [t, t]

    def local_normal_at(self, point: Point) -> Normal:
        # The normal is the same everywhere
        return Normal(0.0, 1.0, 0.0)
