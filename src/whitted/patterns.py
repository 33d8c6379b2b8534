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

from math import floor, sqrt

from whitted.colors import Color
from whitted.geometry import Point
from whitted.transformations import Transformation, check_invertible


class Pattern:
    """A «pattern»

    This abstract class represents a pattern, i.e., a function that associates a color with
    each point in 3D space. A pattern has its own transformation, which is applied on top of the
    transformation of the object it is painted on. Derived classes must redefine
    :meth:`.Pattern.pattern_at`."""

    def __init__(self, transformation: Transformation = Transformation()):
        self.transformation = transformation

    @property
    def transformation(self) -> Transformation:
        return self._transformation

    @transformation.setter
    def transformation(self, value: Transformation):
        self._transformation = check_invertible(value)

    def pattern_at(self, point: Point) -> Color:
        """Return the color of the pattern at a point expressed in the pattern's own frame"""
        raise NotImplementedError("Method Pattern.pattern_at is abstract and cannot be called")

    def pattern_at_object(self, obj: "SceneObject", world_point: Point) -> Color:
        """Return the color of the pattern at a point on `obj`

        The world point is first moved into the object's frame, then into the pattern's frame."""
        object_point = obj.transformation.inverse() * world_point
        pattern_point = self.transformation.inverse() * object_point
        return self.pattern_at(pattern_point)


class StripePattern(Pattern):
    """Stripes alternating along the x axis, each one unit wide"""

    def __init__(self, color1: Color, color2: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color1 = color1
        self.color2 = color2

    def pattern_at(self, point: Point) -> Color:
        return self.color1 if floor(point.x) % 2 == 0 else self.color2


class GradientPattern(Pattern):
    """A linear blend from `color1` to `color2` along x, repeating every unit"""

    def __init__(self, color1: Color, color2: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color1 = color1
        self.color2 = color2

    def pattern_at(self, point: Point) -> Color:
        fraction = point.x - floor(point.x)
        return self.color1 + (self.color2 - self.color1) * fraction


class RingPattern(Pattern):
    """Concentric rings around the y axis"""

    def __init__(self, color1: Color, color2: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color1 = color1
        self.color2 = color2

    def pattern_at(self, point: Point) -> Color:
        return self.color1 if floor(sqrt(point.x ** 2 + point.z ** 2)) % 2 == 0 else self.color2


class CheckersPattern(Pattern):
    """A 3D checkerboard made of unit cubes"""

    def __init__(self, color1: Color, color2: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color1 = color1
        self.color2 = color2

    def pattern_at(self, point: Point) -> Color:
        int_sum = floor(point.x) + floor(point.y) + floor(point.z)
        return self.color1 if int_sum % 2 == 0 else self.color2
