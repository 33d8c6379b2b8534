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

from typing import List, Optional

from whitted.geometry import Point, Normal
from whitted.intersections import Intersection
from whitted.materials import Material
from whitted.ray import Ray
from whitted.shapes import Shape
from whitted.transformations import Transformation, check_invertible


class SceneObject:
    """A shape placed in the world, with a transformation and a material

    Two objects are equal only if they are the very same instance: two spheres
    with the same transformation and material are still different objects.
    The material is kept by reference, so several objects can share it."""

    def __init__(self, shape: Shape, transformation: Transformation = Transformation(),
                 material: Optional[Material] = None):
        self.shape = shape
        self.transformation = transformation
        self.material = material if material is not None else Material()

    @property
    def transformation(self) -> Transformation:
        return self._transformation

    @transformation.setter
    def transformation(self, value: Transformation):
        self._transformation = check_invertible(value)

    def __repr__(self):
        return f"<SceneObject {type(self.shape).__name__} at {id(self):#x}>"

    def intersect(self, ray: Ray) -> List[Intersection]:
        """Return the intersections between the object and a ray expressed in world coordinates"""
        local_ray = ray.transform(self.transformation.inverse())
        return [Intersection(t=t, object=self) for t in self.shape.local_intersect(local_ray)]

    def normal_at(self, world_point: Point) -> Normal:
        """Return the unit normal to the surface of the object at `world_point`"""
        local_point = self.transformation.inverse() * world_point
        local_normal = self.shape.local_normal_at(local_point)
        # Multiplying a Normal uses the transpose of the inverse matrix
        return (self.transformation * local_normal).normalize()
