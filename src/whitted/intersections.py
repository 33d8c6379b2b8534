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

from dataclasses import dataclass
from math import sqrt
from typing import List, Optional, Union

from whitted.geometry import Point, Vec, reflect
from whitted.misc import EPSILON
from whitted.ray import Ray


@dataclass
class Computations:
    """
    The state needed to shade a ray-object intersection

    The fields are the following:

    -   `t`: the distance along the ray where the hit happened
    -   `object`: the :class:`.SceneObject` that was hit
    -   `point`: the hit point in world coordinates
    -   `eye`: a :class:`.Vec` pointing back towards the origin of the ray
    -   `normal`: the unit normal at `point`, flipped so that it faces the eye
    -   `inside`: true if the normal was flipped, i.e., the ray started inside the object
    -   `over_point`: `point` moved slightly along `normal`, used as the origin of shadow and reflected rays
    -   `under_point`: `point` moved slightly against `normal`, used as the origin of refracted rays
    -   `reflect`: the direction of the reflected ray
    -   `n1`, `n2`: the refractive indices of the media on the two sides of the surface
    """
    t: float
    object: "SceneObject"
    point: Point
    eye: Vec
    normal: Vec
    inside: bool
    over_point: Point
    under_point: Point
    reflect: Vec
    n1: float = 1.0
    n2: float = 1.0


@dataclass
class Intersection:
    """A point where a ray crosses an object

    The class has two fields: `t` (the distance along the ray) and `object` (the
    :class:`.SceneObject` being crossed). Comparing two intersections compares
    the objects by identity."""
    t: float
    object: "SceneObject"

    def prepare_computations(self, ray: Ray, intersections: Union[List["Intersection"], None] = None) -> Computations:
        """Derive everything that is needed to shade this intersection

        The list `intersections` must contain all the intersections along `ray`,
        sorted by increasing `t`, and must include this one: it is used to find the
        refractive indices `n1` and `n2`. If it is ``None``, the ray is assumed to
        cross nothing but this intersection."""
        if intersections is None:
            intersections = [self]

        point = ray.at(self.t)
        eye = -ray.dir
        normal = self.object.normal_at(point).to_vec()

        inside = normal.dot(eye) < 0.0
        if inside:
            normal = -normal

        n1, n2 = _refractive_indices(self, intersections)

        return Computations(
            t=self.t,
            object=self.object,
            point=point,
            eye=eye,
            normal=normal,
            inside=inside,
            over_point=point + normal * EPSILON,
            under_point=point - normal * EPSILON,
            reflect=reflect(ray.dir, normal),
            n1=n1,
            n2=n2,
        )


def _refractive_indices(target: Intersection, intersections: List[Intersection]):
    # Walk along the ray, keeping track of the objects the ray is currently inside
    containers = []
    n1, n2 = 1.0, 1.0
    for intersection in intersections:
        is_target = intersection == target
        if is_target:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if intersection.object in containers:
            containers.remove(intersection.object)
        else:
            containers.append(intersection.object)

        if is_target:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def hit(intersections: List[Intersection]) -> Optional[Intersection]:
    """Return the visible intersection, i.e., the one with the smallest non-negative `t`

    Intersections with negative `t` lie behind the origin of the ray and are never
    visible. If no intersection is visible, return ``None``."""
    closest = None
    for intersection in intersections:
        if intersection.t < 0.0:
            continue

        if (closest is None) or (intersection.t < closest.t):
            closest = intersection

    return closest


def schlick(comps: Computations) -> float:
    """Return the fraction of light reflected by the surface (Schlick's approximation of Fresnel's equations)"""
    cos = comps.eye.dot(comps.normal)
    if comps.n1 > comps.n2:
        n_ratio = comps.n1 / comps.n2
        sin2_t = n_ratio ** 2 * (1.0 - cos ** 2)
        if sin2_t > 1.0:
            # Total internal reflection
            return 1.0

        cos = sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
