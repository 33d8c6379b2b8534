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
from typing import List, Optional

from whitted.colors import Color, BLACK
from whitted.geometry import Point, Vec
from whitted.intersections import Computations, Intersection, hit, schlick
from whitted.lights import PointLight
from whitted.materials import Material
from whitted.misc import DEFAULT_MAX_DEPTH
from whitted.objects import SceneObject
from whitted.ray import Ray
from whitted.shapes import Sphere
from whitted.transformations import scaling


class MissingLightSourceError(Exception):
    """Raised when a world without a light source is asked to shade a point"""

    def __init__(self, error_message):
        super().__init__(error_message)


class World:
    """A class holding a list of objects and a light source, which make a «world»

    You can add objects to a world using :meth:`.World.add`. Typically, you call
    :meth:`.World.color_at` to compute the color seen along a ray. The world must
    not be modified while an image is being rendered.
    """

    def __init__(self, light: Optional[PointLight] = None, objects: Optional[List[SceneObject]] = None):
        self.light = light
        self.objects = list(objects) if objects else []

    def add(self, obj: SceneObject):
        """Append a new object to this world"""
        self.objects.append(obj)

    def _check_light(self) -> PointLight:
        if self.light is None:
            raise MissingLightSourceError("the world has no light source")

        return self.light

    def intersect(self, ray: Ray) -> List[Intersection]:
        """Return all the intersections between `ray` and the objects, sorted by increasing `t`

        Intersections with the same `t` keep the order of the objects in the world."""
        result = []
        for obj in self.objects:
            result.extend(obj.intersect(ray))

        # sort() is stable, so ties keep the order in which objects were added
        result.sort(key=lambda intersection: intersection.t)
        return result

    def is_shadowed(self, point: Point) -> bool:
        """Return True if some object lies between `point` and the light source"""
        light = self._check_light()
        to_light = light.position - point
        distance = to_light.norm()
        if distance == 0.0:
            # The point is the light itself, so nothing can stand in between
            return False

        closest = hit(self.intersect(Ray(origin=point, dir=to_light.normalize())))
        return (closest is not None) and (closest.t < distance)

    def shade_hit(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Compute the color at a hit point, including reflections and refractions

        `remaining` is the number of further bounces that can still be traced."""
        light = self._check_light()
        material = comps.object.material

        surface = material.lighting(
            obj=comps.object,
            light=light,
            point=comps.point,
            eye=comps.eye,
            normal=comps.normal,
            in_shadow=self.is_shadowed(comps.over_point),
        )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)

        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Return the color seen along `ray`, or black if the ray hits nothing"""
        intersections = self.intersect(ray)
        closest = hit(intersections)
        if closest is None:
            return BLACK

        comps = closest.prepare_computations(ray, intersections)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Return the contribution of the reflected ray to the color of a hit point"""
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return BLACK

        reflected_ray = Ray(origin=comps.over_point, dir=comps.reflect)
        return self.color_at(reflected_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Return the contribution of the refracted ray to the color of a hit point

        The direction of the refracted ray follows Snell's law. If the ray is totally
        reflected inside the surface, the contribution is black."""
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eye.dot(comps.normal)
        sin2_t = n_ratio ** 2 * (1.0 - cos_i ** 2)
        if sin2_t > 1.0:
            # Total internal reflection
            return BLACK

        cos_t = sqrt(1.0 - sin2_t)
        direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eye * n_ratio
        refracted_ray = Ray(origin=comps.under_point, dir=direction)
        return self.color_at(refracted_ray, remaining - 1) * transparency


def default_world() -> World:
    """Return a world with two concentric spheres lit from the upper left

    The outer sphere has radius 1 and a greenish material, the inner one has
    radius 0.5 and the default material."""
    outer = SceneObject(
        shape=Sphere(),
        material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
    )
    inner = SceneObject(shape=Sphere(), transformation=scaling(Vec(0.5, 0.5, 0.5)))

    return World(
        light=PointLight(position=Point(-10.0, 10.0, -10.0), intensity=Color(1.0, 1.0, 1.0)),
        objects=[outer, inner],
    )
