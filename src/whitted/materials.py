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

from dataclasses import dataclass, field
from typing import Optional

from whitted.colors import Color, BLACK
from whitted.geometry import Point, Vec, reflect
from whitted.lights import PointLight
from whitted.patterns import Pattern


@dataclass
class Material:
    """The optical properties of a surface

    The fields are the following:

    -   `color`: the flat color of the surface, used when `pattern` is ``None``
    -   `ambient`, `diffuse`, `specular`, `shininess`: the coefficients of the Phong model
    -   `reflective`: how much of the reflected ray contributes to the color (0 = none, 1 = perfect mirror)
    -   `transparency`: how much of the refracted ray contributes to the color
    -   `refractive_index`: the refractive index of the medium enclosed by the surface
    -   `pattern`: an optional :class:`.Pattern` that replaces `color`

    No value is clamped: it is up to the caller to choose values that make sense.
    The same instance can be shared among many objects, and changing it affects all of them."""

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Optional[Pattern] = None

    @staticmethod
    def glass():
        """Return a transparent material with the refractive index of glass"""
        return Material(transparency=1.0, refractive_index=1.5)

    def lighting(self, obj: "SceneObject", light: PointLight, point: Point, eye: Vec, normal: Vec,
                 in_shadow: bool = False) -> Color:
        """Compute the color of `point` on `obj` using the Phong reflection model

        `eye` points from the surface towards the observer, and `normal` is the
        (unit) normal to the surface. If `in_shadow` is true, only the ambient
        term is returned."""
        if self.pattern:
            base_color = self.pattern.pattern_at_object(obj, point)
        else:
            base_color = self.color

        effective_color = base_color * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        to_light = light.position - point
        if to_light.norm() == 0.0:
            # A point at the position of the light has no direction to it
            return ambient

        light_vec = to_light.normalize()
        light_dot_normal = light_vec.dot(normal)
        if light_dot_normal <= 0.0:
            # The light is on the other side of the surface
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflect_dot_eye = reflect(-light_vec, normal).dot(eye)
        if reflect_dot_eye > 0.0:
            specular = light.intensity * (self.specular * reflect_dot_eye ** self.shininess)
        else:
            specular = BLACK

        return ambient + diffuse + specular
