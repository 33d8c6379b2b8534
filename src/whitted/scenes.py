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

from typing import Tuple

from whitted.colors import Color, WHITE
from whitted.geometry import Point, Vec, VEC_Y
from whitted.lights import PointLight
from whitted.materials import Material
from whitted.objects import SceneObject
from whitted.patterns import StripePattern, CheckersPattern, RingPattern, GradientPattern
from whitted.shapes import Sphere, Plane
from whitted.transformations import translation, scaling, rotation_x, rotation_y, view_transform, Transformation
from whitted.world import World


def three_spheres() -> Tuple[World, Transformation]:
    """Three colored spheres standing on a striped floor

    Return the world and the view transformation of the camera."""
    floor = SceneObject(
        shape=Plane(),
        transformation=scaling(Vec(10.0, 1.0, 10.0)),
        material=Material(
            color=Color(1.0, 0.9, 0.9),
            specular=0.0,
            pattern=StripePattern(WHITE, Color(0.7, 0.7, 0.7)),
        ),
    )

    middle = SceneObject(
        shape=Sphere(),
        transformation=translation(Vec(-0.5, 1.0, 0.5)),
        material=Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
    )

    right = SceneObject(
        shape=Sphere(),
        transformation=translation(Vec(1.5, 0.5, -0.5)) * scaling(Vec(0.5, 0.5, 0.5)),
        material=Material(color=Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
    )

    left = SceneObject(
        shape=Sphere(),
        transformation=translation(Vec(-1.5, 0.33, -0.75)) * scaling(Vec(0.33, 0.33, 0.33)),
        material=Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    )

    world = World(
        light=PointLight(position=Point(-10.0, 10.0, -10.0), intensity=WHITE),
        objects=[floor, middle, right, left],
    )

    return world, view_transform(Point(0.0, 1.5, -5.0), Point(0.0, 1.0, 0.0), VEC_Y)


def mirrors_and_glass() -> Tuple[World, Transformation]:
    """A glass sphere and a mirror sphere in a room with patterned walls

    The two side walls share the same material. Return the world and the view
    transformation of the camera."""
    floor = SceneObject(
        shape=Plane(),
        material=Material(
            pattern=CheckersPattern(Color(0.35, 0.35, 0.35), Color(0.65, 0.65, 0.65)),
            specular=0.0,
            reflective=0.4,
        ),
    )

    wall_material = Material(
        pattern=StripePattern(Color(0.45, 0.45, 0.45), Color(0.55, 0.55, 0.55),
                              transformation=rotation_y(90.0) * scaling(Vec(0.25, 0.25, 0.25))),
        ambient=0.0,
        diffuse=0.4,
        specular=0.0,
    )
    left_wall = SceneObject(
        shape=Plane(),
        transformation=translation(Vec(-5.0, 0.0, 0.0)) * rotation_y(-45.0) * rotation_x(90.0),
        material=wall_material,
    )
    right_wall = SceneObject(
        shape=Plane(),
        transformation=translation(Vec(0.0, 0.0, 5.0)) * rotation_y(45.0) * rotation_x(90.0),
        material=wall_material,
    )

    glass = Material.glass()
    glass.color = Color(0.1, 0.1, 0.1)
    glass.diffuse = 0.1
    glass.reflective = 0.9
    glass.shininess = 300.0
    glass_sphere = SceneObject(
        shape=Sphere(),
        transformation=translation(Vec(-0.5, 1.0, 0.5)),
        material=glass,
    )

    mirror_sphere = SceneObject(
        shape=Sphere(),
        transformation=translation(Vec(1.5, 0.5, -0.5)) * scaling(Vec(0.5, 0.5, 0.5)),
        material=Material(color=Color(0.1, 0.1, 0.1), diffuse=0.2, reflective=0.8),
    )

    ringed_sphere = SceneObject(
        shape=Sphere(),
        transformation=translation(Vec(-1.7, 0.33, -0.75)) * scaling(Vec(0.33, 0.33, 0.33)),
        material=Material(
            pattern=RingPattern(Color(1.0, 0.8, 0.1), Color(0.9, 0.3, 0.1),
                                transformation=scaling(Vec(0.2, 0.2, 0.2))),
            diffuse=0.7,
            specular=0.3,
        ),
    )

    gradient_sphere = SceneObject(
        shape=Sphere(),
        transformation=translation(Vec(0.6, 0.25, -1.4)) * scaling(Vec(0.25, 0.25, 0.25)),
        material=Material(
            pattern=GradientPattern(Color(0.2, 0.3, 1.0), Color(0.9, 0.2, 0.6),
                                    transformation=translation(Vec(-1.0, 0.0, 0.0)) * scaling(Vec(2.0, 1.0, 1.0))),
            diffuse=0.7,
        ),
    )

    world = World(
        light=PointLight(position=Point(-4.9, 4.9, -1.0), intensity=WHITE),
        objects=[floor, left_wall, right_wall, glass_sphere, mirror_sphere, ringed_sphere, gradient_sphere],
    )

    return world, view_transform(Point(-2.6, 1.5, -3.9), Point(-0.6, 1.0, -0.8), VEC_Y)


SCENES = {
    "three-spheres": three_spheres,
    "mirrors-and-glass": mirrors_and_glass,
}
