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

import logging
from concurrent.futures import ProcessPoolExecutor
from math import tan, radians
from time import perf_counter
from typing import List

from whitted.colors import Color
from whitted.geometry import Point
from whitted.hdrimages import HdrImage
from whitted.misc import DEFAULT_MAX_DEPTH
from whitted.ray import Ray
from whitted.transformations import Transformation, check_invertible
from whitted.world import World

logger = logging.getLogger(__name__)


class Camera:
    """A pinhole camera looking at the world through a rectangular grid of pixels

    The camera sits at the origin of its own reference frame and looks along the -z axis;
    the image plane is at z = -1. The `transformation` maps world coordinates into camera
    coordinates (see :func:`.view_transform`), so the default camera sits at the world origin.
    """

    def __init__(self, hsize: int, vsize: int, field_of_view_deg: float = 90.0,
                 transformation: Transformation = Transformation()):
        """Create a new camera

        The parameters `hsize` and `vsize` are the number of columns and rows in the image,
        and `field_of_view_deg` is the angle covered by the longest side of the image."""
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"invalid image size {hsize}×{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view_deg = field_of_view_deg
        self.transformation = transformation

        half_view = tan(radians(field_of_view_deg) / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width, self.half_height = half_view, half_view / aspect
        else:
            self.half_width, self.half_height = half_view * aspect, half_view

        self.pixel_size = (self.half_width * 2.0) / hsize

    @property
    def transformation(self) -> Transformation:
        return self._transformation

    @transformation.setter
    def transformation(self, value: Transformation):
        self._transformation = check_invertible(value)

    def ray_for_pixel(self, col: int, row: int) -> Ray:
        """Return the ray that leaves the camera and crosses the center of pixel (col, row)

        Pixel (0, 0) is the top-left corner of the image."""
        # The camera looks toward -z, so +x is on the left
        world_x = self.half_width - (col + 0.5) * self.pixel_size
        world_y = self.half_height - (row + 0.5) * self.pixel_size

        inv = self.transformation.inverse()
        pixel = inv * Point(world_x, world_y, -1.0)
        origin = inv * Point(0.0, 0.0, 0.0)
        return Ray(origin=origin, dir=(pixel - origin).normalize())

    def render(self, world: World, max_depth: int = DEFAULT_MAX_DEPTH, workers: int = 1,
               callback=None, callback_time_s: float = 2.0) -> HdrImage:
        """Render the world into a new :class:`.HdrImage`

        Every pixel is computed by :meth:`.World.color_at` with the same `max_depth`.
        If `workers` is greater than one, rows are computed in parallel by that many
        processes; the result is the same as the serial one. The function `callback`,
        if given, is called as ``callback(row, col)`` every `callback_time_s` seconds
        to report progress."""
        image = HdrImage(self.hsize, self.vsize)
        logger.debug("rendering a %d×%d image (max depth %d, %d worker(s))",
                     self.hsize, self.vsize, max_depth, workers)

        last_call_time = perf_counter()
        if callback:
            callback(0, 0)

        if workers > 1:
            with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                     initargs=(self, world, max_depth)) as executor:
                rows = executor.map(_render_row_in_worker, range(self.vsize))
                for row, colors in enumerate(rows):
                    last_call_time = self._store_row(image, row, colors, callback, callback_time_s, last_call_time)
        else:
            for row in range(self.vsize):
                colors = _render_row(self, world, max_depth, row)
                last_call_time = self._store_row(image, row, colors, callback, callback_time_s, last_call_time)

        logger.debug("rendering completed")
        return image

    def _store_row(self, image, row, colors, callback, callback_time_s, last_call_time):
        for col, color in enumerate(colors):
            image.set_pixel(col, row, color)

        current_time = perf_counter()
        if callback and (current_time - last_call_time > callback_time_s):
            callback(row, self.hsize - 1)
            return current_time

        return last_call_time


def _render_row(camera: Camera, world: World, max_depth: int, row: int) -> List[Color]:
    return [world.color_at(camera.ray_for_pixel(col, row), max_depth) for col in range(camera.hsize)]


# Camera, world and maximum depth used by a worker process, set once by _init_worker
_worker_job = None


def _init_worker(camera: Camera, world: World, max_depth: int):
    global _worker_job
    _worker_job = (camera, world, max_depth)


def _render_row_in_worker(row: int) -> List[Color]:
    # Module-level function, so that worker processes can unpickle it
    camera, world, max_depth = _worker_job
    return _render_row(camera, world, max_depth, row)
