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

import math
import struct
from enum import Enum

from whitted.colors import Color


class Endianness(Enum):
    """Kinds of byte/bit endianness"""
    LITTLE_ENDIAN = 1
    BIG_ENDIAN = 2


# "<": little endian
# ">": big endian
# "f": single-precision floating point value (32 bit)
_FLOAT_STRUCT_FORMAT = {
    Endianness.LITTLE_ENDIAN: "<f",
    Endianness.BIG_ENDIAN: ">f",
}

# Lines in a PPM file should not be longer than this
_PPM_MAX_LINE_LENGTH = 70


def _write_float(stream, value, endianness=Endianness.LITTLE_ENDIAN):
    format_str = _FLOAT_STRUCT_FORMAT[endianness]
    stream.write(struct.pack(format_str, value))


def _clamp(x: float) -> float:
    return min(max(x, 0.0), 1.0)


def _to_byte(x: float, gamma: float = 1.0) -> int:
    # Round half up
    return int(255 * math.pow(_clamp(x), 1 / gamma) + 0.5)


class HdrImage:
    """A 2D matrix of colors, filled by :meth:`.Camera.render`

    This class has the following members:

    -   `width` (int): number of columns in the 2D matrix of colors
    -   `height` (int): number of rows in the 2D matrix of colors
    -   `pixels` (array of `Color`): the 2D matrix, represented as a 1D array

    Colors are stored as they are computed, i.e., with no clamping; clamping to
    the [0, 1] range happens only when the image is saved in a low-dynamic-range format.
    """

    def __init__(self, width=0, height=0):
        """Create a black image with the specified resolution"""
        (self.width, self.height) = (width, height)
        self.pixels = [Color() for i in range(self.width * self.height)]

    def valid_coordinates(self, x, y):
        """Return True if ``(x, y)`` are coordinates within the 2D matrix"""
        return ((x >= 0) and (x < self.width) and
                (y >= 0) and (y < self.height))

    def pixel_offset(self, x, y):
        """Return the position in the 1D array of the specified pixel"""
        return y * self.width + x

    def get_pixel(self, x, y):
        """Return the `Color` value for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y)
        return self.pixels[self.pixel_offset(x, y)]

    def set_pixel(self, x, y, new_color):
        """Set the new color for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y)
        self.pixels[self.pixel_offset(x, y)] = new_color

    def write_ppm(self, stream):
        """Write the image in a plain-text PPM (P3) file

        The `stream` parameter must be a text I/O stream. Color components are clamped
        to [0, 1] and scaled to the range 0…255."""
        stream.write(f"P3\n{self.width} {self.height}\n255\n")

        for y in range(self.height):
            line = ""
            for x in range(self.width):
                color = self.get_pixel(x, y)
                for component in (color.r, color.g, color.b):
                    value = str(_to_byte(component))
                    if line and len(line) + 1 + len(value) > _PPM_MAX_LINE_LENGTH:
                        stream.write(line + "\n")
                        line = ""

                    line = f"{line} {value}" if line else value

            stream.write(line + "\n")

    def write_pfm(self, stream, endianness=Endianness.LITTLE_ENDIAN):
        """Write the image in a PFM file

        The `stream` parameter must be a binary I/O stream. The parameter `endianness` specifies the byte endianness
        to be used in the file."""
        if endianness == Endianness.LITTLE_ENDIAN:
            endianness_str = "-1.0"
        else:
            endianness_str = "1.0"

        header = f"PF\n{self.width} {self.height}\n{endianness_str}\n"
        stream.write(header.encode("ascii"))

        # PFM files store rows from the bottom to the top
        for y in reversed(range(self.height)):
            for x in range(self.width):
                color = self.get_pixel(x, y)
                _write_float(stream, color.r, endianness=endianness)
                _write_float(stream, color.g, endianness=endianness)
                _write_float(stream, color.b, endianness=endianness)

    def write_ldr_image(self, stream, format, gamma=1.0):
        """Save the image in a LDR format supported by Pillow (PNG, JPEG, etc.)

        Color components are clamped to [0, 1] before applying the gamma correction.
        """
        from PIL import Image
        img = Image.new("RGB", (self.width, self.height))

        for y in range(self.height):
            for x in range(self.width):
                cur_color = self.get_pixel(x, y)
                img.putpixel(xy=(x, y), value=(
                    _to_byte(cur_color.r, gamma),
                    _to_byte(cur_color.g, gamma),
                    _to_byte(cur_color.b, gamma),
                ))

        img.save(stream, format=format)
