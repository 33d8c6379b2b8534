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
import sys
from dataclasses import dataclass
from time import perf_counter

import click

from whitted.camera import Camera
from whitted.misc import DEFAULT_MAX_DEPTH
from whitted.scenes import SCENES
from whitted.transformations import NonInvertibleTransformationError
from whitted.world import MissingLightSourceError


@dataclass
class RenderParameters:
    scene: str = "three-spheres"
    width: int = 640
    height: int = 480
    fov_deg: float = 60.0
    max_depth: int = DEFAULT_MAX_DEPTH
    workers: int = 1
    ppm_output: str = ""
    pfm_output: str = ""
    png_output: str = ""
    gamma: float = 1.0


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print debugging messages")
def cli(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s: %(message)s")


def render_scene(params: RenderParameters):
    """Render one of the built-in scenes and save it in the requested formats"""
    world, view = SCENES[params.scene]()

    camera = Camera(hsize=params.width, vsize=params.height, field_of_view_deg=params.fov_deg, transformation=view)
    print(f"Generating a {params.width}×{params.height} image of scene «{params.scene}»")

    def print_progress(row, col):
        print(f"Rendering row {row + 1}/{params.height}\r", end="")

    start_time = perf_counter()
    image = camera.render(world, max_depth=params.max_depth, workers=params.workers, callback=print_progress)
    elapsed_time = perf_counter() - start_time
    print(f"Rendering completed in {elapsed_time:.1f} s")

    if params.ppm_output:
        with open(params.ppm_output, "wt") as outf:
            image.write_ppm(outf)
        print(f"PPM image written to {params.ppm_output}")

    if params.pfm_output:
        with open(params.pfm_output, "wb") as outf:
            image.write_pfm(outf)
        print(f"PFM image written to {params.pfm_output}")

    if params.png_output:
        with open(params.png_output, "wb") as outf:
            image.write_ldr_image(outf, "PNG", gamma=params.gamma)
        print(f"PNG image written to {params.png_output}")

    return image


@click.command("render")
@click.option("--scene", type=click.Choice(sorted(SCENES.keys())), default="three-spheres",
              help="Name of the built-in scene to render")
@click.option("--width", type=int, default=640, help="Width of the image to render")
@click.option("--height", type=int, default=480, help="Height of the image to render")
@click.option("--fov", type=float, default=60.0, help="Field of view of the camera, in degrees")
@click.option(
    "--max-depth",
    type=int,
    default=DEFAULT_MAX_DEPTH,
    help="Maximum number of reflections/refractions followed for each ray",
)
@click.option("--workers", type=int, default=1, help="Number of processes used to render the image")
@click.option("--ppm-output", type=str, default="", help="Name of the PPM file to create (optional)")
@click.option("--pfm-output", type=str, default="", help="Name of the PFM file to create (optional)")
@click.option("--png-output", type=str, default="", help="Name of the PNG file to create (optional)")
@click.option("--gamma", type=float, default=1.0, help="Exponent for gamma-correction (PNG only)")
def render(scene, width, height, fov, max_depth, workers, ppm_output, pfm_output, png_output, gamma):
    params = RenderParameters(
        scene=scene,
        width=width,
        height=height,
        fov_deg=fov,
        max_depth=max_depth,
        workers=workers,
        ppm_output=ppm_output,
        pfm_output=pfm_output,
        png_output=png_output,
        gamma=gamma,
    )

    try:
        render_scene(params)
    except (ValueError, NonInvertibleTransformationError, MissingLightSourceError) as e:
        print(f"Error: {e}")
        sys.exit(1)


cli.add_command(render)

if __name__ == "__main__":
    cli()
