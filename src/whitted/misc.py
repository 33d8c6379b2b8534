# -*- encoding: utf-8 -*-

# Offset used to nudge hit points off the surface they lie on
EPSILON = 1e-5

# Below this value, the y component of a ray direction is considered parallel to a plane
PARALLEL_EPSILON = 1e-4

# Number of reflection/refraction bounces allowed for each camera ray
DEFAULT_MAX_DEPTH = 5


def are_close(num1, num2, epsilon=1e-6):
    """Return True if the two numbers differ by less than `epsilon`"""
    return abs(num1 - num2) < epsilon
