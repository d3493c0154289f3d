"""
Numerical Configuration
=======================
This module is the central registry for the global numeric constants of the
kernel.

Why is this file needed?
------------------------
1. Consistency: every equality, containment and boundary test compares against
   the same absolute tolerance, so a point that one shape reports on its
   boundary is also accepted by the intersection handlers.
2. Tuning: sampling densities of the numeric curve solvers (ellipse and bezier
   crossings, closest points) live in one place instead of being scattered as
   literals.

Exports:
    EPSILON (float): Absolute tolerance used by all geometric comparisons.
    SUPER_TRIANGLE_SCALE (float): Size factor of the Delaunay super-triangle.
    BEZIER_SEGMENTS (int): Default number of segments when discretizing curves.
    BEZIER_LENGTH_SEGMENTS (int): Segments used to approximate curve length.
    CURVE_SAMPLES (int): Parameter samples used to bracket curve roots.
    ROOT_XTOL (float): Absolute parameter tolerance of the root refinement.
"""

# Global Constants
EPSILON: float = 1e-10
SUPER_TRIANGLE_SCALE: float = 20.0

BEZIER_SEGMENTS: int = 10
BEZIER_LENGTH_SEGMENTS: int = 20

CURVE_SAMPLES: int = 64
ROOT_XTOL: float = 1e-14
NEWTON_ITERATIONS: int = 25
