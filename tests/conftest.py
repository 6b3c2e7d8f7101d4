"""
Shared pytest fixtures.

Matplotlib is switched to the non-interactive Agg backend before any test
module imports pyplot, so rendering tests run headless.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from shape_table import build_reference_shapes


@pytest.fixture
def reference_shapes():
    # circle 3.5, rectangle 4x2.5, square 5, triangle 3-4-5, isosceles 6/4, equilateral 2.5
    return build_reference_shapes()
