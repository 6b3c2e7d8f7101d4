from __future__ import annotations

from typing import Callable, Dict
import logging
import numpy as np

from .builders import CircleBuilder, RectangleBuilder, TriangleBuilder
from .errors import ShapeError
from .policy import Err, Ok, Result
from .shape import Shape

logger = logging.getLogger(__name__)


class ShapeFactory:
    """
    Named construction intents on top of the builders.

    Every method sets all dimensions of its builder before compute(), and lets
    validation errors propagate unchanged.
    """

    @staticmethod
    def create_circle(r: float, dtype=np.float64) -> Shape:
        return CircleBuilder(dtype).set_radius(r).compute()

    @staticmethod
    def create_rectangle(l: float, b: float, dtype=np.float64) -> Shape:
        builder = RectangleBuilder(dtype)
        builder.set_length(l)
        builder.set_breadth(b)
        return builder.compute()

    @staticmethod
    def create_square(side: float, dtype=np.float64) -> Shape:
        builder = RectangleBuilder(dtype)
        builder.set_length(side)
        builder.set_breadth(side)
        return builder.compute()

    @staticmethod
    def create_triangle(a: float, b: float, c: float, dtype=np.float64) -> Shape:
        builder = TriangleBuilder(dtype)
        builder.set_side_a(a)
        builder.set_side_b(b)
        builder.set_side_c(c)
        return builder.compute()

    @staticmethod
    def create_isosceles_triangle(equal_side: float, other_side: float, dtype=np.float64) -> Shape:
        builder = TriangleBuilder(dtype)
        builder.set_side_a(equal_side)
        builder.set_side_b(equal_side)
        builder.set_side_c(other_side)
        return builder.compute()

    @staticmethod
    def create_equilateral_triangle(side: float, dtype=np.float64) -> Shape:
        builder = TriangleBuilder(dtype)
        builder.set_side_a(side)
        builder.set_side_b(side)
        builder.set_side_c(side)
        return builder.compute()

    # ---- Dispatch by name ----
    @staticmethod
    def create(intent: str, *dims: float, dtype=np.float64) -> Shape:
        try:
            make = INTENTS[intent]
        except KeyError:
            raise ValueError(
                f"unknown shape intent: {intent!r} (expected one of {', '.join(INTENTS)})"
            ) from None
        logger.debug("Creating %s from %s", intent, dims)
        return make(*dims, dtype=dtype)

    @staticmethod
    def try_create(intent: str, *dims: float, dtype=np.float64) -> Result[Shape]:
        """
        Like create(), but validation failures come back as Err values instead of being raised.
        """
        try:
            return Ok(ShapeFactory.create(intent, *dims, dtype=dtype))
        except ShapeError as e:
            return Err(e)


INTENTS: Dict[str, Callable[..., Shape]] = {
    "circle": ShapeFactory.create_circle,
    "rectangle": ShapeFactory.create_rectangle,
    "square": ShapeFactory.create_square,
    "triangle": ShapeFactory.create_triangle,
    "isosceles": ShapeFactory.create_isosceles_triangle,
    "equilateral": ShapeFactory.create_equilateral_triangle,
}
