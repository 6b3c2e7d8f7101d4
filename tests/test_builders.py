"""
Builder behaviour: per-field validation at assignment time, cross-field
validation at compute time, and the measured formulas per shape kind.
"""

import dataclasses
import math

import numpy as np
import pytest

from shapes import (
    CircleBuilder,
    Err,
    IncompleteShape,
    InvalidGeometry,
    InvalidParameter,
    MeasurementOverflow,
    RectangleBuilder,
    TriangleBuilder,
)


@pytest.mark.parametrize("r", [0.001, 0.5, 1.0, 3.5, 1234.5])
def test_circle_formulas(r):
    shape = CircleBuilder().set_radius(r).compute()
    assert shape.kind == "circle"
    assert shape.area() == pytest.approx(math.pi * r * r)
    assert shape.perimeter() == pytest.approx(2 * math.pi * r)


@pytest.mark.parametrize("r", [0, 0.0, -1, -0.001])
def test_circle_rejects_non_positive_radius(r):
    builder = CircleBuilder()
    with pytest.raises(InvalidParameter) as excinfo:
        builder.set_radius(r)
    assert excinfo.value.field == "radius"
    assert excinfo.value.value == r


@pytest.mark.parametrize("r", [float("nan"), float("inf")])
def test_circle_rejects_non_finite_radius(r):
    with pytest.raises(InvalidParameter):
        CircleBuilder().set_radius(r)


@pytest.mark.parametrize("r", ["3", None, True])
def test_setter_rejects_non_numbers(r):
    with pytest.raises(TypeError):
        CircleBuilder().set_radius(r)


def test_failed_setter_keeps_previous_value():
    builder = CircleBuilder().set_radius(2.0)
    with pytest.raises(InvalidParameter):
        builder.set_radius(-3.0)
    assert builder.values["radius"] == 2.0
    assert builder.compute().area() == pytest.approx(4 * math.pi)


@pytest.mark.parametrize("l,b", [(4.0, 2.5), (1.0, 1.0), (0.25, 80.0)])
def test_rectangle_formulas(l, b):
    shape = RectangleBuilder().set_length(l).set_breadth(b).compute()
    assert shape.area() == pytest.approx(l * b)
    assert shape.perimeter() == pytest.approx(2 * (l + b))


def test_rectangle_setters_are_order_independent():
    first = RectangleBuilder().set_breadth(2.5).set_length(4.0).compute()
    second = RectangleBuilder().set_length(4.0).set_breadth(2.5).compute()
    assert first.metrics == second.metrics


@pytest.mark.parametrize("field", ["length", "breadth"])
def test_rectangle_validates_each_field(field):
    builder = RectangleBuilder()
    with pytest.raises(InvalidParameter) as excinfo:
        getattr(builder, f"set_{field}")(-2.0)
    assert excinfo.value.field == field


@pytest.mark.parametrize("a,b,c", [(3.0, 4.0, 5.0), (6.0, 6.0, 4.0), (2.5, 2.5, 2.5), (7.0, 8.0, 9.0)])
def test_triangle_heron(a, b, c):
    shape = TriangleBuilder().set_side_a(a).set_side_b(b).set_side_c(c).compute()
    s = (a + b + c) / 2
    assert shape.area() == pytest.approx(math.sqrt(s * (s - a) * (s - b) * (s - c)))
    assert shape.perimeter() == pytest.approx(a + b + c)


@pytest.mark.parametrize("a,b,c", [(1.0, 1.0, 5.0), (5.0, 1.0, 1.0), (1.0, 5.0, 1.0), (1.0, 2.0, 3.0)])
def test_triangle_inequality_is_checked_at_compute(a, b, c):
    builder = TriangleBuilder().set_side_a(a).set_side_b(b).set_side_c(c)
    with pytest.raises(InvalidGeometry) as excinfo:
        builder.compute()
    assert tuple(float(x) for x in excinfo.value.sides) == (a, b, c)


def test_compute_before_all_fields_set():
    builder = TriangleBuilder().set_side_a(3.0).set_side_b(4.0)
    with pytest.raises(IncompleteShape) as excinfo:
        builder.compute()
    assert excinfo.value.kind == "triangle"
    assert excinfo.value.missing == ("c",)

    with pytest.raises(IncompleteShape):
        CircleBuilder().compute()


def test_compute_recomputes_from_current_fields():
    builder = RectangleBuilder().set_length(2.0).set_breadth(3.0)
    before = builder.compute()
    builder.set_length(5.0)
    after = builder.compute()
    assert before.area() == pytest.approx(6.0)
    assert after.area() == pytest.approx(15.0)


def test_accessors_are_idempotent():
    shape = TriangleBuilder().set_side_a(7.0).set_side_b(8.0).set_side_c(9.0).compute()
    areas = {shape.area() for _ in range(5)}
    perimeters = {shape.perimeter() for _ in range(5)}
    assert len(areas) == 1
    assert len(perimeters) == 1


def test_shape_is_read_only():
    shape = CircleBuilder().set_radius(1.0).compute()
    with pytest.raises(dataclasses.FrozenInstanceError):
        shape.metrics = None
    with pytest.raises(dataclasses.FrozenInstanceError):
        shape.dims.radius = 2.0


@pytest.mark.parametrize("dtype", [np.float32, np.float64, np.longdouble])
def test_float_type_is_preserved(dtype):
    shape = CircleBuilder(dtype).set_radius(3.5).compute()
    assert shape.dtype is dtype
    assert type(shape.area()) is dtype
    assert type(shape.perimeter()) is dtype
    assert float(shape.area()) == pytest.approx(math.pi * 3.5 ** 2, rel=1e-6)


def test_rejects_non_float_dtype():
    with pytest.raises(TypeError):
        CircleBuilder(np.int32)


def test_float16_overflow_is_invalid():
    with pytest.raises(InvalidParameter):
        CircleBuilder(np.float16).set_radius(1e6)


def test_int_beyond_float_range_is_invalid():
    with pytest.raises(InvalidParameter) as excinfo:
        CircleBuilder().set_radius(10 ** 400)
    assert excinfo.value.field == "radius"
    with pytest.raises(InvalidParameter):
        RectangleBuilder(np.float32).set_length(10 ** 40)


def test_overflowing_metrics_are_rejected():
    builder = RectangleBuilder().set_length(1e200).set_breadth(1e200)
    with pytest.raises(MeasurementOverflow) as excinfo:
        builder.compute()
    assert excinfo.value.dims.length == 1e200
    assert isinstance(builder.try_compute(), Err)


def test_large_triangle_area_stays_finite():
    shape = TriangleBuilder().set_side_a(1e100).set_side_b(1e100).set_side_c(1e100).compute()
    assert np.isfinite(shape.area())
    assert shape.area() == pytest.approx(math.sqrt(3) / 4 * 1e200)


def test_float32_triangle_near_type_limit():
    side = 1e19
    shape = TriangleBuilder(np.float32).set_side_a(side).set_side_b(side).set_side_c(side).compute()
    assert type(shape.area()) is np.float32
    assert float(shape.area()) == pytest.approx(math.sqrt(3) / 4 * side ** 2, rel=1e-5)
