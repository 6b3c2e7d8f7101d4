from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar, Union
import numpy as np

from .errors import IncompleteShape, ShapeError
from .geometry import (
    CircleDims,
    Dims,
    Metrics,
    RectangleDims,
    ShapeKind,
    TriangleDims,
    as_dimension,
    measure,
)


T = TypeVar("T")


# ---- Result values ----
@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ShapeError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def unwrap(result: Result[T]) -> T:
    """
    Return the value of an Ok, or raise the error carried by an Err.
    """
    if isinstance(result, Err):
        raise result.error
    return result.value


# ---- Per-kind policies ----
class ShapePolicy:
    """
    Validation and derivation for one shape kind.

    validate() turns raw, possibly partial field values into a dimension variant
    (or an Err describing why it can't); derive() measures a validated variant.
    """

    def __init__(self, dims_cls: Type[Dims]):
        self.dims_cls = dims_cls

    @property
    def kind(self) -> ShapeKind:
        return self.dims_cls.kind

    @property
    def fields(self) -> Tuple[str, ...]:
        return self.dims_cls.fields

    def check_field(self, name: str, value, dtype=np.float64) -> Result[np.floating]:
        if name not in self.fields:
            raise KeyError(f"{self.kind} has no dimension {name!r}")
        try:
            return Ok(as_dimension(name, value, dtype))
        except ShapeError as e:
            return Err(e)

    def validate(self, raw: Mapping[str, Optional[float]], dtype=np.float64) -> Result[Dims]:
        missing = tuple(name for name in self.fields if raw.get(name) is None)
        if missing:
            return Err(IncompleteShape(self.kind, missing))
        try:
            return Ok(self.dims_cls(*(raw[name] for name in self.fields), dtype=dtype))
        except ShapeError as e:
            return Err(e)

    def derive(self, dims: Dims) -> Metrics:
        if not isinstance(dims, self.dims_cls):
            raise TypeError(f"{self.kind} policy cannot measure {type(dims).__name__}")
        return measure(dims)

    def __repr__(self) -> str:
        return f"ShapePolicy({self.kind})"


CIRCLE = ShapePolicy(CircleDims)
RECTANGLE = ShapePolicy(RectangleDims)
TRIANGLE = ShapePolicy(TriangleDims)

POLICIES: Dict[ShapeKind, ShapePolicy] = {p.kind: p for p in (CIRCLE, RECTANGLE, TRIANGLE)}


def policy_for(kind: ShapeKind) -> ShapePolicy:
    try:
        return POLICIES[kind]
    except KeyError:
        raise ValueError(f"unknown shape kind: {kind}") from None
