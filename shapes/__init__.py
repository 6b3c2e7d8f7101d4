# Re-export core shape API for convenience
from .errors import (
    ShapeError,
    InvalidParameter,
    InvalidGeometry,
    IncompleteShape,
    MeasurementOverflow,
)
from .geometry import (
    ShapeKind,
    Metrics,
    CircleDims,
    RectangleDims,
    TriangleDims,
    measure,
    heron_area,
    pi_for,
    resolve_dtype,
)
from .policy import (
    Ok,
    Err,
    Result,
    unwrap,
    ShapePolicy,
    POLICIES,
    policy_for,
)
from .shape import Shape
from .builders import (
    ShapeBuilder,
    CircleBuilder,
    RectangleBuilder,
    TriangleBuilder,
)
from .factory import ShapeFactory, INTENTS
