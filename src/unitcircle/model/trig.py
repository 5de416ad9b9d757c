"""
Trigonometry of the unit circle.

Everything here is a pure function of the angle (radians). The construction
segments follow the classic geometric definitions:

- cos/sin are the legs of the right triangle under the radius,
- tan lies on the vertical tangent line x = +-1, sec joins it to the origin,
- cot lies on the horizontal tangent line y = +-1, csc joins it to the origin.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
from typing import Iterable

from unitcircle import config
from unitcircle.model.geometry_primitives import ORIGIN, Point, Segment

TWO_PI = 2.0 * math.pi


class TrigFunction(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COT = "cot"
    SEC = "sec"
    CSC = "csc"


BASIC_FUNCTIONS: frozenset[TrigFunction] = frozenset(
    {TrigFunction.SIN, TrigFunction.COS, TrigFunction.TAN}
)
ALL_FUNCTIONS: frozenset[TrigFunction] = frozenset(TrigFunction)


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2*pi)."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # fmod of a tiny negative number can round up to exactly 2*pi
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def normalize_degrees(degrees: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    wrapped = math.fmod(degrees, 360.0)
    if wrapped < 0.0:
        wrapped += 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


def _snap(value: float, step: float, turn: float) -> float:
    """Nearest multiple of `step` (halves round up), a full turn folds back to zero."""
    index = math.floor(value / step + 0.5)
    steps_per_turn = turn / step
    if math.isclose(steps_per_turn, round(steps_per_turn)):
        index %= round(steps_per_turn)
    return index * step


def snap_to_degrees(angle: float, step_degrees: float = config.DEGREE_STEP) -> float:
    """Round an angle (radians) to the nearest multiple of `step_degrees`."""
    snapped = _snap(math.degrees(angle), step_degrees, 360.0)
    return normalize_angle(math.radians(snapped))


def snap_to_radians(angle: float, step: float = config.RADIAN_STEP) -> float:
    """Round an angle (radians) to the nearest multiple of `step` (pi/24 by default)."""
    return normalize_angle(_snap(angle, step, TWO_PI))


def angle_from_vector(dx: float, dy: float) -> float | None:
    """
    Angle of the vector (dx, dy) in [0, 2*pi), y pointing up.

    Returns None for the zero vector, whose direction is undefined.
    """
    if dx == 0.0 and dy == 0.0:
        return None
    return normalize_angle(math.atan2(dy, dx))


def _reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class TrigValues:
    """All six ratios for one angle."""
    angle: float
    sin: float
    cos: float
    tan: float
    cot: float
    sec: float
    csc: float

    @classmethod
    def from_angle(cls, angle: float) -> TrigValues:
        x = math.cos(angle)
        y = math.sin(angle)
        tan_val = math.tan(angle)
        return cls(
            angle=angle,
            sin=y,
            cos=x,
            tan=tan_val,
            cot=_reciprocal(tan_val),
            sec=_reciprocal(x),
            csc=_reciprocal(y),
        )

    @property
    def point(self) -> Point:
        return Point(self.cos, self.sin)

    def value_of(self, function: TrigFunction) -> float:
        return getattr(self, function.value)


def _side(value: float) -> float:
    return 1.0 if value >= 0.0 else -1.0


@dataclass(frozen=True)
class Construction:
    """
    Model-space segments of the geometric construction for one angle.

    Segments that are undefined near an asymptote (or whose function is
    disabled) are None.
    """
    cosine: Segment
    sine: Segment
    radius: Segment
    tangent: Segment | None = None
    secant: Segment | None = None
    cotangent: Segment | None = None
    cosecant: Segment | None = None


def construction_segments(
    angle: float,
    enabled: Iterable[TrigFunction] = ALL_FUNCTIONS,
    epsilon: float = config.ASYMPTOTE_EPSILON,
) -> Construction:
    """Build the construction segments for `angle`, applying the asymptote guard."""
    enabled = frozenset(enabled)
    values = TrigValues.from_angle(angle)
    x, y = values.cos, values.sin
    foot = Point(x, 0.0)
    tip = Point(x, y)

    tangent = secant = None
    if abs(x) >= epsilon:
        target_x = _side(x)
        tan_end = Point(target_x, values.tan * target_x)
        if TrigFunction.TAN in enabled:
            tangent = Segment(Point(target_x, 0.0), tan_end)
        if TrigFunction.SEC in enabled:
            secant = Segment(ORIGIN, tan_end)

    cotangent = cosecant = None
    if abs(y) >= epsilon:
        target_y = _side(y)
        cot_end = Point(values.cot * target_y, target_y)
        if TrigFunction.COT in enabled:
            cotangent = Segment(Point(0.0, target_y), cot_end)
        if TrigFunction.CSC in enabled:
            cosecant = Segment(ORIGIN, cot_end)

    return Construction(
        cosine=Segment(ORIGIN, foot),
        sine=Segment(foot, tip),
        radius=Segment(ORIGIN, tip),
        tangent=tangent,
        secant=secant,
        cotangent=cotangent,
        cosecant=cosecant,
    )
