"""
Type definitions for face gesture drawing control.
"""
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Literal, Optional, Protocol, Union, runtime_checkable


# Shape name -> score in [0..1], one entry per MediaPipe blendshape
BlendshapeFrame = Dict[str, float]

GestureName = Literal["smile", "eyebrow_raise", "mouth_open", "cursor_move"]


@dataclass(frozen=True)
class LandmarkSample:
    """Normalized face reference point (nose tip) in [0..1] image coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class Position:
    """Cursor position in percent of the canvas, [0..100] on both axes."""
    x: float
    y: float


@dataclass(frozen=True)
class ToolCycle:
    """Smile detected: switch to the next drawing tool."""
    gesture: ClassVar[GestureName] = "smile"


@dataclass(frozen=True)
class ColorCycle:
    """Eyebrow raise detected: switch to the next color."""
    gesture: ClassVar[GestureName] = "eyebrow_raise"


@dataclass(frozen=True)
class DrawToggle:
    """Open mouth detected: toggle drawing on/off."""
    gesture: ClassVar[GestureName] = "mouth_open"


@dataclass(frozen=True)
class CursorMove:
    """Smoothed cursor moved to (x, y) percent."""
    x: float
    y: float
    gesture: ClassVar[GestureName] = "cursor_move"


GestureEvent = Union[ToolCycle, ColorCycle, DrawToggle, CursorMove]


@dataclass
class CursorState:
    """Last emitted smoothed cursor position."""
    x: float = 50.0
    y: float = 50.0


@dataclass
class HeadStabilityState:
    """Head movement tracking used to gate eyebrow detection."""
    last_x: float = 0.5
    last_y: float = 0.5
    stable_since_ms: Optional[float] = None  # None = head not currently stable


@dataclass
class FrameState:
    """Per-frame summary returned alongside the events."""
    cursor: Position
    head_stable: bool
    face_detected: bool
    scores: Dict[str, float] = field(default_factory=dict)  # gesture name -> combined score


@runtime_checkable
class ControllerProto(Protocol):
    """Abstract protocol for controllers that act on gesture events."""

    async def cycle_tool(self) -> None:
        """Switch to the next drawing tool."""
        ...

    async def cycle_color(self) -> None:
        """Switch to the next drawing color."""
        ...

    async def toggle_drawing(self) -> None:
        """Turn drawing on if it is off, off if it is on."""
        ...

    async def move_cursor(self, x: float, y: float) -> None:
        """Move the cursor to (x, y) percent of the canvas."""
        ...
