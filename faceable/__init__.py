"""
Face Gesture Drawing Control

A Python service that reads webcam frames, detects face blendshapes and landmarks
using MediaPipe, and turns facial expressions and head movement into drawing
events: smile to switch tool, raise eyebrows to change color, open mouth to
toggle drawing, move head to move the cursor.
"""

__version__ = "0.1.0"

from .types import (
    BlendshapeFrame,
    LandmarkSample,
    Position,
    ToolCycle,
    ColorCycle,
    DrawToggle,
    CursorMove,
    GestureEvent,
    FrameState,
    ControllerProto,
)
from .config import load_config, Cfg, ConfigError
from .controller_mock import MockController
from .cursor import CursorTracker
from .gestures import GestureClassifier, GestureProcessor
from .dispatch import dispatch

__all__ = [
    "BlendshapeFrame",
    "LandmarkSample",
    "Position",
    "ToolCycle",
    "ColorCycle",
    "DrawToggle",
    "CursorMove",
    "GestureEvent",
    "FrameState",
    "ControllerProto",
    "load_config",
    "Cfg",
    "ConfigError",
    "MockController",
    "CursorTracker",
    "GestureClassifier",
    "GestureProcessor",
    "dispatch",
]
