"""
Head-driven cursor tracking.

Maps the nose tip position reported by the face landmarker onto the canvas,
smooths it, and tracks whether the head has been holding still.
"""
import logging
import math
from typing import Tuple

from .config import Cfg
from .debounce import FrameClock, clamp
from .types import CursorState, HeadStabilityState, LandmarkSample, Position

logger = logging.getLogger(__name__)

# Normalized image center
CENTER_X = 0.5
CENTER_Y = 0.5


class CursorTracker:
    """
    Converts raw nose tip samples into a smoothed cursor position.

    Features:
    - Horizontal mirroring to match the mirrored camera preview
    - Displacement magnification around the image center
    - Exponential smoothing against the previous cursor position
    - Head stability timer feeding the eyebrow raise gate
    """

    def __init__(self, cfg: Cfg):
        """Initialize cursor tracker with configuration."""
        self.cfg = cfg
        self.cursor = CursorState()
        self.head = HeadStabilityState()
        self.clock = FrameClock()

    def update(self, raw: LandmarkSample, t_now: float) -> Tuple[Position, bool]:
        """
        Process one nose tip sample.

        Args:
            raw: Nose tip position, normalized to [0..1]
            t_now: Current timestamp in milliseconds

        Returns:
            Tuple of (smoothed cursor position, head is stable)
        """
        t_now = self.clock.advance(t_now)
        x_raw, y_raw = self._sanitize(raw)

        target = self.map_to_canvas(x_raw, y_raw)

        s = self.cfg.cursor.smoothing_factor
        smoothed_x = self.cursor.x * s + target.x * (1 - s)
        smoothed_y = self.cursor.y * s + target.y * (1 - s)

        # Track head movement for eyebrow raise gating
        head_movement = math.hypot(x_raw - self.head.last_x, y_raw - self.head.last_y)
        if head_movement < self.cfg.cursor.head_movement_threshold:
            if self.head.stable_since_ms is None:
                self.head.stable_since_ms = t_now
        else:
            if self.head.stable_since_ms is not None:
                logger.debug(f"Head moved {head_movement:.3f}, stability reset")
            self.head.stable_since_ms = None

        self.head.last_x = x_raw
        self.head.last_y = y_raw
        self.cursor.x = smoothed_x
        self.cursor.y = smoothed_y

        return Position(smoothed_x, smoothed_y), self.is_head_stable(t_now)

    def map_to_canvas(self, x: float, y: float) -> Position:
        """
        Map a normalized face position to canvas percent, before smoothing.

        The x axis is flipped, displacement from the center is multiplied by
        the movement multiplier, and the result is clamped to [0, 100].
        """
        multiplier = self.cfg.cursor.movement_multiplier
        x_disp = 1 - x - CENTER_X
        y_disp = y - CENTER_Y

        magnified_x = CENTER_X + x_disp * multiplier
        magnified_y = CENTER_Y + y_disp * multiplier

        return Position(
            x=clamp(magnified_x * 100, 0.0, 100.0),
            y=clamp(magnified_y * 100, 0.0, 100.0),
        )

    def is_head_stable(self, t_now: float) -> bool:
        """True once the head has stayed still for longer than the stability delay."""
        since = self.head.stable_since_ms
        return since is not None and t_now - since > self.cfg.cursor.stability_delay_ms

    @property
    def position(self) -> Position:
        return Position(self.cursor.x, self.cursor.y)

    def reset(self) -> None:
        """Return to the initial centered state."""
        self.cursor = CursorState()
        self.head = HeadStabilityState()
        self.clock.reset()

    def _sanitize(self, raw: LandmarkSample) -> Tuple[float, float]:
        # Non-finite coordinates fall back to the last known good sample
        x = raw.x if math.isfinite(raw.x) else self.head.last_x
        y = raw.y if math.isfinite(raw.y) else self.head.last_y
        if (x, y) != (raw.x, raw.y):
            logger.debug(f"Non-finite landmark ({raw.x}, {raw.y}), using last known position")
        return clamp(x, 0.0, 1.0), clamp(y, 0.0, 1.0)
