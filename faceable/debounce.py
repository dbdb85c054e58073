"""
Timing helpers shared by the cursor tracker and the gesture classifier.
"""
import logging
import math
import time
from typing import Dict, Hashable, Optional

logger = logging.getLogger(__name__)


def now_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


class FrameClock:
    """
    Keeps frame timestamps non-decreasing.

    A timestamp earlier than the last one seen is replaced by the last one,
    so stored timers never move backwards.
    """

    def __init__(self):
        self.last_ms: Optional[float] = None

    def advance(self, t_ms: float) -> float:
        if not math.isfinite(t_ms):
            logger.debug(f"Non-finite timestamp {t_ms}, holding previous")
            return self.last_ms if self.last_ms is not None else 0.0
        if self.last_ms is not None and t_ms < self.last_ms:
            logger.debug(f"Timestamp went backwards ({t_ms:.1f} < {self.last_ms:.1f} ms), clamping")
            return self.last_ms
        self.last_ms = t_ms
        return t_ms

    def reset(self) -> None:
        self.last_ms = None


class Debouncer:
    """
    Per-key debounce timers.

    A key may fire when it has never fired or when more than ``window_ms``
    has passed since it last fired.
    """

    def __init__(self, window_ms: float):
        self.window_ms = window_ms
        self._last_fired: Dict[Hashable, float] = {}

    def ready(self, key: Hashable, t_ms: float) -> bool:
        """Return True if ``key`` is outside its debounce window at ``t_ms``."""
        last = self._last_fired.get(key)
        return last is None or t_ms - last > self.window_ms

    def fire(self, key: Hashable, t_ms: float) -> None:
        """Record that ``key`` fired at ``t_ms``."""
        self._last_fired[key] = t_ms

    def try_fire(self, key: Hashable, t_ms: float) -> bool:
        """Fire ``key`` if it is ready. Returns whether it fired."""
        if not self.ready(key, t_ms):
            return False
        self.fire(key, t_ms)
        return True

    def last_fired(self, key: Hashable) -> Optional[float]:
        return self._last_fired.get(key)

    def reset(self) -> None:
        self._last_fired.clear()
