"""
Gesture recognition classes that convert facial expressions into drawing events.
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple, Type

from .blendshapes import EYEBROW_RAISE_SHAPES, MOUTH_OPEN_SHAPES, SMILE_SHAPES, combined_score
from .config import Cfg
from .cursor import CursorTracker
from .debounce import Debouncer, FrameClock
from .types import (
    BlendshapeFrame,
    ColorCycle,
    CursorMove,
    DrawToggle,
    FrameState,
    GestureEvent,
    LandmarkSample,
    ToolCycle,
)

logger = logging.getLogger(__name__)


class ExpressionGesture:
    """
    Threshold detector for one facial expression.

    The score is the maximum over the listed blendshapes. The gesture is
    triggered when the score is strictly above the threshold and, for gated
    gestures, the head is stable. Debouncing is left to the classifier.
    """

    def __init__(self, name: str, shapes: Sequence[str], threshold: float,
                 event_type: Type[GestureEvent], requires_stable_head: bool = False):
        self.name = name
        self.shapes = tuple(shapes)
        self.threshold = threshold
        self.event_type = event_type
        self.requires_stable_head = requires_stable_head

    def score(self, frame: BlendshapeFrame) -> float:
        return combined_score(frame, self.shapes)

    def triggered(self, frame: BlendshapeFrame, head_stable: bool) -> bool:
        if self.requires_stable_head and not head_stable:
            return False
        return self.score(frame) > self.threshold

    def __repr__(self) -> str:
        return f"ExpressionGesture({self.name!r}, threshold={self.threshold})"


class GestureClassifier:
    """
    Turns blendshape scores into debounced discrete events.

    Gestures are independent: a smile and an open mouth in the same frame
    both fire. Each gesture has its own debounce timer.
    """

    def __init__(self, cfg: Cfg):
        """Initialize classifier with configuration."""
        self.cfg = cfg
        g = cfg.gestures
        self.gestures: List[ExpressionGesture] = [
            ExpressionGesture("smile", SMILE_SHAPES, g.smile_threshold, ToolCycle),
            ExpressionGesture("eyebrow_raise", EYEBROW_RAISE_SHAPES, g.eyebrow_raise_threshold,
                              ColorCycle, requires_stable_head=True),
            ExpressionGesture("mouth_open", MOUTH_OPEN_SHAPES, g.mouth_open_threshold, DrawToggle),
        ]
        self.debouncer = Debouncer(g.debounce_ms)
        self.clock = FrameClock()

    def update(self, frame: BlendshapeFrame, is_head_stable: bool, t_now: float) -> List[GestureEvent]:
        """
        Evaluate every gesture against one frame of scores.

        Args:
            frame: Blendshape name -> score for the current frame
            is_head_stable: Whether the head has been still long enough
            t_now: Current timestamp in milliseconds

        Returns:
            Events that fired this frame, in gesture order (0 to 3 events)
        """
        t_now = self.clock.advance(t_now)
        events: List[GestureEvent] = []

        for gesture in self.gestures:
            if not gesture.triggered(frame, is_head_stable):
                continue
            if not self.debouncer.try_fire(gesture.name, t_now):
                continue
            logger.info(f"Gesture {gesture.name} detected (score={gesture.score(frame):.2f})")
            events.append(gesture.event_type())

        return events

    def scores(self, frame: BlendshapeFrame) -> Dict[str, float]:
        """Combined score of each gesture for one frame."""
        return {gesture.name: gesture.score(frame) for gesture in self.gestures}

    def reset(self) -> None:
        """Forget all debounce timers."""
        self.debouncer.reset()
        self.clock.reset()


class GestureProcessor:
    """
    Main gesture processor that coordinates cursor tracking and expression detection.
    """

    def __init__(self, cfg: Cfg):
        """Initialize gesture processor with configuration."""
        self.cfg = cfg
        self.cursor_tracker = CursorTracker(cfg)
        self.classifier = GestureClassifier(cfg)

    def process_frame(self, blendshapes: Optional[BlendshapeFrame], landmark: Optional[LandmarkSample],
                      t_now: float) -> Tuple[List[GestureEvent], FrameState]:
        """
        Process a frame and return events and frame state.

        Args:
            blendshapes: Blendshape scores (None if no face detected)
            landmark: Nose tip position (None if no face detected)
            t_now: Current timestamp in milliseconds

        Returns:
            Tuple of (events, frame_state). Discrete gesture events come
            first, followed by the cursor move when a landmark was given.
        """
        cursor_event: Optional[CursorMove] = None
        if landmark is not None:
            position, head_stable = self.cursor_tracker.update(landmark, t_now)
            cursor_event = CursorMove(x=position.x, y=position.y)
        else:
            # Same monotonic time base as CursorTracker.update
            head_stable = self.cursor_tracker.is_head_stable(self.cursor_tracker.clock.advance(t_now))

        events: List[GestureEvent] = []
        scores: Dict[str, float] = {}
        if blendshapes is not None:
            events.extend(self.classifier.update(blendshapes, head_stable, t_now))
            scores = self.classifier.scores(blendshapes)

        if cursor_event is not None:
            events.append(cursor_event)

        state = FrameState(
            cursor=self.cursor_tracker.position,
            head_stable=head_stable,
            face_detected=landmark is not None or blendshapes is not None,
            scores=scores,
        )
        return events, state

    def reset(self) -> None:
        """Reset cursor, stability and debounce state."""
        self.cursor_tracker.reset()
        self.classifier.reset()
