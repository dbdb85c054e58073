"""
Blendshape score helpers.

MediaPipe's face landmarker reports 52 ARKit-style blendshapes per face as
a list of categories. The gesture engine works on a plain name -> score
mapping and only ever reads a handful of names from it.
"""
import math
from typing import Dict, Iterable, Sequence, Tuple

from .debounce import clamp
from .types import BlendshapeFrame

# Blendshapes combined (by max) into each gesture score
SMILE_SHAPES: Tuple[str, ...] = ("mouthSmileLeft", "mouthSmileRight")
EYEBROW_RAISE_SHAPES: Tuple[str, ...] = ("browInnerUp", "browOuterUpLeft", "browOuterUpRight")
MOUTH_OPEN_SHAPES: Tuple[str, ...] = ("mouthOpen", "jawOpen")

GESTURE_SHAPES: Dict[str, Tuple[str, ...]] = {
    "smile": SMILE_SHAPES,
    "eyebrow_raise": EYEBROW_RAISE_SHAPES,
    "mouth_open": MOUTH_OPEN_SHAPES,
}


def blendshape_score(frame: BlendshapeFrame, name: str) -> float:
    """
    Score of a single blendshape.

    Missing names and non-numeric or non-finite scores count as 0.
    Scores are clamped to [0, 1].
    """
    value = frame.get(name, 0.0)
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return clamp(value, 0.0, 1.0)


def combined_score(frame: BlendshapeFrame, names: Sequence[str]) -> float:
    """Maximum score over several blendshapes."""
    return max((blendshape_score(frame, name) for name in names), default=0.0)


def gesture_scores(frame: BlendshapeFrame) -> Dict[str, float]:
    """Combined score for each discrete gesture, keyed by gesture name."""
    return {gesture: combined_score(frame, names) for gesture, names in GESTURE_SHAPES.items()}


def from_categories(categories: Iterable) -> BlendshapeFrame:
    """
    Convert MediaPipe blendshape categories into a name -> score mapping.

    Args:
        categories: Objects with ``category_name`` and ``score`` attributes

    Returns:
        Dictionary of blendshape scores
    """
    return {c.category_name: float(c.score) for c in categories}
