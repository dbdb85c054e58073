"""
Face landmark and blendshape detection using MediaPipe FaceLandmarker.
"""
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import cv2
import mediapipe as mp
import numpy as np
from mediapipe.tasks.python import BaseOptions, vision

from .blendshapes import from_categories
from .types import BlendshapeFrame, LandmarkSample

logger = logging.getLogger(__name__)

NOSE_TIP = 1


class FaceTracker:
    """Face landmark tracker using the MediaPipe Tasks FaceLandmarker in video mode."""

    def __init__(self, model_path: str, num_faces: int = 1, min_detection_conf: float = 0.5,
                 min_tracking_conf: float = 0.5, nose_tip_index: int = NOSE_TIP):
        """
        Initialize the face tracker.

        Args:
            model_path: Path to the face_landmarker.task model bundle
            num_faces: Maximum number of faces to detect (only the first is used)
            min_detection_conf: Minimum confidence for face detection
            min_tracking_conf: Minimum confidence for face tracking
            nose_tip_index: Landmark index used as the cursor reference point

        Raises:
            FileNotFoundError: If the model file does not exist
        """
        if not Path(model_path).exists():
            raise FileNotFoundError(f"Face landmarker model not found: {model_path}")

        options = vision.FaceLandmarkerOptions(
            base_options=BaseOptions(model_asset_path=str(model_path)),
            running_mode=vision.RunningMode.VIDEO,
            num_faces=num_faces,
            output_face_blendshapes=True,
            min_face_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf,
        )
        self.landmarker = vision.FaceLandmarker.create_from_options(options)
        self.nose_tip_index = nose_tip_index
        self._last_timestamp_ms = -1
        logger.info(f"FaceLandmarker ready (model={model_path})")

    def process(self, frame_bgr: np.ndarray, timestamp_ms: float
                ) -> Optional[Tuple[BlendshapeFrame, LandmarkSample, List[Tuple[float, float]]]]:
        """
        Process a frame and return blendshapes and the nose tip.

        Args:
            frame_bgr: Input frame in BGR format
            timestamp_ms: Frame timestamp in milliseconds

        Returns:
            (blendshapes, nose_tip, all_landmarks) for the first face,
            or None if no face detected
        """
        # Video mode requires strictly increasing integer timestamps
        ts = max(int(timestamp_ms), self._last_timestamp_ms + 1)
        self._last_timestamp_ms = ts

        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        image = mp.Image(image_format=mp.ImageFormat.SRGB, data=frame_rgb)
        result = self.landmarker.detect_for_video(image, ts)

        if not result.face_landmarks:
            return None

        face = result.face_landmarks[0]
        landmarks = [(lm.x, lm.y) for lm in face]

        blendshapes: BlendshapeFrame = {}
        if result.face_blendshapes:
            blendshapes = from_categories(result.face_blendshapes[0])

        return blendshapes, nose_tip(landmarks, self.nose_tip_index), landmarks

    def draw_landmarks(self, frame: np.ndarray, landmarks: Sequence[Tuple[float, float]]) -> np.ndarray:
        """
        Draw face landmarks on the frame.

        Args:
            frame: Input frame
            landmarks: List of (x, y) coordinates in [0..1] range

        Returns:
            Frame with landmarks drawn
        """
        height, width = frame.shape[:2]
        for i, (x, y) in enumerate(landmarks):
            color = (0, 0, 255) if i == self.nose_tip_index else (0, 255, 0)
            cv2.circle(frame, (int(x * width), int(y * height)), 1, color, -1)
        return frame

    def close(self) -> None:
        self.landmarker.close()


def nose_tip(landmarks: Sequence[Tuple[float, float]], index: int = NOSE_TIP) -> LandmarkSample:
    """
    Pick the cursor reference point out of the face mesh.

    Args:
        landmarks: Face mesh landmarks as (x, y) in [0..1]
        index: Landmark index of the nose tip

    Returns:
        The nose tip as a LandmarkSample
    """
    x, y = landmarks[index]
    return LandmarkSample(x=x, y=y)
