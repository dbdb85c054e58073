"""
Main application for face gesture drawing control.
"""
import argparse
import asyncio
import logging
from typing import Optional

import cv2
import numpy as np

from .config import ConfigError, load_config
from .controller_mock import MockController
from .debounce import now_ms
from .dispatch import dispatch
from .gestures import GestureProcessor
from .landmarks import FaceTracker
from .types import FrameState

logger = logging.getLogger(__name__)


class FaceDrawingApp:
    """Main application class for face gesture drawing control."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        logging.basicConfig(level=getattr(logging, self.config.logging.level.upper(), logging.INFO))

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

        fl = self.config.face_landmarker
        try:
            self.tracker = FaceTracker(
                model_path=fl.model_path,
                num_faces=fl.num_faces,
                min_detection_conf=fl.min_detection_confidence,
                min_tracking_conf=fl.min_tracking_confidence,
                nose_tip_index=fl.nose_tip_index,
            )
        except Exception:
            self.cap.release()
            raise

        self.controller = MockController()
        self.gesture_processor = GestureProcessor(self.config)

    async def run(self):
        """Run the main application loop."""
        logger.info(f"Starting {self.config.display.window_name}")
        print("🎨 Face Gestures:")
        print("  - Open mouth = Toggle drawing")
        print("  - Smile = Switch tool")
        print("  - Raise eyebrows (hold head still) = Change color")
        print("  - Move head = Move cursor")
        print("Press 'q' to quit")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                t_now = now_ms()
                detection = self.tracker.process(frame, t_now)

                blendshapes, landmark, landmarks = (None, None, None)
                if detection is not None:
                    blendshapes, landmark, landmarks = detection

                events, state = self.gesture_processor.process_frame(blendshapes, landmark, t_now)
                await dispatch(self.controller, events)

                if landmarks and self.config.display.show_landmarks:
                    frame = self.tracker.draw_landmarks(frame, landmarks)
                # Mirror the preview so head movement matches cursor movement
                frame = cv2.flip(frame, 1)
                self._draw_hud(frame, state)

                cv2.imshow(self.config.display.window_name, frame)

                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
        finally:
            self.close()

    def _draw_hud(self, frame: np.ndarray, state: FrameState) -> None:
        height, width = frame.shape[:2]

        if not state.face_detected:
            status_text = "No face detected"
        else:
            status_text = "Head: stable" if state.head_stable else "Head: moving"
        cv2.putText(frame, status_text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
        cv2.putText(frame, self.controller.status(), (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

        scores_text = "  ".join(f"{name}={score:.2f}" for name, score in state.scores.items())
        cv2.putText(frame, scores_text, (10, 90), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

        if self.config.display.show_cursor:
            cx = int(state.cursor.x / 100 * width)
            cy = int(state.cursor.y / 100 * height)
            color = (0, 255, 0) if self.controller.is_drawing else (0, 0, 255)
            cv2.circle(frame, (cx, cy), 8, color, -1)

        cv2.putText(frame, "Press 'q' to quit", (10, height - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

    def close(self) -> None:
        """Release camera, model and windows."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw with facial expressions and head movement")
    parser.add_argument("--config", help="Path to a YAML config file (default: config.default.yaml)")
    return parser.parse_args(argv)


async def main(argv=None):
    """Entry point for the application."""
    args = _parse_args(argv)
    try:
        app = FaceDrawingApp(config_path=args.config)
        await app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
    except (FileNotFoundError, ConfigError, RuntimeError) as e:
        logger.error(f"Error: {e}")
        raise SystemExit(1)


def cli():
    asyncio.run(main())


if __name__ == "__main__":
    cli()
