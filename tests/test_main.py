"""
Test cases for application startup ordering.
"""
import unittest
import sys
from pathlib import Path
from unittest import mock

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from faceable.config import Cfg
from faceable import main as app_main


class TestFaceDrawingAppInit(unittest.TestCase):
    """Test that startup failures leave no resources open."""

    def setUp(self):
        self.cap = mock.MagicMock()
        patches = [
            mock.patch.object(app_main, "load_config", return_value=Cfg()),
            mock.patch.object(app_main.cv2, "VideoCapture", return_value=self.cap),
            mock.patch.object(app_main, "FaceTracker"),
        ]
        mocks = [p.start() for p in patches]
        for p in patches:
            self.addCleanup(p.stop)
        self.face_tracker = mocks[2]

    def test_camera_failure_skips_tracker(self):
        """Test that the landmarker is never created when the camera fails."""
        self.cap.isOpened.return_value = False
        with self.assertRaises(RuntimeError):
            app_main.FaceDrawingApp()
        self.face_tracker.assert_not_called()

    def test_tracker_failure_releases_camera(self):
        """Test that a missing model file releases the opened camera."""
        self.cap.isOpened.return_value = True
        self.face_tracker.side_effect = FileNotFoundError("models/face_landmarker.task")
        with self.assertRaises(FileNotFoundError):
            app_main.FaceDrawingApp()
        self.cap.release.assert_called_once()

    def test_successful_startup(self):
        self.cap.isOpened.return_value = True
        app = app_main.FaceDrawingApp()
        self.face_tracker.assert_called_once()
        self.assertIs(app.tracker, self.face_tracker.return_value)
        self.cap.release.assert_not_called()


if __name__ == '__main__':
    unittest.main()
