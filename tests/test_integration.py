"""
Integration test to verify the gesture engine drives a controller end to end.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from faceable import (
    ColorCycle,
    ControllerProto,
    CursorMove,
    DrawToggle,
    GestureProcessor,
    LandmarkSample,
    MockController,
    ToolCycle,
    dispatch,
    load_config,
)


class TestMockController(unittest.IsolatedAsyncioTestCase):
    """Test the drawing state kept by the mock controller."""

    def setUp(self):
        self.controller = MockController()

    def test_implements_protocol(self):
        self.assertIsInstance(self.controller, ControllerProto)

    async def test_tool_cycle_wraps(self):
        """Test pen -> eraser -> thick-pen -> pen."""
        seen = []
        for _ in range(3):
            await self.controller.cycle_tool()
            seen.append(self.controller.current_tool)
        self.assertEqual(seen, ["eraser", "thick-pen", "pen"])
        self.assertEqual(self.controller.tool_cycle_count, 3)

    async def test_color_cycle_wraps(self):
        for _ in range(len(self.controller.colors)):
            await self.controller.cycle_color()
        self.assertEqual(self.controller.current_color, "#6366f1")

    async def test_toggle_drawing(self):
        await self.controller.toggle_drawing()
        self.assertTrue(self.controller.is_drawing)
        await self.controller.toggle_drawing()
        self.assertFalse(self.controller.is_drawing)
        self.assertIn("Drawing: OFF", self.controller.status())

    def test_requires_tools_and_colors(self):
        with self.assertRaises(ValueError):
            MockController(tools=())


class TestEndToEnd(unittest.IsolatedAsyncioTestCase):
    """Feed synthetic frames through the processor into the controller."""

    def setUp(self):
        self.processor = GestureProcessor(load_config())
        self.controller = MockController()

    async def test_dispatch_in_order(self):
        """Test that dispatch calls the matching controller methods."""
        events = [ToolCycle(), ColorCycle(), DrawToggle(), CursorMove(x=12.5, y=80.0)]
        delivered = await dispatch(self.controller, events)

        self.assertEqual(delivered, 4)
        self.assertEqual(self.controller.current_tool, "eraser")
        self.assertEqual(self.controller.current_color, "#8b5cf6")
        self.assertTrue(self.controller.is_drawing)
        self.assertEqual((self.controller.cursor.x, self.controller.cursor.y), (12.5, 80.0))

    async def test_drawing_session(self):
        """Test a short session: open mouth, hold still, raise eyebrows, smile."""
        center = LandmarkSample(0.5, 0.5)
        script = [
            (0.0, {"jawOpen": 0.6}),
            (100.0, {"jawOpen": 0.6}),  # still open, debounced
            (200.0, {}),
            (300.0, {"browInnerUp": 0.9}),  # head still since 0ms
            (400.0, {"mouthSmileLeft": 0.85}),
        ]
        for t_now, blendshapes in script:
            events, _ = self.processor.process_frame(blendshapes, center, t_now)
            await dispatch(self.controller, events)

        self.assertTrue(self.controller.is_drawing)
        self.assertEqual(self.controller.draw_toggle_count, 1)
        self.assertEqual(self.controller.current_color, "#8b5cf6")
        self.assertEqual(self.controller.current_tool, "eraser")
        self.assertEqual(self.controller.cursor_move_count, len(script))
        self.assertAlmostEqual(self.controller.cursor.x, 50.0)


if __name__ == '__main__':
    unittest.main()
