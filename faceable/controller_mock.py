"""
Mock controller implementation for testing gesture events.

Keeps the drawing state a real canvas would keep (tool, color, drawing
on/off, cursor) and logs each action instead of rendering anything.
"""
import logging
from typing import Optional, Sequence

from .types import Position

logger = logging.getLogger(__name__)

DEFAULT_TOOLS = ("pen", "eraser", "thick-pen")

DEFAULT_COLORS = (
    "#6366f1",  # Indigo
    "#8b5cf6",  # Purple
    "#ec4899",  # Pink
    "#f43f5e",  # Rose
    "#f97316",  # Orange
    "#eab308",  # Yellow
    "#22c59e",  # Green
    "#14b8a6",  # Teal
    "#3b82f6",  # Blue
    "#1e293b",  # Dark gray
)


class MockController:
    """Mock controller that tracks drawing state instead of drawing."""

    def __init__(self, tools: Sequence[str] = DEFAULT_TOOLS, colors: Sequence[str] = DEFAULT_COLORS):
        """Initialize the mock controller."""
        if not tools or not colors:
            raise ValueError("MockController needs at least one tool and one color")
        self.tools = tuple(tools)
        self.colors = tuple(colors)
        self.current_tool = self.tools[0]
        self.current_color = self.colors[0]
        self.is_drawing = False
        self.cursor: Optional[Position] = None
        self.reset_counters()

    async def cycle_tool(self) -> None:
        """Switch to the next tool, wrapping around."""
        self.tool_cycle_count += 1
        index = self.tools.index(self.current_tool)
        self.current_tool = self.tools[(index + 1) % len(self.tools)]
        logger.info(f"[MockController] Tool: {self.current_tool} (call #{self.tool_cycle_count})")

    async def cycle_color(self) -> None:
        """Switch to the next color, wrapping around."""
        self.color_cycle_count += 1
        index = self.colors.index(self.current_color)
        self.current_color = self.colors[(index + 1) % len(self.colors)]
        logger.info(f"[MockController] Color: {self.current_color} (call #{self.color_cycle_count})")

    async def toggle_drawing(self) -> None:
        """Flip drawing on/off."""
        self.draw_toggle_count += 1
        self.is_drawing = not self.is_drawing
        logger.info(f"[MockController] Drawing: {'on' if self.is_drawing else 'off'} "
                    f"(call #{self.draw_toggle_count})")

    async def move_cursor(self, x: float, y: float) -> None:
        """Record the cursor position."""
        self.cursor_move_count += 1
        self.cursor = Position(x, y)
        logger.debug(f"[MockController] Cursor: ({x:.1f}, {y:.1f})")

    def status(self) -> str:
        """One-line summary of the drawing state."""
        return (f"Tool: {self.current_tool} | Color: {self.current_color} | "
                f"Drawing: {'ON' if self.is_drawing else 'OFF'}")

    def reset_counters(self) -> None:
        """Reset action counters for testing."""
        self.tool_cycle_count = 0
        self.color_cycle_count = 0
        self.draw_toggle_count = 0
        self.cursor_move_count = 0
