"""
Delivers gesture events to a controller.
"""
import logging
from typing import Iterable

from .types import ColorCycle, ControllerProto, CursorMove, DrawToggle, GestureEvent, ToolCycle

logger = logging.getLogger(__name__)


async def dispatch(controller: ControllerProto, events: Iterable[GestureEvent]) -> int:
    """
    Send events to the controller in order.

    Args:
        controller: Event sink implementing ControllerProto
        events: Events from one or more frames

    Returns:
        Number of events delivered
    """
    delivered = 0
    for event in events:
        if isinstance(event, ToolCycle):
            await controller.cycle_tool()
        elif isinstance(event, ColorCycle):
            await controller.cycle_color()
        elif isinstance(event, DrawToggle):
            await controller.toggle_drawing()
        elif isinstance(event, CursorMove):
            await controller.move_cursor(event.x, event.y)
        else:
            logger.warning(f"Unknown event type: {type(event).__name__}")
            continue
        delivered += 1
    return delivered
