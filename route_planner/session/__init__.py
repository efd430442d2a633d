"""
Route session module.

Provides the stateful layer a presentation layer drives:
- Selection: Start/goal picker state machine
- Route: One computed path, ready for display
- RouteSession: Graph mutation, route queries and route history
"""

from route_planner.session.engine import RouteSession
from route_planner.session.route import (
    ColorPicker,
    Route,
    cycle_color_picker,
    random_color_picker,
)
from route_planner.session.selection import Selection, SelectionState

__all__ = [
    "ColorPicker",
    "Route",
    "RouteSession",
    "Selection",
    "SelectionState",
    "cycle_color_picker",
    "random_color_picker",
]
