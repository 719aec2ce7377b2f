"""
Controllers for the diagram editor.

This package contains rendering-free controller classes that orchestrate
edits between the models and the views using an observer pattern.
"""

from .diagram_controller import DiagramController
from .history_manager import HistoryManager
from .input_controller import InputController
from .selection_manager import SelectionManager
from .tool_controller import AwaitingSecondPort, Idle, ToolController, ToolMode

__all__ = [
    "DiagramController",
    "HistoryManager",
    "InputController",
    "SelectionManager",
    "ToolController",
    "ToolMode",
    "Idle",
    "AwaitingSecondPort",
]
