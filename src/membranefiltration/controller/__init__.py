"""
The CONTROLLER layer turns user input into model mutations.
"""
from membranefiltration.controller.drag import DragController, DragState

__all__ = ["DragController", "DragState"]
