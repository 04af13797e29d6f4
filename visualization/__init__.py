"""
Visualization Layer

Passive canvas collaborators notified on insert/remove. Rendering itself is
left to external tools.
"""

from .canvas import Canvas, HeadlessCanvas, RecordingCanvas

__all__ = [
    'Canvas',
    'HeadlessCanvas',
    'RecordingCanvas',
]
