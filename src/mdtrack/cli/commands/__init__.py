"""Command implementations for mdtrack CLI."""

from .check import handle_check, handle_examples
from .render import add_note_arguments, handle_render
from .watch import add_watch_arguments, handle_watch

__all__ = [
    "handle_render",
    "handle_watch",
    "handle_check",
    "handle_examples",
    "add_note_arguments",
    "add_watch_arguments",
]
