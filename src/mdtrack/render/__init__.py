"""Rendering of tracker results."""

from .text import format_number, render_block, render_error, render_tracker

__all__ = [
    "format_number",
    "render_block",
    "render_error",
    "render_tracker",
]
