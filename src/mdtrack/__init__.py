"""mdtrack - habit and progress trackers computed from markdown notes."""

__version__ = "1.0.0"
