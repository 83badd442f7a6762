"""Statistics over played rounds."""

from core.statistics.session import SessionStats

__all__ = [
    "SessionStats",
]
