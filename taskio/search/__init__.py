"""Search package."""

from .criteria import FilterCriteria, normalize
from .resolver import matches, resolve

__all__ = [
    "FilterCriteria",
    "normalize",
    "matches",
    "resolve",
]
