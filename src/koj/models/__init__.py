"""The models used to represent Gurbani lines in the search"""

__all__ = [
    "LineRecord",
    "SectionMeta",
]

from .line import LineRecord
from .line import SectionMeta
