"""
모델 패키지
"""

from .user import User
from .author import Author
from .genre import Genre, NovelGenre
from .novel import Novel, NOVEL_STATUSES
from .chapter import Chapter
from .reading_history import ReadingHistory
from .ad_placement import AdPlacement, AD_PLACEMENT_TYPES

__all__ = [
    "User",
    "Author",
    "Genre",
    "NovelGenre",
    "Novel",
    "NOVEL_STATUSES",
    "Chapter",
    "ReadingHistory",
    "AdPlacement",
    "AD_PLACEMENT_TYPES",
]
