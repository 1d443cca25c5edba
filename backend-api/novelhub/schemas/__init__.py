"""
Pydantic 스키마 패키지
"""

from .common import SuccessResponse, NovelStatus, AdPlacementType
from .user import UserCreate, UserUpdate, UserResponse
from .author import AuthorCreate, AuthorUpdate, AuthorResponse
from .genre import GenreCreate, GenreUpdate, GenreResponse
from .novel import NovelCreate, NovelUpdate, NovelResponse, SearchNovelsInput
from .chapter import ChapterCreate, ChapterUpdate, ChapterResponse
from .reading_history import UpdateReadingProgressInput, ReadingHistoryResponse
from .ad_placement import AdPlacementCreate, AdPlacementUpdate, AdPlacementResponse
