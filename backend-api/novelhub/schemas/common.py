"""
공용 스키마
"""

from pydantic import BaseModel
from typing import Literal


NovelStatus = Literal['ongoing', 'completed', 'hiatus', 'draft']
AdPlacementType = Literal['banner', 'interstitial', 'native']


class SuccessResponse(BaseModel):
    """삭제 등 결과만 알리는 응답"""
    success: bool


def reject_null(value, info):
    """부분 수정에서 NOT NULL 컬럼에 null을 명시하면 거부한다 (생략은 허용)"""
    if value is None:
        raise ValueError(f"{info.field_name}에는 null을 지정할 수 없습니다.")
    return value
