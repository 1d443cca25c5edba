"""
광고 배치 모델
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Enum

from novelhub.core.database import Base, utcnow


AD_PLACEMENT_TYPES = ("banner", "interstitial", "native")


class AdPlacement(Base):
    """광고 배치 모델 (스크립트 문자열만 저장/활성화)"""
    __tablename__ = "ad_placements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    placement_type = Column(Enum(*AD_PLACEMENT_TYPES, name="ad_placement_type"), nullable=False)
    ad_script = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<AdPlacement(id={self.id}, name={self.name}, type={self.placement_type})>"
