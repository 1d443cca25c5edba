"""
소설 모델
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship

from novelhub.core.database import Base, utcnow


NOVEL_STATUSES = ("ongoing", "completed", "hiatus", "draft")


class Novel(Base):
    """소설 모델"""
    __tablename__ = "novels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id"), nullable=False, index=True)
    cover_image_url = Column(String(500), nullable=True)
    status = Column(Enum(*NOVEL_STATUSES, name="novel_status"), nullable=False, default="draft")
    is_featured = Column(Boolean, nullable=False, default=False, index=True)
    # 파생 값: 공개 회차 수 / 누적 조회수
    total_chapters = Column(Integer, nullable=False, default=0)
    total_views = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    # 관계
    author = relationship("Author", back_populates="novels")
    chapters = relationship("Chapter", back_populates="novel", passive_deletes=True)

    def __repr__(self):
        return f"<Novel(id={self.id}, title={self.title})>"
