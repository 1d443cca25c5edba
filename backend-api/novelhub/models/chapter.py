"""
회차 모델
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from novelhub.core.database import Base, utcnow


class Chapter(Base):
    __tablename__ = "chapters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    novel_id = Column(Integer, ForeignKey("novels.id"), nullable=False, index=True)
    title = Column(String(300), nullable=False)
    content = Column(Text, nullable=False)
    # 작가가 지정하는 정렬 키. 소설 내 중복을 막지 않는다.
    chapter_number = Column(Integer, nullable=False)
    is_published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    novel = relationship("Novel", back_populates="chapters")

    def __repr__(self):
        return f"<Chapter(novel_id={self.novel_id}, chapter_number={self.chapter_number})>"
