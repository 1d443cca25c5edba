"""
읽기 기록 모델
"""

from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from novelhub.core.database import Base, utcnow


class ReadingHistory(Base):
    __tablename__ = "reading_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    novel_id = Column(Integer, ForeignKey("novels.id"), nullable=False, index=True)
    chapter_id = Column(Integer, ForeignKey("chapters.id"), nullable=False, index=True)
    progress_percentage = Column(Numeric(5, 2, asdecimal=False), nullable=False, default=0)
    last_read_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    __table_args__ = (
        UniqueConstraint('user_id', 'novel_id', name='uq_reading_history_user_novel'),
    )

    user = relationship("User", back_populates="reading_history")

    def __repr__(self):
        return f"<ReadingHistory(user_id={self.user_id}, novel_id={self.novel_id}, chapter_id={self.chapter_id})>"
