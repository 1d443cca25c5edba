"""
작가 모델
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship

from novelhub.core.database import Base, utcnow


class Author(Base):
    """작가 모델"""
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    bio = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    novels = relationship("Novel", back_populates="author")

    def __repr__(self):
        return f"<Author(id={self.id}, name={self.name})>"
