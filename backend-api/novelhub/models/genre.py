"""
장르 모델 및 소설-장르 연결 테이블
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey

from novelhub.core.database import Base, utcnow


class Genre(Base):
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    # 장르는 updated_at이 없다
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Genre(id={self.id}, name={self.name})>"


class NovelGenre(Base):
    __tablename__ = "novel_genres"

    # (novel_id, genre_id) 쌍이 본체. 중복 쌍 입력을 막지 않으므로 행 id를 따로 둔다.
    id = Column(Integer, primary_key=True, autoincrement=True)
    novel_id = Column(Integer, ForeignKey("novels.id"), nullable=False, index=True)
    genre_id = Column(Integer, ForeignKey("genres.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<NovelGenre(novel_id={self.novel_id}, genre_id={self.genre_id})>"
