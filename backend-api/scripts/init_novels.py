"""
데모용 작가/장르/소설/회차 데이터 삽입 스크립트
"""

import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import select, func
from novelhub.core.database import AsyncSessionLocal, init_db
from novelhub.models.novel import Novel
from novelhub.schemas.author import AuthorCreate
from novelhub.schemas.genre import GenreCreate
from novelhub.schemas.novel import NovelCreate
from novelhub.schemas.chapter import ChapterCreate
from novelhub.services import author_service, genre_service, novel_service, chapter_service


SAMPLE_GENRES = [
    {"name": "판타지", "description": "검과 마법, 이세계"},
    {"name": "로맨스", "description": "연애 중심 서사"},
    {"name": "현대", "description": "현대 한국 배경"},
    {"name": "무협", "description": "강호와 무공"},
]

SAMPLE_NOVELS = [
    {
        "title": "로또1등이라 엄청 즐겁게 회사생활하기",
        "author": {"name": "작가미상", "bio": "직장인 출신 작가"},
        "description": "평범한 3년차 직장인이 로또 1등에 당첨된 뒤 회사 생활을 대하는 태도가 180도 바뀌는 이야기.",
        "status": "ongoing",
        "is_featured": True,
        "genres": ["현대"],
        "chapters": [
            ("출근길", "회사에 출근하는 아침이었다. 지하철은 여전히 붐볐고, 사람들은 피곤한 표정으로 휴대폰만 들여다보고 있었다.", True),
            ("당첨번호", "회사 화장실에 들어가 조심스럽게 당첨번호를 확인했다. 1등. 20억.", True),
            ("회의실", "회의실로 향하는 발걸음이 평소와 달리 가벼웠다.", False),
        ],
    },
    {
        "title": "전셋집에서 시작하는 검술 아카데미",
        "author": {"name": "한밤중"},
        "description": "좁은 전셋집에서 눈을 뜬 주인공이 재능 없는 몸으로 검술 아카데미 입학을 준비한다.",
        "status": "ongoing",
        "is_featured": False,
        "genres": ["판타지", "현대"],
        "chapters": [
            ("눈을 뜨다", "좁은 전셋집 방에서 눈을 떴다. 몸이 이상했다.", True),
        ],
    },
    {
        "title": "화산의 막내 제자",
        "author": {"name": "청명"},
        "description": "몰락한 문파의 막내 제자가 다시 문파를 일으켜 세운다.",
        "status": "completed",
        "is_featured": True,
        "genres": ["무협"],
        "chapters": [
            ("입문", "산문 앞의 계단은 끝이 보이지 않았다.", True),
            ("첫 수련", "목검을 쥔 손바닥에 물집이 잡혔다.", True),
        ],
    },
]


async def init_novels():
    """샘플 데이터 삽입 (소설이 이미 있으면 건너뛴다)"""
    await init_db()
    async with AsyncSessionLocal() as db:
        existing = (await db.execute(select(func.count(Novel.id)))).scalar() or 0
        if existing:
            print(f"⚠️  이미 {existing}개의 소설이 존재합니다.")
            print("기존 데이터를 삭제하고 새로 삽입하려면 scripts/delete_novels.py --all 을 먼저 실행하세요.")
            return

        genre_ids = {}
        for genre in await genre_service.get_genres(db):
            genre_ids[genre.name] = genre.id
        for genre_data in SAMPLE_GENRES:
            if genre_data["name"] not in genre_ids:
                genre = await genre_service.create_genre(db, GenreCreate(**genre_data))
                genre_ids[genre.name] = genre.id

        for novel_data in SAMPLE_NOVELS:
            author = await author_service.create_author(db, AuthorCreate(**novel_data["author"]))
            novel = await novel_service.create_novel(db, NovelCreate(
                title=novel_data["title"],
                description=novel_data["description"],
                author_id=author.id,
                status=novel_data["status"],
                is_featured=novel_data["is_featured"],
                genre_ids=[genre_ids[name] for name in novel_data["genres"]],
            ))
            for number, (title, content, published) in enumerate(novel_data["chapters"], start=1):
                await chapter_service.create_chapter(db, ChapterCreate(
                    novel_id=novel.id,
                    title=title,
                    content=content,
                    chapter_number=number,
                    is_published=published,
                ))
            print(f"✅ '{novel.title}' 추가 완료 (회차 {len(novel_data['chapters'])}개)")

        print(f"\n🎉 총 {len(SAMPLE_NOVELS)}개의 소설이 성공적으로 삽입되었습니다!")


if __name__ == "__main__":
    print("📚 NovelHub 데모 데이터 삽입 시작...\n")
    asyncio.run(init_novels())
