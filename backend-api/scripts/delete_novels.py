"""소설 데이터 삭제 스크립트

사용법:
    python scripts/delete_novels.py 3 7     # id 3, 7 삭제
    python scripts/delete_novels.py --all   # 전체 삭제
"""
import argparse
import asyncio
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import select
from novelhub.core.database import AsyncSessionLocal
from novelhub.models.novel import Novel
from novelhub.services import novel_service


async def delete_novels(novel_ids, delete_all=False):
    async with AsyncSessionLocal() as db:
        if delete_all:
            novel_ids = (await db.execute(select(Novel.id))).scalars().all()
        for novel_id in novel_ids:
            if await novel_service.delete_novel(db, novel_id):
                print(f"✅ 소설 id={novel_id} 삭제 완료")
            else:
                print(f"⚠️  소설 id={novel_id} 없음")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="소설 삭제 (회차/장르 연결/읽기 기록 포함)")
    parser.add_argument("ids", nargs="*", type=int)
    parser.add_argument("--all", action="store_true", help="모든 소설 삭제")
    args = parser.parse_args()
    if not args.ids and not args.all:
        parser.error("삭제할 id 또는 --all 을 지정하세요.")
    asyncio.run(delete_novels(args.ids, delete_all=args.all))
