"""
이메일로 찾은 사용자를 관리자로 설정하는 스크립트

사용법: python set_admin.py admin@example.com
"""
import sys
import os
sys.path.insert(0, os.path.dirname(__file__))

import asyncio
from novelhub.core.database import AsyncSessionLocal
from novelhub.core.security import create_access_token
from novelhub.schemas.user import UserUpdate
from novelhub.services import user_service


async def set_admin(email: str):
    async with AsyncSessionLocal() as db:
        user = await user_service.get_user_by_email(db, email)
        if not user:
            print(f"❌ {email} 계정을 찾을 수 없습니다.")
            print("   먼저 createUser로 해당 이메일의 사용자를 등록하세요.")
            return

        user = await user_service.update_user(db, UserUpdate(id=user.id, is_admin=True))
        print(f"✅ {user.email} ({user.username})을(를) 관리자로 설정했습니다!")

        # ADMIN_GUARD_ENABLED 환경에서 바로 쓸 수 있는 토큰
        token = create_access_token({"sub": str(user.id)})
        print(f"🔑 Authorization: Bearer {token}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("사용법: python set_admin.py <email>")
        sys.exit(1)
    asyncio.run(set_admin(sys.argv[1]))
