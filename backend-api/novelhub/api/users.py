"""
사용자 관련 API 라우터
"""

from fastapi import APIRouter, Depends, Body
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from novelhub.core.database import get_db
from novelhub.core.security import require_admin
from novelhub.schemas.common import SuccessResponse
from novelhub.schemas.user import UserCreate, UserUpdate, UserResponse
from novelhub.services import user_service

router = APIRouter()


@router.post("/createUser", response_model=UserResponse)
async def create_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """사용자 생성 (회원가입/관리자 등록 공용)"""
    return await user_service.create_user(db, user_data)


@router.get("/getUsers", response_model=List[UserResponse], dependencies=[Depends(require_admin)])
async def get_users(db: AsyncSession = Depends(get_db)):
    return await user_service.get_users(db)


@router.post("/updateUser", response_model=UserResponse, dependencies=[Depends(require_admin)])
async def update_user(
    user_data: UserUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await user_service.update_user(db, user_data)


@router.post("/deleteUser", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
async def delete_user(
    id: int = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """사용자 삭제 (읽기 기록 포함)"""
    return {"success": await user_service.delete_user(db, id)}
