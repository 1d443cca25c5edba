"""
광고 배치 API 라우터
"""

from fastapi import APIRouter, Depends, Body
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from novelhub.core.database import get_db
from novelhub.core.security import require_admin
from novelhub.schemas.common import SuccessResponse
from novelhub.schemas.ad_placement import AdPlacementCreate, AdPlacementUpdate, AdPlacementResponse
from novelhub.services import ad_placement_service

router = APIRouter()


@router.post("/createAdPlacement", response_model=AdPlacementResponse, dependencies=[Depends(require_admin)])
async def create_ad_placement(payload: AdPlacementCreate, db: AsyncSession = Depends(get_db)):
    return await ad_placement_service.create_ad_placement(db, payload)


@router.get("/getAdPlacements", response_model=List[AdPlacementResponse], dependencies=[Depends(require_admin)])
async def get_ad_placements(db: AsyncSession = Depends(get_db)):
    return await ad_placement_service.get_ad_placements(db)


@router.get("/getActiveAdPlacements", response_model=List[AdPlacementResponse])
async def get_active_ad_placements(db: AsyncSession = Depends(get_db)):
    """프론트 노출용 (활성 광고만)"""
    return await ad_placement_service.get_active_ad_placements(db)


@router.post("/updateAdPlacement", response_model=AdPlacementResponse, dependencies=[Depends(require_admin)])
async def update_ad_placement(payload: AdPlacementUpdate, db: AsyncSession = Depends(get_db)):
    return await ad_placement_service.update_ad_placement(db, payload)


@router.post("/deleteAdPlacement", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
async def delete_ad_placement(id: int = Body(...), db: AsyncSession = Depends(get_db)):
    """광고 배치 삭제 (대상이 없어도 success=true)"""
    return {"success": await ad_placement_service.delete_ad_placement(db, id)}
