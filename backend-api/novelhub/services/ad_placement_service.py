"""
광고 배치 서비스

광고 스크립트는 그대로 저장만 하고, 노출 여부는 is_active로만 제어한다.
"""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from novelhub.core.database import utcnow
from novelhub.core.exceptions import NotFoundError
from novelhub.models.ad_placement import AdPlacement
from novelhub.schemas.ad_placement import AdPlacementCreate, AdPlacementUpdate

logger = logging.getLogger(__name__)


async def create_ad_placement(db: AsyncSession, payload: AdPlacementCreate) -> AdPlacement:
    ad = AdPlacement(
        name=payload.name,
        placement_type=payload.placement_type,
        ad_script=payload.ad_script,
        is_active=payload.is_active is not False,
    )
    db.add(ad)
    await db.commit()
    await db.refresh(ad)
    logger.info(f"[ads] created id={ad.id} type={ad.placement_type}")
    return ad


async def get_ad_placements(db: AsyncSession) -> List[AdPlacement]:
    result = await db.execute(select(AdPlacement).order_by(AdPlacement.id))
    return list(result.scalars().all())


async def get_active_ad_placements(db: AsyncSession) -> List[AdPlacement]:
    result = await db.execute(
        select(AdPlacement).where(AdPlacement.is_active == True).order_by(AdPlacement.id)  # noqa: E712
    )
    return list(result.scalars().all())


async def update_ad_placement(db: AsyncSession, payload: AdPlacementUpdate) -> AdPlacement:
    ad = await db.get(AdPlacement, payload.id)
    if not ad:
        raise NotFoundError(f"광고 배치를 찾을 수 없습니다 (id={payload.id})")

    for key, value in payload.model_dump(exclude_unset=True, exclude={"id"}).items():
        setattr(ad, key, value)
    ad.updated_at = utcnow()

    await db.commit()
    await db.refresh(ad)
    return ad


async def delete_ad_placement(db: AsyncSession, ad_id: int) -> bool:
    """광고 배치 삭제. 존재하지 않아도 성공으로 처리한다."""
    result = await db.execute(delete(AdPlacement).where(AdPlacement.id == ad_id))
    await db.commit()
    if result.rowcount:
        logger.info(f"[ads] deleted id={ad_id}")
    return True
