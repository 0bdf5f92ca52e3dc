from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from campaign_studio.api.deps import get_current_user, get_generation_service
from campaign_studio.core.database import get_db
from campaign_studio.models.user import User
from campaign_studio.schemas.asset import (
    AssetResponse,
    AssetUpdate,
    RegenerateRequest,
    RegenerateVersionRequest,
    VersionUpdate,
)
from campaign_studio.schemas.campaign import ChannelType
from campaign_studio.services.asset_service import AssetService
from campaign_studio.services.generation_service import AssetGenerationService

router = APIRouter(prefix="/api/assets", tags=["Assets"])


def _asset_payload(asset, message: Optional[str] = None) -> dict:
    body = {"success": True, "data": {"asset": AssetResponse.model_validate(asset)}}
    if message:
        body["message"] = message
    return body


# =========================================================
# 1. READ
# =========================================================

@router.get("/campaign/{campaign_id}")
def list_campaign_assets(
    campaign_id: int,
    channel_type: Optional[ChannelType] = Query(None),
    audience_id: Optional[int] = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    assets = AssetService(db, user.id).list_for_campaign(campaign_id, channel_type=channel_type, audience_id=audience_id)
    return {
        "success": True,
        "count": len(assets),
        "data": {"assets": [AssetResponse.model_validate(a) for a in assets]},
    }


@router.get("/{asset_id}")
def get_asset(asset_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return _asset_payload(AssetService(db, user.id).get(asset_id))


# =========================================================
# 2. MANUAL EDITS
# =========================================================

@router.put("/{asset_id}")
def update_asset(
    asset_id: int,
    payload: AssetUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    asset = AssetService(db, user.id).update(asset_id, payload)
    return _asset_payload(asset, "Asset updated successfully")


@router.put("/{asset_id}/versions/{version_id}")
def update_asset_version(
    asset_id: int,
    version_id: str,
    payload: VersionUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    asset = AssetService(db, user.id).update_version(asset_id, version_id, payload)
    return _asset_payload(asset, "Version updated successfully")


@router.patch("/{asset_id}/versions/{version_id}/approve")
def approve_asset_version(
    asset_id: int,
    version_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    asset = AssetService(db, user.id).approve_version(asset_id, version_id)
    return _asset_payload(asset, "Version approved successfully")


@router.delete("/{asset_id}")
def delete_asset(asset_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    AssetService(db, user.id).delete(asset_id)
    return {"success": True, "message": "Asset deleted successfully"}


# =========================================================
# 3. REGENERATION
# =========================================================

@router.post("/{asset_id}/regenerate")
def regenerate_asset(
    asset_id: int,
    payload: Optional[RegenerateRequest] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    generation: AssetGenerationService = Depends(get_generation_service),
):
    payload = payload or RegenerateRequest()
    asset = AssetService(db, user.id).get(asset_id)
    asset = generation.regenerate_asset(asset, instructions=payload.instructions, strategy=payload.strategy)
    return _asset_payload(asset, "Asset regenerated successfully")


@router.post("/{asset_id}/versions/{version_id}/regenerate")
def regenerate_asset_version(
    asset_id: int,
    version_id: str,
    payload: Optional[RegenerateVersionRequest] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    generation: AssetGenerationService = Depends(get_generation_service),
):
    payload = payload or RegenerateVersionRequest()
    asset = AssetService(db, user.id).get(asset_id)
    asset = generation.regenerate_version(asset, version_id, instructions=payload.instructions)
    return _asset_payload(asset, "Version regenerated successfully")
