import math
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from campaign_studio.api.deps import get_current_user, get_generation_service
from campaign_studio.core.database import get_db
from campaign_studio.models.user import User
from campaign_studio.schemas.asset import AssetResponse
from campaign_studio.schemas.campaign import CampaignCreate, CampaignResponse, CampaignStats, CampaignStatus, CampaignUpdate
from campaign_studio.services.campaign_service import CampaignService
from campaign_studio.services.generation_service import AssetGenerationService

router = APIRouter(prefix="/api/campaigns", tags=["Campaigns"])


# =========================================================
# 1. LIST / DETAIL
# =========================================================

@router.get("")
def list_campaigns(
    status: Optional[CampaignStatus] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    campaigns, total = CampaignService(db, user.id).list(status=status, page=page, limit=limit)
    return {
        "success": True,
        "count": len(campaigns),
        "total": total,
        "page": page,
        "pages": math.ceil(total / limit),
        "data": {"campaigns": [CampaignResponse.model_validate(c) for c in campaigns]},
    }


@router.get("/{campaign_id}")
def get_campaign(campaign_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    service = CampaignService(db, user.id)
    campaign = service.get(campaign_id)
    return {
        "success": True,
        "data": {
            "campaign": CampaignResponse.model_validate(campaign),
            "assets": [AssetResponse.model_validate(a) for a in campaign.assets],
            "stats": CampaignStats(**service.get_stats(campaign)),
        },
    }


# =========================================================
# 2. CREATE / UPDATE / DELETE
# =========================================================

@router.post("", status_code=status.HTTP_201_CREATED)
def create_campaign(payload: CampaignCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    campaign = CampaignService(db, user.id).create(payload)
    return {
        "success": True,
        "message": "Campaign created successfully",
        "data": {"campaign": CampaignResponse.model_validate(campaign)},
    }


@router.put("/{campaign_id}")
def update_campaign(
    campaign_id: int,
    payload: CampaignUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    campaign = CampaignService(db, user.id).update(campaign_id, payload)
    return {
        "success": True,
        "message": "Campaign updated successfully",
        "data": {"campaign": CampaignResponse.model_validate(campaign)},
    }


@router.delete("/{campaign_id}")
def delete_campaign(campaign_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    CampaignService(db, user.id).delete(campaign_id)
    return {"success": True, "message": "Campaign deleted successfully"}


@router.post("/{campaign_id}/duplicate", status_code=status.HTTP_201_CREATED)
def duplicate_campaign(campaign_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    campaign = CampaignService(db, user.id).duplicate(campaign_id)
    return {
        "success": True,
        "message": "Campaign duplicated successfully",
        "data": {"campaign": CampaignResponse.model_validate(campaign)},
    }


# =========================================================
# 3. GENERATION
# =========================================================

@router.post("/{campaign_id}/generate")
def generate_campaign_assets(
    campaign_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    generation: AssetGenerationService = Depends(get_generation_service),
):
    campaign = CampaignService(db, user.id).get(campaign_id)
    assets = generation.generate_campaign_assets(campaign)
    return {
        "success": True,
        "message": f"Generated {len(assets)} assets successfully",
        "data": {
            "campaign": CampaignResponse.model_validate(campaign),
            "assets": [AssetResponse.model_validate(a) for a in assets],
            "generated_count": len(assets),
        },
    }


# =========================================================
# 4. EXPORT
# =========================================================

@router.get("/{campaign_id}/export")
def export_campaign(campaign_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    export = CampaignService(db, user.id).export_campaign(campaign_id)
    return JSONResponse(
        content={"success": True, "data": jsonable_encoder(export)},
        headers={"Content-Disposition": f"attachment; filename=campaign_{campaign_id}_export.json"},
    )
