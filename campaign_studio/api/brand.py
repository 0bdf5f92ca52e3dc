from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from campaign_studio.api.deps import get_current_user
from campaign_studio.core.database import get_db
from campaign_studio.models.user import User
from campaign_studio.schemas.brand_guide import BrandGuideCreate, BrandGuideResponse, BrandGuideUpdate
from campaign_studio.services.brand_guide_service import BrandGuideService

router = APIRouter(prefix="/api/brand", tags=["Brand Guide"])


@router.get("")
def get_brand_guide(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    guide = BrandGuideService(db, user.id).get_current()
    return {
        "success": True,
        "data": {
            "brand_guide": BrandGuideResponse.model_validate(guide) if guide else None,
            "exists": guide is not None,
        },
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def create_brand_guide(payload: BrandGuideCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    guide = BrandGuideService(db, user.id).create(payload)
    return {
        "success": True,
        "message": "Brand guide created successfully",
        "data": {"brand_guide": BrandGuideResponse.model_validate(guide)},
    }


@router.put("/{guide_id}")
def update_brand_guide(
    guide_id: int,
    payload: BrandGuideUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    guide = BrandGuideService(db, user.id).update(guide_id, payload)
    return {
        "success": True,
        "message": "Brand guide updated successfully",
        "data": {"brand_guide": BrandGuideResponse.model_validate(guide)},
    }


@router.delete("/{guide_id}")
def delete_brand_guide(guide_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    BrandGuideService(db, user.id).delete(guide_id)
    return {"success": True, "message": "Brand guide deleted successfully"}
