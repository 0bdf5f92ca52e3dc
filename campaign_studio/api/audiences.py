from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from campaign_studio.api.deps import get_current_user
from campaign_studio.core.database import get_db
from campaign_studio.models.user import User
from campaign_studio.schemas.audience import AudienceCreate, AudienceResponse, AudienceUpdate
from campaign_studio.services.audience_service import AudienceService

router = APIRouter(prefix="/api/audiences", tags=["Audiences"])


# 1. List (optionally only active / inactive)
@router.get("")
def list_audiences(
    active: Optional[bool] = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    audiences = AudienceService(db, user.id).list(active=active)
    return {
        "success": True,
        "count": len(audiences),
        "data": {"audiences": [AudienceResponse.model_validate(a) for a in audiences]},
    }


# 2. Detail
@router.get("/{audience_id}")
def get_audience(audience_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    audience = AudienceService(db, user.id).get(audience_id)
    return {"success": True, "data": {"audience": AudienceResponse.model_validate(audience)}}


# 3. Create
@router.post("", status_code=status.HTTP_201_CREATED)
def create_audience(payload: AudienceCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    audience = AudienceService(db, user.id).create(payload)
    return {
        "success": True,
        "message": "Audience created successfully",
        "data": {"audience": AudienceResponse.model_validate(audience)},
    }


# 4. Update
@router.put("/{audience_id}")
def update_audience(
    audience_id: int,
    payload: AudienceUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    audience = AudienceService(db, user.id).update(audience_id, payload)
    return {
        "success": True,
        "message": "Audience updated successfully",
        "data": {"audience": AudienceResponse.model_validate(audience)},
    }


# 5. Delete
@router.delete("/{audience_id}")
def delete_audience(audience_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    AudienceService(db, user.id).delete(audience_id)
    return {"success": True, "message": "Audience deleted successfully"}


# 6. Toggle active flag
@router.patch("/{audience_id}/toggle")
def toggle_audience(audience_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    audience = AudienceService(db, user.id).toggle(audience_id)
    state = "activated" if audience.is_active else "deactivated"
    return {
        "success": True,
        "message": f"Audience {state} successfully",
        "data": {"audience": AudienceResponse.model_validate(audience)},
    }
