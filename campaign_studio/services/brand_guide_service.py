from typing import Optional
from sqlalchemy.orm import Session

from campaign_studio.core.errors import NotFound, ValidationFailure
from campaign_studio.models.brand_guide import BrandGuide
from campaign_studio.schemas.brand_guide import BrandGuideCreate, BrandGuideUpdate

NON_NULLABLE_FIELDS = (
    "company_name", "voice_attributes", "key_messages", "avoid_phrases", "primary_colors",
)


class BrandGuideService:
    """One brand guide per user; every lookup is scoped to `user_id`."""

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def get_current(self) -> Optional[BrandGuide]:
        return self.db.query(BrandGuide).filter(BrandGuide.user_id == self.user_id).first()

    def get(self, guide_id: int) -> BrandGuide:
        guide = self.db.query(BrandGuide).filter(
            BrandGuide.id == guide_id,
            BrandGuide.user_id == self.user_id,
        ).first()
        if not guide:
            raise NotFound("Brand guide not found")
        return guide

    def create(self, data: BrandGuideCreate) -> BrandGuide:
        if self.get_current():
            raise ValidationFailure("Brand guide already exists. Use PUT to update.")

        fields = data.model_dump(exclude_none=True)
        guide = BrandGuide(user_id=self.user_id, **fields)
        self.db.add(guide)
        self.db.commit()
        self.db.refresh(guide)
        return guide

    def update(self, guide_id: int, data: BrandGuideUpdate) -> BrandGuide:
        guide = self.get(guide_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in NON_NULLABLE_FIELDS:
                continue
            setattr(guide, field, value)
        self.db.commit()
        self.db.refresh(guide)
        return guide

    def delete(self, guide_id: int):
        guide = self.get(guide_id)
        self.db.delete(guide)
        self.db.commit()
