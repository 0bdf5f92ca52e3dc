from typing import Iterable, Optional
from sqlalchemy.orm import Session

from campaign_studio.core.constants import MAX_AUDIENCES_PER_USER
from campaign_studio.core.errors import NotFound, ValidationFailure
from campaign_studio.models.audience import Audience
from campaign_studio.schemas.audience import AudienceCreate, AudienceUpdate

NON_NULLABLE_FIELDS = (
    "name", "propensity_level", "is_active", "demographics",
    "interests", "pain_points", "key_motivators",
)


class AudienceService:
    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _owned(self):
        return self.db.query(Audience).filter(Audience.user_id == self.user_id)

    # ---------------------------------------------------------
    # 1. READ
    # ---------------------------------------------------------
    def list(self, active: Optional[bool] = None):
        query = self._owned()
        if active is not None:
            query = query.filter(Audience.is_active == active)
        return query.order_by(Audience.created_at.desc(), Audience.id.desc()).all()

    def find(self, audience_id) -> Optional[Audience]:
        if audience_id is None:
            return None
        return self._owned().filter(Audience.id == audience_id).first()

    def get(self, audience_id: int) -> Audience:
        audience = self.find(audience_id)
        if not audience:
            raise NotFound("Audience not found")
        return audience

    def ensure_owned(self, audience_ids: Iterable[int]):
        """Raises ValidationFailure unless every id is one of the user's audiences."""
        ids = set(audience_ids)
        if not ids:
            return
        found = self._owned().filter(Audience.id.in_(ids)).count()
        if found != len(ids):
            raise ValidationFailure("One or more audience IDs are invalid")

    # ---------------------------------------------------------
    # 2. WRITE
    # ---------------------------------------------------------
    def _check_name_free(self, name: str, exclude_id: int = None):
        query = self._owned().filter(Audience.name == name)
        if exclude_id is not None:
            query = query.filter(Audience.id != exclude_id)
        if query.first():
            raise ValidationFailure("An audience with this name already exists")

    def create(self, data: AudienceCreate) -> Audience:
        if self._owned().count() >= MAX_AUDIENCES_PER_USER:
            raise ValidationFailure(f"Maximum {MAX_AUDIENCES_PER_USER} audiences allowed per user")

        name = data.name.strip()
        self._check_name_free(name)

        fields = data.model_dump()
        fields["name"] = name
        audience = Audience(user_id=self.user_id, **fields)
        self.db.add(audience)
        self.db.commit()
        self.db.refresh(audience)
        return audience

    def update(self, audience_id: int, data: AudienceUpdate) -> Audience:
        audience = self.get(audience_id)
        changes = data.model_dump(exclude_unset=True)

        if changes.get("name"):
            changes["name"] = changes["name"].strip()
            if changes["name"] != audience.name:
                self._check_name_free(changes["name"], exclude_id=audience.id)

        for field, value in changes.items():
            if value is None and field in NON_NULLABLE_FIELDS:
                continue
            setattr(audience, field, value)

        self.db.commit()
        self.db.refresh(audience)
        return audience

    def delete(self, audience_id: int):
        # Campaign segments still pointing here are skipped at generation time
        audience = self.get(audience_id)
        self.db.delete(audience)
        self.db.commit()

    def toggle(self, audience_id: int) -> Audience:
        audience = self.get(audience_id)
        audience.is_active = not audience.is_active
        self.db.commit()
        self.db.refresh(audience)
        return audience
