from functools import lru_cache
from typing import Optional

from fastapi import Cookie, Depends, Header
from sqlalchemy.orm import Session

from campaign_studio.core.config import settings
from campaign_studio.core.database import get_db
from campaign_studio.core.errors import Unauthorized
from campaign_studio.core.security import decode_access_token
from campaign_studio.models.user import User
from campaign_studio.services.content_generator import ContentGenerator
from campaign_studio.services.generation_service import AssetGenerationService
from campaign_studio.services.llm_service import LLMService


# ---------------------------------------------------------
# CURRENT USER
# ---------------------------------------------------------
def get_current_user(
    access_token: Optional[str] = Cookie(None),
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> User:
    """
    Reads the bearer token from the Authorization header first, then from
    the `access_token` cookie set by /auth/login.
    """
    token = None
    if authorization and authorization.startswith("Bearer "):
        token = authorization[len("Bearer "):].strip()
    elif access_token:
        token = access_token.replace("Bearer ", "").strip()

    if not token:
        raise Unauthorized("Not authorized - no token provided")

    payload = decode_access_token(token)
    if not payload or "id" not in payload:
        raise Unauthorized("Not authorized - invalid token")

    user = db.query(User).filter(User.id == payload["id"]).first()
    if not user:
        raise Unauthorized("User not found")
    return user


# ---------------------------------------------------------
# TEXT GENERATION
# ---------------------------------------------------------
@lru_cache
def get_llm_service() -> LLMService:
    # LLMService builds its client on the first completion
    return LLMService()


def get_generation_service(
    db: Session = Depends(get_db),
    llm=Depends(get_llm_service),
) -> AssetGenerationService:
    return AssetGenerationService(db, ContentGenerator(llm, max_tokens=settings.LLM_MAX_TOKENS))
