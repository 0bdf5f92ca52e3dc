from datetime import timedelta
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from campaign_studio.api.deps import get_current_user
from campaign_studio.core.database import get_db
from campaign_studio.core.errors import Unauthorized, ValidationFailure
from campaign_studio.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    get_password_hash,
    verify_password,
)
from campaign_studio.models.user import User
from campaign_studio.schemas.auth import PasswordChange, UserCreate, UserLogin, UserResponse, UserUpdate

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _issue_token(user: User) -> str:
    return create_access_token(
        data={"sub": user.email, "id": user.id},
        expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def _set_cookie(response: Response, token: str):
    response.set_cookie(
        key="access_token",
        value=f"Bearer {token}",
        httponly=True,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="lax",
        secure=False,  # True behind HTTPS
    )


# ---------------------------------------------------------
# REGISTER
# ---------------------------------------------------------
@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    email = user_in.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ValidationFailure("User with this email already exists")

    user = User(
        email=email,
        password_hash=get_password_hash(user_in.password),
        name=user_in.name.strip(),
        company=user_in.company,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    token = _issue_token(user)
    return {
        "success": True,
        "message": "User registered successfully",
        "data": {"user": UserResponse.model_validate(user), "token": token},
    }


# ---------------------------------------------------------
# LOGIN
# ---------------------------------------------------------
@router.post("/login")
def login(login_data: UserLogin, response: Response, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == login_data.email.lower()).first()
    if not user or not verify_password(login_data.password, user.password_hash):
        raise Unauthorized("Invalid email or password")

    token = _issue_token(user)
    _set_cookie(response, token)
    return {
        "success": True,
        "message": "Login successful",
        "data": {"user": UserResponse.model_validate(user), "token": token},
    }


# ---------------------------------------------------------
# LOGOUT
# ---------------------------------------------------------
@router.post("/logout")
def logout(response: Response, user: User = Depends(get_current_user)):
    response.delete_cookie("access_token")
    return {"success": True, "message": "Logged out successfully"}


# ---------------------------------------------------------
# PROFILE
# ---------------------------------------------------------
@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    return {"success": True, "data": {"user": UserResponse.model_validate(user)}}


@router.put("/me")
def update_me(payload: UserUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("name"):
        user.name = changes["name"].strip()
    if "company" in changes:
        user.company = changes["company"]
    db.commit()
    db.refresh(user)
    return {
        "success": True,
        "message": "Profile updated successfully",
        "data": {"user": UserResponse.model_validate(user)},
    }


@router.put("/password")
def change_password(payload: PasswordChange, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if not verify_password(payload.current_password, user.password_hash):
        raise Unauthorized("Current password is incorrect")

    user.password_hash = get_password_hash(payload.new_password)
    db.commit()

    token = _issue_token(user)
    return {"success": True, "message": "Password changed successfully", "data": {"token": token}}
