# smartnotes/auth/api.py
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr
from sqlalchemy.orm import Session
from fastapi.security import OAuth2PasswordRequestForm

from smartnotes.shared.db import get_db
from smartnotes.shared.auth import create_access_token, get_user
from smartnotes.shared.config import settings
from smartnotes.auth.service import register_user, authenticate_user, INVALID_CREDENTIALS

router = APIRouter(prefix="/auth", tags=["Auth"])

class RegisterIn(BaseModel):
    email: EmailStr
    password: str

@router.post("/register", status_code=201)
def api_register(inb: RegisterIn, db: Session = Depends(get_db)):
    try:
        user = register_user(db, inb.email, inb.password)
        return {"ok": True, "user": user}
    except ValueError as e:
        raise HTTPException(400, str(e))

@router.post("/token")
def api_token(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = authenticate_user(db, form.username, form.password)
    if not user:
        raise HTTPException(401, INVALID_CREDENTIALS)
    token = create_access_token(sub=user["sub"], email=user["email"])
    return {
        "access_token": token,
        "token_type": "bearer",
        "expires_in": settings.JWT_EXPIRE_MIN * 60,
        "user": {"id": user["sub"], "email": user["email"]},
    }

@router.get("/me")
def api_me(user = Depends(get_user)):
    return {"ok": True, "user": {"id": user["sub"], "email": user.get("email"), "mode": user["mode"]}}
