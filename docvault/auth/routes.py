
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from docvault.config import settings
from docvault.auth.deps import get_db, get_current_identity
from docvault.schemas.auth import RegisterIn, LoginIn, AuthOut
from docvault.schemas.document import MessageOut
from docvault.auth.service import register_user, login_user
from docvault.utils.security import TOKEN_TTL, TokenPayload, issue_token

router = APIRouter(prefix="/auth", tags=["auth"])

def set_auth_cookie(response: Response, token: str):
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        samesite="strict",
        secure=settings.cookie_secure,
        path="/",
        max_age=int(TOKEN_TTL.total_seconds()),
    )

@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def register(body: RegisterIn, response: Response, db: Session = Depends(get_db)):
    user = register_user(db, body.username, body.password)
    set_auth_cookie(response, issue_token(user.id))
    return AuthOut(message="User registered", user_id=user.id)

@router.post("/login", response_model=AuthOut)
def login(body: LoginIn, response: Response, db: Session = Depends(get_db)):
    user, token = login_user(db, body.username, body.password)
    set_auth_cookie(response, token)
    return AuthOut(message="Logged in", user_id=user.id)

@router.post("/logout", response_model=MessageOut)
def logout(response: Response):
    response.delete_cookie(settings.cookie_name, path="/", httponly=True, samesite="strict")
    return MessageOut(message="Logged out")

@router.get("/protected", response_model=AuthOut)
def protected(identity: TokenPayload = Depends(get_current_identity)):
    return AuthOut(message="Protected route accessed", user_id=identity.user_id)
