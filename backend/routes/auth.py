# backend/routes/auth.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from database import get_db
from models import users as models
from schemas import user as schemas
from services import accounts
from utils.audit import write_log
from utils.exceptions import StoreError
from utils.tokenJWT import create_access_token, get_current_user

router = APIRouter(prefix="/api", tags=["Auth"])


def _client_ip(request: Request):
    return request.client.host if request.client else None


# Register a new user
@router.post("/register", response_model=schemas.RegisterResponse)
def register(user: schemas.UserCreate, request: Request, db: Session = Depends(get_db)):
    try:
        new_user = accounts.create_user(db, user.email, user.password, user.name)
    except StoreError as exc:
        write_log(db, user_id=None, action="REGISTER", resource="auth", status="FAIL",
                  ip=_client_ip(request), meta={"email": user.email, "reason": exc.message})
        raise

    # Log successful registration event
    write_log(db, user_id=new_user.id, action="REGISTER", resource="auth", status="SUCCESS",
              ip=_client_ip(request), meta={"email": new_user.email})
    return {"success": True, "user": new_user}


# Authenticate user and issue JWT token
@router.post("/login", response_model=schemas.LoginResponse)
def login(payload: schemas.UserLogin, request: Request, db: Session = Depends(get_db)):
    try:
        db_user = accounts.authenticate(db, payload.email, payload.password)
    except StoreError:
        write_log(db, user_id=None, action="LOGIN", resource="auth", status="FAIL",
                  ip=_client_ip(request), meta={"email": payload.email})
        raise

    access_token = create_access_token(data={"sub": db_user.email})

    write_log(db, user_id=db_user.id, action="LOGIN", resource="auth", status="SUCCESS",
              ip=_client_ip(request), meta={"email": db_user.email})
    return {"success": True, "user": db_user, "access_token": access_token}


# Retrieve current authenticated user details
@router.get("/me", response_model=schemas.UserResponse)
def me(current_user: models.User = Depends(get_current_user)):
    return current_user
