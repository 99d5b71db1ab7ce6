# /classroom/routers/auth_router.py

"""
This module defines the public-facing API for authentication:
- User registration (`/register`)
- User login (`/login`)

Login is a plain credential check that returns the user's public profile;
no session or token is issued.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import DuplicateUsernameError
from ..models import user_model
from ..services import user_service
from ..services.database_service import DatabaseService, get_db_service

# --- Router Initialization ---
router = APIRouter()


@router.post("/login", response_model=user_model.User, summary="Log In")
def login(credentials: user_model.LoginRequest, db: DatabaseService = Depends(get_db_service)):
    """
    Returns the user when username, password and role all match. Any mismatch
    yields the same 401, without saying which part was wrong.
    """
    user = user_service.authenticate_user(
        username=credentials.username,
        password=credentials.password,
        role=credentials.role,
        db=db,
    )
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return user


@router.post("/register", response_model=user_model.User, status_code=status.HTTP_201_CREATED, summary="Register a New User")
def register(user_in: user_model.UserCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return user_service.register_user(user=user_in, db=db)
    except DuplicateUsernameError as e:
        # Taken usernames are reported as a 400, not a 409.
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
