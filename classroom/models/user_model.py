# /classroom/models/user_model.py

# --- Core Imports ---
from enum import Enum

from pydantic import Field

from .common import CamelModel


class UserRole(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=3, description="Username must be at least 3 characters.")
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters.")
    role: UserRole


class UserCreate(LoginRequest):
    """The registration payload: login credentials plus a display name."""
    name: str = Field(..., min_length=1)


class User(CamelModel):
    """
    The public representation of a user. The password hash is never part of
    any response.
    """
    id: int
    username: str
    role: UserRole
    name: str
