# /classroom/services/user_service.py

"""
Business logic for registration and login. Passwords are hashed on the way
in and verified against the hash on login; the plaintext is never stored.
"""

import logging
from typing import Optional

from classroom.core import security
from classroom.core.exceptions import DuplicateUsernameError
from classroom.db.models.user_models import User
from ..models import user_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def register_user(user: user_model.UserCreate, db: DatabaseService) -> User:
    """
    Creates a new user. Raises DuplicateUsernameError when the username is
    already taken; the unique constraint catches concurrent registrations that
    slip past the lookup.
    """
    if db.get_user_by_username(user.username):
        raise DuplicateUsernameError(user.username)

    new_user = db.add_user({
        "username": user.username,
        "password": security.hash_password(user.password),
        "role": user.role.value,
        "name": user.name,
    })
    logger.info("Registered %s '%s' (id=%s)", new_user.role, new_user.username, new_user.id)
    return new_user


def authenticate_user(username: str, password: str, role: user_model.UserRole, db: DatabaseService) -> Optional[User]:
    """
    Returns the user only if the username exists, the password verifies and
    the stored role matches the requested one. Any failure returns None, with
    no indication of which check failed.
    """
    user = db.get_user_by_username(username)
    if not user:
        return None
    if not security.verify_password(password, user.password):
        return None
    if user.role != role.value:
        return None
    return user
