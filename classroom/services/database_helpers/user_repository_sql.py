# /classroom/services/database_helpers/user_repository_sql.py

"""
Raw SQLAlchemy queries for the `users` table. These are the foundational
operations behind registration and login.
"""

from typing import Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classroom.core.exceptions import DuplicateUsernameError
from classroom.db.models.user_models import User


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Returns the user with this username, or None. Never raises on absence."""
        return self.db.query(User).filter(User.username == username).first()

    def add_user(self, record: Dict) -> User:
        """
        Creates a new User record. The unique constraint on `username` is the
        final guard against duplicates, including concurrent registrations.
        """
        new_user = User(**record)
        self.db.add(new_user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateUsernameError(record.get("username"))
        self.db.refresh(new_user)
        return new_user
