# /classroom/db/models/user_models.py

"""
SQLAlchemy model for the `User` entity. A user is either a teacher, who owns
classes, or a student, who joins them.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, index=True, nullable=False)
    # Always a passlib hash, never the plaintext.
    password = Column(String, nullable=False)
    role = Column(String, nullable=False)  # teacher | student
    name = Column(String, nullable=False)

    classes = relationship("Class", back_populates="teacher")
