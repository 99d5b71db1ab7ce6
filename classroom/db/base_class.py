# /classroom/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every ORM model in classroom/db/models inherits from this Base.
Base = declarative_base()
