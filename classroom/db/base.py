# /classroom/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# that Base.metadata knows every table, both for `create_all` at startup and
# for Alembic's autogenerate scan.

from .base_class import Base

from .models.user_models import User
from .models.class_models import Class, Enrollment
from .models.attendance_models import Attendance
from .models.assessment_models import Assessment, Grade
