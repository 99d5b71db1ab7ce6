# /classroom/core/deps.py

from typing import Annotated

from fastapi import Path, Request

from ..models.common import MAX_ID
from .config import Settings


def get_app_settings(request: Request) -> Settings:
    """The Settings instance the running application was created with."""
    return request.app.state.settings


# Path parameter naming an existing row; out-of-range ids are a 400, not a database error.
IdPath = Annotated[int, Path(gt=0, le=MAX_ID)]
