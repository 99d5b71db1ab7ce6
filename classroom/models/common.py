# /classroom/models/common.py

# --- Core Imports ---
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Largest value a 64-bit signed INTEGER column can hold.
MAX_ID = 2**63 - 1

# A reference to an existing row. Out-of-range values fail validation instead of reaching the database.
Id = Annotated[int, Field(gt=0, le=MAX_ID)]


class CamelModel(BaseModel):
    """
    Base for every API contract model. Attributes are snake_case in Python and
    camelCase on the wire; `from_attributes` lets routers return ORM objects.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MessageResponse(BaseModel):
    message: str
