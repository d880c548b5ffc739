"""Shared base for domain value objects"""

import uuid
from pydantic import BaseModel as PydanticBaseModel, ConfigDict


def generate_uuid() -> str:
    return str(uuid.uuid4())


class BaseModel(PydanticBaseModel):
    """
    Immutable domain value

    Domain values are never mutated in place; editing produces a new value
    via model_copy(update=...).
    """

    model_config = ConfigDict(frozen=True)
