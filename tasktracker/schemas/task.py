from datetime import datetime
from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, field_validator

TITLE_MAX_LENGTH = 255


def clean_title(value) -> str:
    """Return the trimmed title or raise ValueError if there is nothing left."""
    if not isinstance(value, str):
        raise ValueError("title must be a string")
    value = value.strip()
    if not value:
        raise ValueError("title cannot be empty")
    if len(value) > TITLE_MAX_LENGTH:
        raise ValueError(f"title must be at most {TITLE_MAX_LENGTH} characters")
    return value


class TaskCreate(BaseModel):
    title: StrictStr

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return clean_title(v)


class TaskCompletion(BaseModel):
    # 1, "true" or null are rejected rather than coerced
    completed: StrictBool


class TaskOut(BaseModel):
    id: int
    title: str
    completed: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MessageOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    status: str
    message: str
