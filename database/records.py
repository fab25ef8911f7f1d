"""
Typed records for each entity kind.

*Create models describe the fields a caller supplies on insert/update;
*Record models describe what the store returns (caller fields plus the
system-assigned id and creation timestamp).
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Fields accepted when creating or overwriting a User."""

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr = Field(max_length=255)


class CategoryCreate(BaseModel):
    """Fields accepted when creating or overwriting a Category."""

    name: str = Field(min_length=1, max_length=100)


class PostCreate(BaseModel):
    """Fields accepted when creating or overwriting a Post."""

    title: str = Field(min_length=1, max_length=255)
    content: str | None = None
    author_id: uuid.UUID
    category_id: uuid.UUID


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID
    created_at: datetime


class UserRecord(_Record):
    name: str
    email: str


class CategoryRecord(_Record):
    name: str


class PostRecord(_Record):
    title: str
    content: str | None
    author_id: uuid.UUID
    category_id: uuid.UUID
