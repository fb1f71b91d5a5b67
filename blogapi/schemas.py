"""
Request bodies accepted by the HTTP surface.

Every field is optional at this layer so that a missing value reaches the
service and is reported as a ValidationError (400) with the usual message.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RegisterBody(_Body):
    username: Optional[str] = Field(None, description="Unique display name")
    email: Optional[str] = Field(None, description="Unique email address")
    password: Optional[str] = Field(None, description="Plain password, hashed before storage")


class LoginBody(_Body):
    email_or_username: Optional[str] = Field(None, alias="emailOrUsername", description="Email or username")
    password: Optional[str] = Field(None, description="Plain password")


class ProfileUpdateBody(_Body):
    username: Optional[str] = Field(None, description="New username (blank keeps the current one)")
    bio: Optional[str] = Field(None, description="Free text bio")
    avatar_url: Optional[str] = Field(None, alias="avatarUrl", description="Avatar image URL")


class PostBody(_Body):
    title: Optional[str] = Field(None, description="Post title")
    content: Optional[str] = Field(None, description="Post body")


class CommentBody(_Body):
    text: Optional[str] = Field(None, description="Comment text")
