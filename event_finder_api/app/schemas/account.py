"""
Pydantic models for account registration and sign in.

Fields are optional at the schema level so that the service can
report missing values with its own message instead of the framework's
validation error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    username: Optional[str] = Field(None, examples=["jdoe"])
    email: Optional[str] = Field(None, examples=["jdoe@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])


class AccountSignIn(BaseModel):
    email: Optional[str] = Field(None, examples=["jdoe@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])


class AccountRead(BaseModel):
    """Public view of an account."""

    id: int
    username: str
    email: str


class MessageResponse(BaseModel):
    message: str


class TokenResponse(MessageResponse):
    token: str
