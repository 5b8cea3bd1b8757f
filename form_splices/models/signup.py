"""Signup form used by the demo application."""

from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    """What the user signs up as."""

    READER = "reader"
    WRITER = "writer"
    EDITOR = "editor"


class Address(BaseModel):
    street: str = Field(min_length=1, max_length=120)
    city: str = Field(min_length=1, max_length=80)
    postcode: str = Field(default="", max_length=12)


class SignupForm(BaseModel):
    """Fields of the signup form, validated on submit."""

    username: str = Field(min_length=3, max_length=32, pattern=r"^[a-zA-Z0-9_]+$")
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=8)
    role: Role = Role.READER
    newsletter: bool = False
    bio: str = Field(default="", max_length=500)
    address: Address
