"""Pydantic schemas for registration and login."""
from pydantic import BaseModel, ConfigDict


class CredentialsSchema(BaseModel):
    # format checks live in AuthService so they map to InvalidInput
    email: str
    password: str


class UserOutSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class LoginUserSchema(BaseModel):
    email: str


class TokenOutSchema(BaseModel):
    token: str
    user: LoginUserSchema
