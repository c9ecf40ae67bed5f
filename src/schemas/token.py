"""Pydantic schemas for bearer tokens."""
from pydantic import BaseModel


class TokenData(BaseModel):
    """Claims extracted from a verified access token."""
    user_id: int
