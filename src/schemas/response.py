"""Response envelopes shared by every route.

Successful responses are wrapped as `{"success": true, "message"?, "data"?, "count"?}`
and failures as `{"success": false, "message": ...}`.
"""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[DataT] = None
    count: Optional[int] = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
