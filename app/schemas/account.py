from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel


class AccountCreate(CamelModel):
    user_id: str
    name: str
    email: str
    image: Optional[str] = None
    role: Optional[str] = None


class AccountUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
    role: Optional[str] = None


class Account(CamelModel):
    id: str
    user_id: str
    name: str
    email: str
    image: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
