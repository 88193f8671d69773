from datetime import datetime
from pydantic import BaseModel, ConfigDict
from uuid import UUID

class UserCreate(BaseModel):
    username: str
    password: str

class UserRead(BaseModel):
    id: UUID
    username: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
