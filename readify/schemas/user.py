# readify/schemas/user.py
from pydantic import BaseModel

class UserBrief(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}

class TokenData(BaseModel):
    sub: str | None = None
