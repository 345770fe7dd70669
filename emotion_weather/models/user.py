from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=80)
    password: str


class User(UserCreate):
    id: str
