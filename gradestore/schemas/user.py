from pydantic import BaseModel, Field


class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    firstname: str | None = None
    lastname: str | None = None


class UserRead(UserBase):
    id: int

    class Config:
        from_attributes = True
