import math
from pydantic import BaseModel, field_validator

# Author create schema
class AuthorCreate(BaseModel):
    name: str
    rating: float

    @field_validator("name", mode="before")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    @field_validator("rating")
    @classmethod
    def finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("rating must be a finite number")
        return v
