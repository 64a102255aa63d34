from pydantic import BaseModel, field_validator

# Book create schema
class BookCreate(BaseModel):
    title: str
    author_ids: list[int] = []

    @field_validator("title", mode="before")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v

    @field_validator("author_ids")
    @classmethod
    def no_duplicates(cls, v: list[int]) -> list[int]:
        if len(set(v)) != len(v):
            raise ValueError("Duplicate author IDs are not allowed")
        return v
