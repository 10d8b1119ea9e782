from pydantic import BaseModel, field_validator

# Author base schema
class AuthorBase(BaseModel):
    full_name: str
    about: str | None = None

    @field_validator("full_name", mode="before")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("full_name cannot be empty")
        return v

# Author create schema
class AuthorCreate(AuthorBase):
    pass
