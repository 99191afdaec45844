import re
from typing import List, Optional, Union
from pydantic import BaseModel, field_validator


class BookRecord(BaseModel):
    title: str
    authors: Optional[str] = None
    isbn: Optional[str] = None
    published_year: Optional[int] = None
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def normalise_title(cls, v: str) -> str:
        v = re.sub(r"\s+", " ", v).strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator("authors", mode="before")
    @classmethod
    def join_authors(cls, v: Union[str, List[str], None]) -> Optional[str]:
        if v is None:
            return None
        if isinstance(v, (list, tuple)):
            names = [str(n).strip() for n in v if n is not None]
        else:
            names = [n.strip() for n in str(v).split(";")]
        names = [n for n in names if n]
        return ", ".join(names) or None

    @field_validator("isbn", mode="before")
    @classmethod
    def normalise_isbn(cls, v) -> Optional[str]:
        if v is None:
            return None
        v = re.sub(r"[\s-]", "", str(v)).upper()
        if not v:
            return None
        if not re.fullmatch(r"\d{13}|\d{9}[\dX]", v):
            raise ValueError("isbn must have 10 or 13 digits")
        return v

    @field_validator("published_year", mode="before")
    @classmethod
    def blank_year(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("published_year")
    @classmethod
    def check_year(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not 0 <= v <= 9999:
            raise ValueError("published_year must be between 0 and 9999")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def blank_description(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
