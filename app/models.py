import re
from datetime import datetime
from sqlalchemy.orm import validates
from . import db


def normalise_key(value):
    """Whitespace-collapsed, casefolded form used for matching."""
    return re.sub(r"\s+", " ", (value or '')).strip().casefold()


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )


class Book(db.Model, TimestampMixin):
    __tablename__ = "books"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String, nullable=False)
    # SQLite lower() only folds ASCII, so matching uses this instead
    title_key = db.Column(db.String, index=True, nullable=False)
    authors = db.Column(db.String)  # comma-separated
    isbn = db.Column(db.String(13), unique=True, index=True, nullable=True)  # digits only
    published_year = db.Column(db.Integer)
    description = db.Column(db.Text)

    @validates("title")
    def _set_title_key(self, key, value):
        self.title_key = normalise_key(value)
        return value

    def __repr__(self) -> str:
        return f"<Book {self.id} {self.title!r}>"
