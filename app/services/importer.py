import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .. import db
from ..models import Book, normalise_key
from core import BookRecord, CatalogueParser, iter_catalogue_files

logger = logging.getLogger(__name__)

FIELDS = ('title', 'authors', 'isbn', 'published_year', 'description')


def _find_book(record: BookRecord) -> Optional[Book]:
    if record.isbn:
        book = Book.query.filter_by(isbn=record.isbn).first()
        if book:
            return book
    candidates = Book.query.filter(Book.title_key == normalise_key(record.title)).all()
    for book in candidates:
        if normalise_key(book.authors) == normalise_key(record.authors):
            # Never merge two different ISBNs
            if book.isbn and record.isbn and book.isbn != record.isbn:
                continue
            return book
    return None


def import_records(records: Iterable[BookRecord]) -> Tuple[int, int]:
    """Upsert records into the books table.

    Rows are matched by ISBN, then by title and authors. Existing rows only
    take incoming values that are set. Returns (created, updated).
    """
    created = 0
    updated = 0
    for record in records:
        book = _find_book(record)
        if not book:
            book = Book(**record.model_dump())
            db.session.add(book)
            created += 1
        else:
            changed = False
            for field in FIELDS:
                value = getattr(record, field)
                if value is not None and getattr(book, field) != value:
                    setattr(book, field, value)
                    changed = True
            if changed:
                updated += 1
            else:
                logger.debug("Unchanged: %s", record.title)
        # Later rows may match earlier ones in the same batch
        db.session.flush()
    db.session.commit()
    logger.info("Imported books: %s created, %s updated", created, updated)
    return created, updated


def import_path(path: Path) -> Tuple[int, int]:
    """Import a catalogue file, or every catalogue file under a directory."""
    path = Path(path)
    files = list(iter_catalogue_files(path)) if path.is_dir() else [path]
    created = 0
    updated = 0
    for fp in files:
        c, u = import_records(CatalogueParser.parse_file(fp))
        logger.info("%s: %s created, %s updated", fp, c, u)
        created += c
        updated += u
    return created, updated
