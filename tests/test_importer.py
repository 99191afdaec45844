from app.models import Book
from app.services.importer import import_path, import_records
from core import BookRecord


def test_import_sample_directory(app, sample_books):
    created, updated = import_path(sample_books)
    # Dune appears in both files and matches by ISBN
    assert (created, updated) == (5, 0)
    assert Book.query.count() == 5


def test_import_is_idempotent(app, sample_books):
    import_path(sample_books)
    assert import_path(sample_books) == (0, 0)
    assert Book.query.count() == 5


def test_import_single_file(app, sample_books):
    assert import_path(sample_books / "shelf.csv") == (3, 0)


def test_match_by_isbn_updates_fields(app):
    import_records([BookRecord(title="Dune", isbn="9780441013593")])
    created, updated = import_records([
        BookRecord(title="Dune (40th Anniversary)", isbn="978-0441013593", published_year=1965),
    ])
    assert (created, updated) == (0, 1)
    book = Book.query.one()
    assert book.title == "Dune (40th Anniversary)"
    assert book.published_year == 1965


def test_match_by_title_and_authors_keeps_existing_values(app):
    import_records([BookRecord(title="Middlemarch", authors="George Eliot", description="Provincial life.")])
    created, updated = import_records([
        BookRecord(title="MIDDLEMARCH", authors="george  eliot", published_year=1871),
    ])
    assert (created, updated) == (0, 1)
    book = Book.query.one()
    assert book.description == "Provincial life."
    assert book.published_year == 1871


def test_same_title_different_authors_creates_new_book(app):
    import_records([BookRecord(title="Collected Poems", authors="Sylvia Plath")])
    created, _ = import_records([BookRecord(title="Collected Poems", authors="Philip Larkin")])
    assert created == 1
    assert Book.query.count() == 2


def test_duplicates_within_one_batch_are_merged(app):
    created, updated = import_records([
        BookRecord(title="Dune", authors="Frank Herbert"),
        BookRecord(title="Dune", authors="Frank Herbert", published_year=1965),
    ])
    assert (created, updated) == (1, 1)
    assert Book.query.one().published_year == 1965


def test_non_ascii_title_matches_on_reimport(app):
    import_records([BookRecord(title="Éloge de l'ombre", authors="Tanizaki")])
    assert import_records([BookRecord(title="ÉLOGE DE L'OMBRE", authors="tanizaki")]) == (0, 1)
    assert import_records([BookRecord(title="ÉLOGE DE L'OMBRE", authors="tanizaki")]) == (0, 0)
    assert Book.query.count() == 1


def test_title_key_follows_title(app):
    import_records([BookRecord(title="Straße", isbn="9780000000002")])
    book = Book.query.one()
    assert book.title_key == "strasse"
    import_records([BookRecord(title="Die  Straße", isbn="9780000000002")])
    assert book.title_key == "die strasse"
