import os
import sys
from pathlib import Path

import pytest


# Ensure project root is on sys.path for imports like `import app`, `import core`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Use a lightweight SQLite DB during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

SAMPLE_BOOKS = ROOT / "sample-books"


@pytest.fixture
def app():
    # Each app gets its own in-memory database, so tests start empty
    from app import create_app
    flask_app = create_app()
    flask_app.config["TESTING"] = True
    with flask_app.app_context():
        yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_books():
    return SAMPLE_BOOKS
