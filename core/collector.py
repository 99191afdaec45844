from pathlib import Path
from typing import Iterator

from .parser import CatalogueParser


def iter_catalogue_files(base_path: Path) -> Iterator[Path]:
    """Yield all JSON/CSV catalogue files under base_path, sorted."""
    if not base_path.exists():
        return
    for path in sorted(base_path.rglob("*")):
        if path.is_file() and path.suffix.lower() in CatalogueParser.SUFFIXES:
            yield path
