import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, List
from pydantic import ValidationError
from .schemas import BookRecord


class CatalogueError(ValueError):
    """Raised when a catalogue file cannot be read or holds invalid rows."""


class CatalogueParser:
    """Reader for JSON and CSV book catalogue files."""

    SUFFIXES = ('.json', '.csv')

    @staticmethod
    def parse_file(filepath: Path) -> List[BookRecord]:
        filepath = Path(filepath)
        suffix = filepath.suffix.lower()
        if suffix not in CatalogueParser.SUFFIXES:
            raise CatalogueError(f"Unsupported catalogue format: {filepath.name}")

        content = CatalogueParser._read_text(filepath)
        if suffix == '.json':
            rows = CatalogueParser._parse_json(content, filepath)
        else:
            rows = CatalogueParser._parse_csv(content, filepath)
        return CatalogueParser._validate(rows, filepath)

    @staticmethod
    def _read_text(filepath: Path) -> str:
        # utf-8-sig drops the BOM spreadsheet exports put at the start
        try:
            with open(filepath, 'r', encoding='utf-8-sig', newline='') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise CatalogueError(f"{filepath.name}: not valid UTF-8 ({e})") from e
        except OSError as e:
            raise CatalogueError(f"{filepath.name}: cannot be read ({e.strerror or e})") from e

    @staticmethod
    def _parse_json(content: str, filepath: Path) -> List[Dict[str, Any]]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CatalogueError(f"{filepath.name}: invalid JSON ({e})") from e

        # Accept either a bare list or {"books": [...]}
        if isinstance(data, dict):
            data = data.get('books')
        if not isinstance(data, list):
            raise CatalogueError(f"{filepath.name}: expected a list of books")
        return data

    @staticmethod
    def _parse_csv(content: str, filepath: Path) -> List[Dict[str, Any]]:
        reader = csv.DictReader(io.StringIO(content, newline=''))
        if not reader.fieldnames or 'title' not in reader.fieldnames:
            raise CatalogueError(f"{filepath.name}: missing 'title' column")
        rows = []
        for row in reader:
            # Empty cells mean "unset"
            rows.append({k: v for k, v in row.items() if k and v not in (None, '')})
        return rows

    @staticmethod
    def _validate(rows: List[Any], filepath: Path) -> List[BookRecord]:
        records: List[BookRecord] = []
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                raise CatalogueError(f"{filepath.name} row {index}: expected an object")
            try:
                records.append(BookRecord(**row))
            except ValidationError as e:
                errors = '; '.join(
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                )
                raise CatalogueError(f"{filepath.name} row {index}: {errors}") from e
        return records
