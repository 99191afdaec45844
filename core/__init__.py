from .schemas import BookRecord
from .parser import CatalogueParser, CatalogueError
from .collector import iter_catalogue_files

__all__ = [
    "BookRecord",
    "CatalogueParser",
    "CatalogueError",
    "iter_catalogue_files",
]
