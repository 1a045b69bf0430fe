# filmdb/database/models/__init__.py

from filmdb.database.core.main import Base
from filmdb.database.models.film import Film
from filmdb.database.models.person import Person, FilmDirector
from filmdb.database.models.role import Role

__all__ = [
    "Base",
    "Film",
    "Person",
    "FilmDirector",
    "Role",
]
