from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.enums.sort_direction import SortDirection
__all__ = [
    "EntityKind",
    "SortDirection",
]
