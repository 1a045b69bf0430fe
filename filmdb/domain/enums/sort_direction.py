from __future__ import annotations
from enum import StrEnum

class SortDirection(StrEnum):
    asc = "asc"
    desc = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortDirection":
        """Lenient parse: anything other than 'desc' (any case) sorts ascending."""
        if value and value.strip().lower() == cls.desc.value:
            return cls.desc
        return cls.asc
