# filmdb/domain/policies/sort_guard.py
"""
Sort-field whitelist.

Clients choose sort keys by name. Only names registered here ever reach the
query layer; anything else (relations, internal columns, typos) is dropped
without an error so a sloppy client still gets a result in natural order.
"""
from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence

from filmdb.common.logging import get_logger
from filmdb.common.strings.splitters import csv_to_list
from filmdb.domain.dataclasses.paging import SortOrder
from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.enums.sort_direction import SortDirection

logger = get_logger(__name__)

# One whitelist per entity kind; names are the mapped attribute names.
SORTABLE_FIELDS: Mapping[EntityKind, frozenset[str]] = {
    EntityKind.film: frozenset({"id", "title", "release_date"}),
    EntityKind.person: frozenset({"id", "name", "date_of_birth"}),
}


def sortable_fields(kind: EntityKind) -> frozenset[str]:
    # Kinds without a registry entry (roles) are not client-sortable at all.
    return SORTABLE_FIELDS.get(kind, frozenset())


def filter_sort(orders: Iterable[SortOrder] | None, allowed: Iterable[str]) -> List[SortOrder]:
    """
    Keep the orders whose field is in `allowed`, preserving their relative order.
    An empty result means "no sort".
    """
    allowed = frozenset(allowed)
    kept: List[SortOrder] = []
    for o in orders or ():
        if o.field in allowed:
            kept.append(o)
        else:
            logger.debug("Dropping non-sortable field %r", o.field)
    return kept


def guard_sort(orders: Iterable[SortOrder] | None, kind: EntityKind) -> List[SortOrder]:
    return filter_sort(orders, sortable_fields(kind))


def parse_sort(values: Sequence[str] | str | None) -> List[SortOrder]:
    """
    Parse query-string sort parameters, one "field[,direction]" per value:

        ["title,desc", "id"] -> [SortOrder("title", desc), SortOrder("id", asc)]

    Parsing does not validate field names; run the result through guard_sort.
    """
    if isinstance(values, str):
        values = [values]
    out: List[SortOrder] = []
    for raw in values or ():
        parts = csv_to_list(raw)
        if not parts:
            continue
        direction = SortDirection.parse(parts[1]) if len(parts) > 1 else SortDirection.asc
        out.append(SortOrder(field=parts[0], direction=direction))
    return out
