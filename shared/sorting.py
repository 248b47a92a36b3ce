"""
Sort helpers for list routes.

Sort fields always arrive as members of a module's field enum and are
mapped to ORM columns here; raw request strings never reach ORDER BY.
"""

from enum import Enum
from typing import Any, Mapping, Sequence

from sqlalchemy import ColumnElement

# Matches "asc" / "desc" in any case; used on the direction path segment
DIRECTION_PATTERN = r"^(?i:asc|desc)$"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


def normalize_direction(value: str | None) -> SortDirection:
    """Return DESC for a case-insensitive "desc", ASC for anything else."""
    if value is not None and value.strip().upper() == SortDirection.DESC.value:
        return SortDirection.DESC
    return SortDirection.ASC


def order_clauses(
    columns: Mapping[Any, ColumnElement],
    fields: Sequence[Enum],
    direction: SortDirection = SortDirection.ASC,
) -> list[ColumnElement]:
    """
    Build ORDER BY clauses for allow-listed fields.

    Args:
        columns: Allow-list mapping each field enum member to its column
        fields: Fields to order by, in priority order
        direction: Applied to every field

    Raises:
        KeyError: If a field is not in the allow-list
    """
    clauses = []
    for field in fields:
        column = columns[field]
        clauses.append(column.desc() if direction is SortDirection.DESC else column.asc())
    return clauses
