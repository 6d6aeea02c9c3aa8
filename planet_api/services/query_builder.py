"""
Query-by-example for planets.

A probe is any object with ``name``, ``climate`` and ``terrain`` attributes,
usually a transient ``Planet``. Attributes left as ``None`` or ``""`` are
ignored; the rest become exact equality criteria, combined with AND by the
caller.
"""

from typing import Any, List

from sqlalchemy.sql.elements import ColumnElement

from planet_api.database.models import Planet

EXAMPLE_FIELDS = ("name", "climate", "terrain")


def make_query(probe: Any) -> List[ColumnElement]:
    criteria = []
    for field in EXAMPLE_FIELDS:
        value = getattr(probe, field, None)
        if value is None or value == "":
            continue
        criteria.append(getattr(Planet, field) == value)
    return criteria
