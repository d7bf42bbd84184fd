"""DepartmentRoutingPolicy — static category → department lookup."""

from __future__ import annotations

from types import MappingProxyType

from issue_dispatch.domain.value_objects.enums import Department

# Short category tags (seed data) and the long labels the report screen sends.
CATEGORY_TO_DEPARTMENT: MappingProxyType[str, Department] = MappingProxyType({
    "Pothole": Department.ROADS,
    "Open Manhole": Department.ROADS,
    "Garbage": Department.SANITATION,
    "Garbage Dump": Department.SANITATION,
    "Blocked Sewer/Drain": Department.SANITATION,
    "Streetlight": Department.ELECTRICAL,
    "Streetlight Outage": Department.ELECTRICAL,
    "Exposed Wires": Department.ELECTRICAL,
    "Security": Department.SECURITY,
    "Vandalism": Department.SECURITY,
    "Illegal Parking": Department.SECURITY,
})

FALLBACK_DEPARTMENT = Department.GENERAL.value


def resolve_department(category: str | None, fallback: str = FALLBACK_DEPARTMENT) -> str:
    """Pure function: map an issue category to the responsible department.

    Lookup is exact and case-sensitive. Unknown or empty categories route to
    *fallback* (``"General"`` unless configured otherwise). Never raises.
    """
    if not category:
        return fallback
    department = CATEGORY_TO_DEPARTMENT.get(category)
    return department.value if department is not None else fallback
