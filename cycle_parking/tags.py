"""
OSM tag interpretation

Maps raw tag values on amenity=bicycle_parking elements to the
human-readable labels used in feature descriptions.
"""

from types import MappingProxyType
from typing import Optional


BOOLEAN_LABELS = MappingProxyType({
    "yes": "Yes",
    "no": "No",
    "partial": "Partially",
})

ACCESS_LABELS = MappingProxyType({
    "customers": "Customers only",
    "members": "Members only",
    "private": "Private",
})

# private=* refines access=* when both are set
PRIVATE_LABELS = MappingProxyType({
    "students": "Students only",
    "employees": "Employees only",
})

HANGAR_OPERATORS = frozenset({"Falco", "Cyclehoop"})

# bicycle_parking=* values that are covered by definition
IMPLICIT_COVERED = frozenset({"shed", "building"})


def normalize_boolean_like(value: Optional[str]) -> Optional[str]:
    """Label yes/no/partial values; anything else passes through unchanged"""
    return BOOLEAN_LABELS.get(value, value)


def resolve_access_label(access_code: Optional[str], private_code: Optional[str] = None) -> Optional[str]:
    """
    Resolve the Access line label

    Args:
        access_code: Value of the access tag
        private_code: Value of the private tag

    Returns:
        Label to display, or None when the access value is not one we describe
    """
    label = ACCESS_LABELS.get(access_code)
    if label is None:
        return None
    return PRIVATE_LABELS.get(private_code, label)


def is_hangar_operator(name: Optional[str]) -> bool:
    return name in HANGAR_OPERATORS


def implies_covered(parking_kind: Optional[str]) -> bool:
    return parking_kind in IMPLICIT_COVERED
