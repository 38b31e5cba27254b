"""Service layer helpers"""

from .loader import from_bytes, from_dict, from_path
from .schema import json_schema
from .validation import Violation, collect_violations, validate

__all__ = [
    "from_bytes",
    "from_dict",
    "from_path",
    "json_schema",
    "Violation",
    "collect_violations",
    "validate",
]
