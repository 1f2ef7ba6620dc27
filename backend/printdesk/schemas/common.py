"""
Shared response shapes and wire helpers
"""
from pydantic import BaseModel


class ResourceId(BaseModel):
    """Id of a created or updated row"""
    id: int


def parse_wire_date(value):
    """
    Normalise incoming date strings before pydantic parses them.

    Accepts "2024-01-02", "2024/01/02" and full ISO timestamps
    ("2024-01-02T00:00:00.000Z"); empty strings become None.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if "T" in text:
            text = text.split("T", 1)[0]
        return text.replace("/", "-")
    return value
