"""Shared field validators for request schemas"""


def require_value(value, field_name: str):
    """Reject an explicit null for a field whose column is never null"""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
