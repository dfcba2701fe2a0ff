import html
from typing import Any, Optional


def sanitize_string(value: Optional[Any]) -> str:
    """
    Escape HTML special characters for embedding record text in report markup.
    Returns an empty string for None.
    """
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def sanitize_multiline(value: Optional[Any]) -> str:
    """Escape text and keep its line breaks visible in HTML"""
    return sanitize_string(value).replace("\n", "<br>")
