"""Client-side page registry used to build links returned by the API"""

from typing import Optional
from urllib.parse import urlencode

# Registration order matters: unknown paths fall back to the first page
PAGES = [
    "Home",
    "Clients",
    "NewClient",
    "NewServiceLog",
    "CustomerDetail",
    "History",
    "WeeklyReport",
    "RouteOptimizer",
    "EditClient",
    "ChemicalUsage",
    "NewChemicalUsage",
    "Notes",
]


def resolve_page(path: Optional[str]) -> str:
    """Map a URL path to a registered page name, case-insensitively"""
    url = (path or "").split("?", 1)[0].rstrip("/")
    last_part = url.split("/")[-1].lower()

    for page in PAGES:
        if page.lower() == last_part:
            return page
    return PAGES[0]


def create_page_url(page: str, **params) -> str:
    """Build "/Page?key=value" for a registered page"""
    if page not in PAGES:
        raise ValueError(f"Unknown page: {page}")
    query = urlencode({k: v for k, v in params.items() if v is not None})
    return f"/{page}?{query}" if query else f"/{page}"
