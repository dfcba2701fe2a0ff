from typing import Optional

from fastapi import APIRouter, Query

from ..shared.navigation import resolve_page

router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get("/resolve")
async def resolve_page_name(path: Optional[str] = Query(None)):
    """Page name for a client URL path; unknown paths resolve to Home"""
    return {"page": resolve_page(path)}
