from fastapi import APIRouter, Depends

from ..auth import Identity, get_current_user
from ..shared.constants import (
    CHEMICAL_TYPES,
    NOTE_CATEGORIES,
    NOTE_PRIORITIES,
    POOL_TYPES,
    READING_LEVELS,
    SERVICE_DAYS,
    SURFACE_TYPES,
)

router = APIRouter(prefix="/vocabularies", tags=["Vocabularies"])


@router.get("")
async def get_vocabularies(current_user: Identity = Depends(get_current_user)):
    """Option lists for the client forms; values are not enforced on write"""
    return {
        "service_days": SERVICE_DAYS,
        "pool_types": POOL_TYPES,
        "surface_types": SURFACE_TYPES,
        "reading_levels": READING_LEVELS,
        "chemical_types": CHEMICAL_TYPES,
        "note_categories": NOTE_CATEGORIES,
        "note_priorities": NOTE_PRIORITIES,
    }
