"""Response shapes shared by every record domain"""

from pydantic import BaseModel


class RecordIdResponse(BaseModel):
    """Identifier returned by create and update operations"""

    id: str
