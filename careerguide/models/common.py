from pydantic import BaseModel, Field
from datetime import datetime

class ErrorResponse(BaseModel):
    """Standard error envelope"""
    success: bool = False
    error: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
