"""
System API models.
"""

from typing import Any, Dict

from pydantic import BaseModel


class SystemStatus(BaseModel):
    """System status response"""

    status: str
    uptime: float
    memory_usage: Dict[str, float]
    registry: Dict[str, Any]
