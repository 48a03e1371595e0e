"""
System API Router - Status and configuration
"""

import time
from datetime import datetime

import psutil
from fastapi import APIRouter, Depends, Request

from api.dependencies import get_registry, get_registry_lock
from api.exceptions import safe_endpoint
from schemas import SystemStatus

router = APIRouter()

# Track start time
START_TIME = time.time()


@router.get("/status")
@safe_endpoint
def get_status(
    registry=Depends(get_registry),
    registry_lock=Depends(get_registry_lock),
) -> SystemStatus:
    """Get system status"""
    # Get memory usage
    process = psutil.Process()
    memory_info = process.memory_info()

    # Get system memory
    virtual_memory = psutil.virtual_memory()

    with registry_lock:
        registry_stats = registry.get_statistics()

    return SystemStatus(
        status="healthy",
        uptime=time.time() - START_TIME,
        memory_usage={
            "process_mb": memory_info.rss / 1024 / 1024,
            "system_percent": virtual_memory.percent,
            "available_mb": virtual_memory.available / 1024 / 1024,
        },
        registry=registry_stats,
    )


@router.get("/config")
@safe_endpoint
async def get_config(request: Request) -> dict:
    """Get current configuration"""
    return request.app.state.config


@router.get("/health")
async def health_check() -> dict:
    """Simple health check"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
