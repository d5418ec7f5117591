# kudos_wall/adapters/inbound/api/v1/endpoints/health_endpoint.py

from datetime import datetime, timezone
from fastapi import APIRouter

router = APIRouter()


@router.get("", summary="Health Check")
async def health_check():
    return {
        "status": "success",
        "message": "Digital Kudos Wall API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
