"""System routes: health check and the Actions path mapping."""

import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends

from tensor_actions import __version__
from tensor_actions.config import ActionsConfig
from tensor_actions.dependencies import get_app_actions_config

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Check the health of the service.

    This endpoint can be used for monitoring and health checks.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }


@router.get("/actions.json")
async def actions_rules(config: ActionsConfig = Depends(get_app_actions_config)) -> Dict[str, Any]:
    """Map website paths to action API paths for Actions clients."""
    pattern = f"{config.base_path}/**"
    return {"rules": [{"pathPattern": pattern, "apiPath": pattern}]}
