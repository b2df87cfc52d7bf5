from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request

from training_signup.services.registration_store import (
    RegistrationStore,
    StoreError,
    get_store,
)

health = APIRouter()


@health.get("/health")
async def health_check(request: Request):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "training-signup",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": request.app.state.settings.get("environment", "development"),
    }


@health.get("/health/detailed")
async def detailed_health_check(
    request: Request, store: RegistrationStore = Depends(get_store)
):
    """Detailed health check with database connectivity"""
    health_status = {
        "status": "healthy",
        "service": "training-signup",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": request.app.state.settings.get("environment", "development"),
        "checks": {},
    }

    try:
        healthy = store.ping()
        health_status["checks"]["database"] = "healthy" if healthy else "unhealthy"
        if not healthy:
            health_status["status"] = "unhealthy"
    except StoreError as e:
        health_status["checks"]["database"] = f"unhealthy: {str(e)}"
        health_status["status"] = "unhealthy"

    health_status["checks"]["change_feed"] = type(store.change_feed).__name__

    if health_status["status"] == "unhealthy":
        raise HTTPException(status_code=503, detail=health_status)

    return health_status
