import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .core.errors import DomainError
from .routers import (
    assessments,
    athletes,
    auth,
    criteria_weights,
    dashboard,
    exercises,
    recommendation_rules,
    recommendations,
    teams,
)

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Athlete Monitoring System",
    version="0.1.0",
)

app.include_router(auth.router)
app.include_router(teams.router)
app.include_router(athletes.router)
app.include_router(assessments.router)
app.include_router(exercises.router)
app.include_router(criteria_weights.router)
app.include_router(recommendation_rules.router)
app.include_router(recommendations.router)
app.include_router(dashboard.router)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Something went wrong."})


@app.get("/health", tags=["health"])
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
