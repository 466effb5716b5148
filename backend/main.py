"""Sklonenie API server.

Run with: python3 main.py  (or: uvicorn main:app)
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.declension import router as declension_router
from core.config import settings
from core.errors.handlers import raise_result, register_error_handlers
from core.logging import SERVICE_VERSION, configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from declension import DeclensionEngine

configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tables are loaded once, before the first request; a bad table aborts startup
    result = DeclensionEngine.initialize(settings.RULES_PATH, settings.GENDER_PATH)
    if result.is_err():
        log.error("engine_unavailable", error=result.unwrap_err().message)
    raise_result(result)
    app.state.engine = result.unwrap()
    log.info("engine_ready", rules=str(settings.RULES_PATH), genders=str(settings.GENDER_PATH))

    yield

    log.info("shutdown")


app = FastAPI(
    title="Sklonenie API",
    description="Rule-based declension of Russian names, words and phrases",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

register_error_handlers(app)
app.add_middleware(RequestLoggingMiddleware)
app.include_router(declension_router, prefix="/api/declension", tags=["declension"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": SERVICE_VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # keep the structlog handlers installed above
    )
