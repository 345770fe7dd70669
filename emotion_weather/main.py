import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from emotion_weather.api.routers.activity import router as activity_router
from emotion_weather.api.routers.comments import router as comments_router
from emotion_weather.api.routers.policies import router as policies_router
from emotion_weather.api.routers.votes import router as votes_router
from emotion_weather.core.config import Settings, settings as default_settings
from emotion_weather.core.logging import configure_logging
from emotion_weather.services.container import ServiceContainer, build_container

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(
    settings: Settings = default_settings,
    container: ServiceContainer | None = None,
) -> FastAPI:
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description=(
            "Civic feedback service: emoji votes on public policies, citizen comments, "
            "and a keyword-based breakdown of what people are saying."
        ),
    )
    app.state.container = container or build_container(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": settings.app_name}

    app.include_router(policies_router, prefix=settings.api_prefix)
    app.include_router(votes_router, prefix=settings.api_prefix)
    app.include_router(comments_router, prefix=settings.api_prefix)
    app.include_router(activity_router, prefix=settings.api_prefix)

    logger.info("%s ready", settings.app_name)
    return app


app = create_app()
