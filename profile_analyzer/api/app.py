import logging
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from profile_analyzer.application.analyzer_service import ProfileAnalyzerService
from profile_analyzer.domain.exceptions import (
    ConfigurationException,
    NotFoundException,
    UnauthorizedException,
)
from profile_analyzer.infrastructure.config import Settings

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def not_found_handler(request: Request, exc: NotFoundException) -> JSONResponse:
    return _error(404, "User not found")


async def unauthorized_handler(request: Request, exc: UnauthorizedException) -> JSONResponse:
    return _error(401, "GitHub Token is invalid or expired.")


async def configuration_handler(request: Request, exc: ConfigurationException) -> JSONResponse:
    return _error(500, "Server configuration error: GitHub token missing.")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Backend error on {request.url.path}: {exc}")
    return _error(500, f"Internal Server Error: {exc}")


def create_app(settings: Settings, analyzer: Optional[ProfileAnalyzerService] = None) -> FastAPI:
    """Builds the API with its analyzer service and a single allowed CORS origin."""
    app = FastAPI(title="GitHub Profile Analyzer API")
    app.state.analyzer = analyzer or ProfileAnalyzerService(settings=settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundException, not_found_handler)
    app.add_exception_handler(UnauthorizedException, unauthorized_handler)
    app.add_exception_handler(ConfigurationException, configuration_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.get("/health")
    async def health():
        return {"ok": True}

    @app.get("/api/analyze/{username}")
    async def analyze(
        username: str,
        request: Request,
        filter_param: Optional[str] = Query(None, alias="filter", description="'true' hides low-value repositories"),
    ):
        # Only the literal 'true' enables filtering
        should_filter = filter_param == "true"
        try:
            result = await request.app.state.analyzer.analyze(username, filter_enabled=should_filter)
            return result.model_dump(by_alias=True)
        except (NotFoundException, UnauthorizedException, ConfigurationException):
            raise
        except Exception as e:
            # The catch-all handler runs outside CORSMiddleware, so answer here
            return await general_exception_handler(request, e)

    return app
