"""
HTTP layer: routes, CORS, request logging, rate limiting and error mapping.
"""

import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from socialgenius.exceptions import (
    ConfigurationError,
    GenerationError,
    RateLimitExceededError,
)
from socialgenius.factory import create_ai_service
from socialgenius.models.idea import ErrorResponse, GenerateIdeasRequest, GenerateIdeasResponse
from socialgenius.rate_limiter import RateLimiter
from socialgenius.services.ai_service import AIService
from socialgenius.utils.config import config
from socialgenius.utils.constants import API_NAME, API_VERSION
from socialgenius.utils.logger import logger

GENERATE_IDEAS_PATH = "/api/generate-ideas"


def get_client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for and forwarded_for.split(",")[0].strip():
        return forwarded_for.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def error_status(error: GenerationError) -> int:
    if isinstance(error, RateLimitExceededError):
        return 429
    if isinstance(error, ConfigurationError):
        return 503
    return 500


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump(), headers=headers)


def enforce_rate_limit(request: Request):
    request.app.state.rate_limiter.hit(get_client_ip(request))


def get_ai_service(request: Request) -> AIService:
    ai_service = request.app.state.ai_service
    if ai_service is None:
        raise ConfigurationError("AI service is not available. Check the server configuration.")
    return ai_service


router = APIRouter()


@router.get("/")
def index():
    """Basic API information."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "endpoints": {
            "GET /": "API information",
            "GET /api/status": "Server status",
            f"POST {GENERATE_IDEAS_PATH}": "Generate social media content ideas",
        },
    }


@router.get("/api/status")
def status(request: Request):
    settings = request.app.state.settings
    ai_service = request.app.state.ai_service
    return {
        "status": "ok",
        "environment": settings.app_env,
        "provider": ai_service.provider if ai_service else settings.ai_provider,
        "aiServiceReady": ai_service is not None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post(GENERATE_IDEAS_PATH, response_model=GenerateIdeasResponse, dependencies=[Depends(enforce_rate_limit)])
async def generate_ideas(body: GenerateIdeasRequest, ai_service: AIService = Depends(get_ai_service)):
    logger.info(f"Generating ideas for business type: {body.businessType}")
    ideas = await ai_service.generate_ideas(body.businessType)
    return GenerateIdeasResponse(
        businessType=body.businessType,
        provider=ai_service.provider,
        count=len(ideas),
        ideas=ideas,
    )


def create_app(
    ai_service: Optional[AIService] = None,
    rate_limiter: Optional[RateLimiter] = None,
    settings=config,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        ai_service: Service to generate ideas with; built from settings when omitted
        rate_limiter: Limiter for the generation endpoint; built from settings when omitted
        settings: Config instance to read from

    Returns:
        Configured FastAPI app
    """
    if ai_service is None:
        try:
            ai_service = create_ai_service(settings)
            logger.info("AI service initialized successfully")
        except ConfigurationError as e:
            logger.error(f"Error initializing AI service: {e}")
            logger.warning("Make sure AI_API_KEY is set in the .env file")

    if rate_limiter is None:
        rate_limiter = RateLimiter(
            requests_per_window=settings.rate_limit_per_minute,
            max_keys=settings.rate_limit_max_keys,
        )

    app = FastAPI(title=API_NAME, version=API_VERSION)
    app.state.ai_service = ai_service
    app.state.rate_limiter = rate_limiter
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} - {response.status_code} ({duration_ms:.1f}ms)")
        return response

    @app.exception_handler(GenerationError)
    async def handle_generation_error(request: Request, exc: GenerationError):
        status_code = error_status(exc)
        headers = None
        if isinstance(exc, RateLimitExceededError):
            headers = {"Retry-After": str(exc.retry_after)}
        else:
            logger.error(f"{exc.__class__.__name__} on {request.url.path}: {exc}")
        return error_response(status_code, str(exc), headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return error_response(400, f"Invalid request: {message}")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unexpected error on {request.url.path}: {exc}")
        return error_response(500, "Internal server error")

    app.include_router(router)
    return app
