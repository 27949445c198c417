"""FastAPI application exposing the idea improvement engine."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..config import ServiceConfig, load_config
from ..engine import Engine
from ..hints import Hints
from ..logging import configure_logging, get_logger
from ..prompting.builder import DocumentBuilder
from ..stores import InMemoryTTLStore, RateLimiter, ResponseCache, TTLStore

logger = get_logger("service")

HINT_SOURCES = ("meta", "brief", "project", "hints")


class ImproveRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    idea: str
    details: Optional[bool] = None
    verbose: Optional[bool] = None
    outputLang: Optional[Literal["en", "ar"]] = None
    meta: Any = None
    brief: Any = None
    project: Any = None
    hints: Any = None

    @field_validator("idea")
    @classmethod
    def _idea_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("'idea' must be a non-empty string")
        return value


class HintsPayload(BaseModel):
    """Shape check for merged hint bags; unknown keys pass through."""

    model_config = ConfigDict(extra="allow")

    audience: Optional[List[str]] = None
    siteType: Optional[str] = None
    tone: Optional[List[str]] = None
    features: Optional[List[str]] = None
    industries: Optional[List[str]] = None
    regions: Optional[List[str]] = None
    languages: Optional[List[str]] = None
    currency: Optional[str] = None
    pages: Optional[List[str]] = None
    requiresPayments: Optional[bool] = None
    compliance: Optional[List[str]] = None
    kpis: Optional[List[str]] = None
    userStories: Optional[List[str]] = None
    tech: Optional[List[str]] = None
    contentChecklist: Optional[List[str]] = None
    milestones: Optional[List[str]] = None
    personas: Optional[List[str]] = None
    projectMode: Optional[bool] = None
    outputLang: Optional[Literal["en", "ar"]] = None


class HealthResponse(BaseModel):
    status: str


def merge_hint_sources(payload: ImproveRequest) -> Dict[str, Any]:
    """Flatten the hint bags; later bags win per key, ``outputLang`` wins over all."""
    merged: Dict[str, Any] = {}
    for source in HINT_SOURCES:
        bag = getattr(payload, source)
        if isinstance(bag, Mapping):
            merged.update(bag)
    if payload.outputLang:
        merged["outputLang"] = payload.outputLang
    return merged


def client_identity(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client is not None and request.client.host:
        return request.client.host
    return "unknown"


def create_app(
    config: ServiceConfig | None = None,
    *,
    engine_factory: Callable[[], Engine] = Engine,
    store: TTLStore | None = None,
    rate_store: TTLStore | None = None,
    clock: Callable[[], float] | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    ``store`` backs the response cache and ``rate_store`` the rate limiter;
    each defaults to its own in-memory store.
    """

    settings = config or ServiceConfig()
    cache_store = store if store is not None else InMemoryTTLStore()
    limiter_store = rate_store if rate_store is not None else InMemoryTTLStore()
    cache = ResponseCache(cache_store, ttl_seconds=settings.cache_ttl_seconds)
    limiter = RateLimiter(
        limiter_store,
        limit=settings.rate_limit,
        window_seconds=settings.rate_window_seconds,
        clock=clock,
    )
    engine = engine_factory()

    app = FastAPI(title="IdeaSpec Service", version="1.0.0")
    app.state.cache = cache
    app.state.limiter = limiter
    app.state.settings = settings

    async def get_engine() -> Engine:
        return engine

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/api/improve")
    async def improve(request: Request, engine: Engine = Depends(get_engine)) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            body = {}
        try:
            payload = ImproveRequest.model_validate(body if isinstance(body, dict) else {})
        except ValidationError as exc:
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid request", "issues": _issues(exc)},
            )

        idea = payload.idea.strip()[: settings.max_idea_chars]
        include_details = bool(
            payload.details if payload.details is not None else payload.verbose or False
        )

        identity = client_identity(request)
        decision = limiter.hit(identity)
        if not decision.allowed:
            logger.warning("Rate limit exceeded for %s", identity)
            return JSONResponse(
                status_code=429,
                content={"error": "Too many requests", "meta": {"resetAt": decision.reset_at_ms}},
            )

        merged = merge_hint_sources(payload)
        hint_data: Optional[Dict[str, Any]] = None
        if merged:
            try:
                hint_data = HintsPayload.model_validate(merged).model_dump(exclude_none=True)
            except ValidationError as exc:
                return JSONResponse(
                    status_code=400,
                    content={"error": "Invalid hints", "issues": _issues(exc)},
                )

        cache_key = cache.make_key(idea, hint_data, include_details)
        cached = cache.get(cache_key)
        if cached is not None:
            logger.debug("Serving cached response for %s", identity)
            return JSONResponse(content=cached)

        hints = Hints.from_mapping(hint_data)

        def _run() -> Dict[str, Any]:
            return engine.improve(idea, hints).to_response(include_details)

        try:
            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(None, _run)
        except Exception:
            logger.exception("Unexpected error improving idea")
            return JSONResponse(
                status_code=500,
                content={"error": "Unexpected error improving idea."},
            )

        cache.store(cache_key, response)
        return JSONResponse(content=response)

    return app


def _issues(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


def build_app_from_config(config_path: Path | None = None, *, verbose: bool = False) -> FastAPI:
    config = load_config(config_path)
    configure_logging(
        verbose=verbose or config.logging.verbose,
        log_file=config.logging.log_file,
        levels=config.logging.levels,
    )
    builder = DocumentBuilder(templates_dir=config.templates_dir)
    return create_app(config.service, engine_factory=lambda: Engine(builder=builder))


def run_service(
    host: str = "0.0.0.0",
    port: int = 8000,
    config_path: Path | None = None,
    *,
    verbose: bool = False,
) -> None:  # pragma: no cover - integration path
    app = build_app_from_config(config_path, verbose=verbose)
    logger.info("Starting ideaspec service on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


__all__ = [
    "HintsPayload",
    "ImproveRequest",
    "build_app_from_config",
    "client_identity",
    "create_app",
    "merge_hint_sources",
    "run_service",
]
