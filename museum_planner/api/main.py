"""FastAPI application exposing pricing, planning and discount endpoints."""

from __future__ import annotations

import logging
import time
from collections import deque

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from museum_planner import __version__
from museum_planner.config.settings import resolve_settings
from museum_planner.domain.exceptions import DomainError
from museum_planner.domain.models import ErrorResponse, PlanRequest, PlanResult, PriceResult
from museum_planner.services.contracts import DiscountRequest, DiscountResponse, HealthResponse, PriceRequest
from museum_planner.services.plan_service import discounts_for_venue, execute_plan, price_venue

_api_logger = logging.getLogger("museum-planner.api")

load_dotenv()

_settings = resolve_settings()

app = FastAPI(
    title="museum-planner",
    version=__version__,
    docs_url="/docs" if _settings.enable_docs else None,
    redoc_url=None,
)


_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(_SECURITY_HEADERS)
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window limit on POST requests per client address, kept in process."""

    def __init__(self, app, max_requests: int = 60, window_seconds: int = 60):
        super().__init__(app)
        self._max = max_requests
        self._window = window_seconds
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = 0.0

    @property
    def tracked_clients(self) -> int:
        return len(self._hits)

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        idle = [client for client, stamps in self._hits.items() if not stamps or now - stamps[-1] >= self._window]
        for client in idle:
            del self._hits[client]

    def allow(self, client: str, now: float) -> bool:
        self._sweep(now)
        stamps = self._hits.setdefault(client, deque())
        while stamps and now - stamps[0] >= self._window:
            stamps.popleft()
        if len(stamps) >= self._max:
            return False
        stamps.append(now)
        return True

    async def dispatch(self, request: Request, call_next):
        if request.method != "POST":
            return await call_next(request)
        client = request.client.host if request.client else "unknown"
        if not self.allow(client, time.monotonic()):
            _api_logger.warning("Rate limited %s on %s", client, request.url.path)
            return JSONResponse(
                status_code=429,
                content=ErrorResponse(code="RATE_LIMITED", message="Too many requests").model_dump(),
            )
        return await call_next(request)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    RateLimitMiddleware,
    max_requests=_settings.rate_limit_max,
    window_seconds=_settings.rate_limit_window,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    _api_logger.warning("Rejected %s: %s", request.url.path, exc)
    body = ErrorResponse(code=type(exc).__name__, message=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.post("/price", response_model=PriceResult)
def price(req: PriceRequest) -> PriceResult:
    return price_venue(req)


@app.post("/plan", response_model=PlanResult)
def plan(req: PlanRequest) -> PlanResult:
    return execute_plan(req, settings=_settings)


@app.post("/discounts", response_model=DiscountResponse)
def discounts(req: DiscountRequest) -> DiscountResponse:
    return discounts_for_venue(req, settings=_settings)
