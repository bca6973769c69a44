"""FastAPI application for playing blackjack over HTTP."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from api.routes import game
from config import config
from logging_utils import setup_logging

logger = logging.getLogger(__name__)

# One limit for every route, keyed by client address
limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.http.rate_limit_enabled,
    default_limits=[config.http.rate_limit] if config.http.rate_limit_enabled else [],
)


def _too_many_requests(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning("Rate limit hit by %s", get_remote_address(request))
    return JSONResponse(status_code=429, content={"detail": f"Too many requests: {exc.detail}"})


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging("DEBUG" if config.debug else None)
    logger.info(
        "Blackjack table open: %d starting chips, rate limit %s",
        config.game.starting_chips,
        config.http.rate_limit or "off",
    )
    yield


app = FastAPI(
    title="Blackjack",
    description="Single-player blackjack against a fixed-policy dealer",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _too_many_requests)
app.add_middleware(SlowAPIMiddleware)

# Sessions travel in a header, so no cookies are needed
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.http.allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "X-Session-ID"],
)


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


app.include_router(game.router, prefix="/api/game", tags=["game"])
