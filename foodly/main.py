"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from foodly.core.config import settings
from foodly.core.logging import setup_logging
from foodly.db.database import init_db
from foodly.api import health, restaurants, cart, auth, checkout, orders


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    await init_db()
    yield


app = FastAPI(
    title=settings.app_name,
    description="Food ordering: restaurant browsing, cart, checkout and order tracking",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(restaurants.router, tags=["restaurants"])
app.include_router(cart.router, tags=["cart"])
app.include_router(auth.router, tags=["auth"])
app.include_router(checkout.router, tags=["checkout"])
app.include_router(orders.router, tags=["orders"])


@app.get("/")
async def root():
    """Service index."""
    return {
        "message": f"{settings.app_name} API",
        "version": "0.1.0",
    }
