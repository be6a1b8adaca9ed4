"""
LexiLens API Server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from loguru import logger

from lexilens.log import setup_logging
from lexilens.server.routes import lookup


VERSION = "0.1.0"


def log_routes(app: FastAPI):
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            logger.info("  {:8} {:24} → {}", methods, route.path, route.name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("LexiLens API routes:")
    log_routes(app)
    yield


app = FastAPI(title="LexiLens API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lookup.router)


@app.get("/")
async def root():
    return {"name": "LexiLens API", "version": VERSION}


@app.get("/health")
async def health():
    return {"status": "ok"}
