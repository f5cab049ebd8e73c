# repairdesk/main.py

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlmodel import Session

from .config import (
    CORS_ORIGINS, DATABASE_URL, HOST, LOG_LEVEL, PORT, SERVICE_LOCATION, SEED_ON_STARTUP
)
from .db import init_db, make_engine
from .seed import seed_technicians
from .services.payment import PaymentGateway, StubPaymentGateway
from .routers import auth_routes, bookings_routes, catalog_routes, technicians_routes

logger = logging.getLogger(__name__)


def create_app(
    engine: Optional[Engine] = None,
    service_location: str = SERVICE_LOCATION,
    payment_gateway: Optional[PaymentGateway] = None,
    seed_on_startup: bool = SEED_ON_STARTUP,
    cors_origins: Optional[List[str]] = None,
) -> FastAPI:
    """Build the API around an explicit database engine.

    When no engine is given one is created from DATABASE_URL and disposed on
    shutdown. A caller-provided engine is left open for the caller to close.
    """
    owns_engine = engine is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            init_db(app.state.engine)
            if seed_on_startup:
                with Session(app.state.engine) as session:
                    seed_technicians(session, app.state.service_location)
            logger.info("repairdesk started, booking technicians in %s", app.state.service_location)
            yield
        finally:
            if owns_engine:
                app.state.engine.dispose()
                logger.info("Database engine disposed")

    app = FastAPI(title="Repair Desk", lifespan=lifespan)
    app.state.engine = engine if engine is not None else make_engine(DATABASE_URL)
    app.state.service_location = service_location
    app.state.payment_gateway = payment_gateway or StubPaymentGateway()

    origins = cors_origins if cors_origins is not None else CORS_ORIGINS
    logger.info("CORS allowed origins: %s", origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_routes.router)
    app.include_router(bookings_routes.router)
    app.include_router(technicians_routes.router)
    app.include_router(catalog_routes.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


def serve(host: str = HOST, port: int = PORT) -> None:
    """Run the API with uvicorn."""
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    serve()
