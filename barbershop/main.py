# barbershop/main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barbershop.config import get_settings
from barbershop.context import AppContext
from barbershop.db import init_db
from barbershop.errors import register_error_handlers
from barbershop.log import get_logger, setup_logging
from barbershop.routers import appointments_routes, auth_routes, barbers_routes, services_routes

logger = get_logger(__name__)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """Build the API around `context`, or around one made from the environment."""
    if context is None:
        settings = get_settings()
        setup_logging(level="DEBUG" if settings.debug else settings.log_level)
        context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(context.engine)
        logger.info("Barbershop API ready")
        yield
        context.engine.dispose()

    app = FastAPI(title="Barbershop Booking API", lifespan=lifespan)
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth_routes.router)
    app.include_router(barbers_routes.router)
    app.include_router(services_routes.router)
    app.include_router(appointments_routes.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.context.settings.port)
