# quest_api/main.py
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from quest_api.core.config import Settings, settings as default_settings
from quest_api.core.logging_setup import setup_logging
from quest_api.database import Base, engine
from quest_api.routers import admin_boost, tasks

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(settings: Settings = default_settings, create_tables: bool = True) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_tables:
            Base.metadata.create_all(bind=engine)
        logger.info("%s started env=%s", settings.APP_NAME, settings.ENV)
        yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS,
        allow_credentials=settings.ALLOW_CREDENTIALS,
        allow_methods=settings.ALLOW_METHODS,
        allow_headers=settings.ALLOW_HEADERS,
    )

    @app.get("/")
    def read_root():
        return {"message": f"{settings.APP_NAME} running"}

    # Routers
    app.include_router(tasks.router)
    app.include_router(admin_boost.router)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=settings.APP_NAME,
            version="1.0.0",
            description="Admin routes need a bearer token with role=admin.",
            routes=app.routes,
        )
        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}
        }
        for path, methods in openapi_schema["paths"].items():
            if not path.startswith("/admin"):
                continue
            for method in methods.values():
                method["security"] = [{"BearerAuth": []}]
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi
    return app


app = create_app()
