from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calculator_web.api.routes import calculator, pages
from calculator_web.core.config import get_settings
from calculator_web.core.logging import configure_logging
from calculator_web.core.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """
    Application factory for the calculator web service.
    """

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description="Four-function calculator with a static web page.",
        version=settings.api_version,
    )

    cors_origins = settings.resolved_cors_origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_middleware(RequestContextMiddleware)

    app.include_router(pages.router)
    app.include_router(calculator.router)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
