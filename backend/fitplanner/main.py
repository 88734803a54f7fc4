from __future__ import annotations

import logging
from contextlib import asynccontextmanager

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fitplanner.api.routes import router as planner_router
from fitplanner.config import load_settings
from fitplanner.llm.providers import Providers, build_providers
from fitplanner.services.errors import PlannerError

logger = logging.getLogger(__name__)


def create_app(providers: Providers | None = None) -> FastAPI:
    """Build the app. Providers are built from the environment unless given."""
    settings = providers.settings if providers is not None else load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "providers", None) is None:
            app.state.providers = build_providers(settings)
        yield

    app = FastAPI(title="Fitness Planner AI", lifespan=lifespan)
    app.state.providers = providers
    app.include_router(planner_router, prefix="/api")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:3001",
            settings.frontend_url,
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PlannerError)
    async def planner_error_handler(request: Request, exc: PlannerError):
        if exc.status_code < 500:
            logger.info("Rejected %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.body())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fitplanner.main:app", host="0.0.0.0", port=8000, reload=True)
