# csv2table/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from csv2table.config import get_settings
from csv2table.routes import router as api_router


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.title)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def root():
        return {"message": f"Welcome to {settings.title}", "docs": "/docs"}

    return app


app = create_app()
