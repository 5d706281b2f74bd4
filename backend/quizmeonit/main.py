"""QuizMeOnIt - FastAPI Application."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizmeonit import __version__
from quizmeonit.config import settings
from quizmeonit.errors import QuizMeError
from quizmeonit.routers import chat_router, quiz_router, topics_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Generate quizzes on any topic with Gemini",
        version=__version__,
    )

    # CORS middleware for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(QuizMeError)
    async def quizme_error_handler(request: Request, exc: QuizMeError):
        return JSONResponse(jsonable_encoder(exc.to_body()), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected request body for {request.url.path}: {exc.errors()}")
        return JSONResponse(
            {"error": "Invalid request body.", "details": jsonable_encoder(exc.errors())},
            status_code=400,
        )

    app.include_router(quiz_router)
    app.include_router(topics_router)
    app.include_router(chat_router)

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "model": settings.gemini_model,
            "endpoints": [
                "/api/generate-quiz",
                "/api/get-random-topic",
                "/api/chat-explanation",
            ],
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
