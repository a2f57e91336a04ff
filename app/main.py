import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from app.config import Settings, get_settings
from app.database import create_video_store
from app.exceptions import VideoNotFoundError
from app.routers import testing, videos
from app.services.video_validation import error_messages

logger = logging.getLogger(__name__)


async def video_not_found_handler(request: Request, exc: VideoNotFoundError):
    return Response(status_code=404)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = error_messages(exc.errors())
    logger.info("%s %s rejected: %s", request.method, request.url.path, ", ".join(e["field"] for e in errors))
    return JSONResponse(status_code=400, content={"errorsMessages": errors})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title=settings.app_title, version=settings.app_version)
    app.state.videos = create_video_store(settings)
    logger.info("Video store ready (%d videos)", len(app.state.videos))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.cors_allow_all else [settings.frontend_url],
        allow_credentials=not settings.cors_allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(VideoNotFoundError, video_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(videos.router)
    app.include_router(testing.router)

    @app.get("/")
    def root():
        return {"message": settings.app_title, "docs": "/docs"}

    return app


app = create_app()
