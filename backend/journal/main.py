import logging

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from journal.api.workouts import router as workouts_router
from journal.core.config import settings
from journal.core.logging import configure_logging
from journal.db import Base, engine
from journal.errors import JournalError
from journal.models.workout import Workout  # noqa: F401  (import ensures table is registered)
from journal.views import STATIC_DIR, templates

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Workout Journal")

# Create the workouts table on startup if it is missing
Base.metadata.create_all(bind=engine)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(workouts_router)


def render_error(request: Request, page: int, status_code: int | None = None, message: str | None = None):
    return templates.TemplateResponse(
        request,
        f"{page}.html",
        {"message": message},
        status_code=status_code or page,
    )


@app.exception_handler(JournalError)
async def journal_error_handler(request: Request, exc: JournalError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return render_error(request, exc.status_code, message=str(exc))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return render_error(request, 404)
    page = 500 if exc.status_code >= 500 else 400
    return render_error(request, page, exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # ServerErrorMiddleware re-raises after this response, so the server logs the traceback
    return render_error(request, 500)
