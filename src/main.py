# src/main.py
import logging
import time
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import auth, todos
from src.core.config import settings
from src.core.exceptions import TodoAppError
from src.db.database import Base, engine

# Setup basic logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Todo API",
    description="Multi-user todo list service with JWT authentication.",
    version=settings.API_VERSION,
)


@app.on_event("startup")
def on_startup() -> None:
    # This creates the database tables if they don't exist
    Base.metadata.create_all(bind=engine)
    logger.info(f"Todo API {settings.API_VERSION} started ({settings.ENVIRONMENT}).")


# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

if settings.ENVIRONMENT == "development":
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response


# --- Error envelopes ---
def _error_response(status_code: int, message: str, headers: Dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


@app.exception_handler(TodoAppError)
async def todo_app_error_handler(request: Request, exc: TodoAppError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message, exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        # Drop the leading "body"/"path"/"query" segment.
        location = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        messages.append(f"{location}: {error['msg']}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request. " + "; ".join(messages))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"Not found - {request.url.path}"
    else:
        message = str(exc.detail)
    return _error_response(exc.status_code, message, getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error.")


# --- API Routers ---
@app.get(settings.API_PREFIX, tags=["Root"])
async def read_root() -> Dict[str, Any]:
    return {"success": True, "message": "API is running", "version": settings.API_VERSION}


app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/auth")
app.include_router(todos.router, prefix=f"{settings.API_PREFIX}/todos")
