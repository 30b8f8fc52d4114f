import uuid
import time
import json
import logging
from datetime import datetime, timezone
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import QuizError
from app.routers import health, leaderboard, quizzes, sessions
from app.services.catalog import QuizCatalog, default_catalog, load_catalog_file
from app.services.leaderboard import InMemoryLeaderboard
from app.services.quiz_sessions import QuizSessionService
from app.services.session_store import InMemorySessionStore


def _build_catalog() -> QuizCatalog:
    path = (settings.quiz_catalog_path or "").strip()
    if path:
        return load_catalog_file(path)
    return default_catalog()


def build_quiz_service(catalog: QuizCatalog | None = None) -> QuizSessionService:
    if catalog is None:
        catalog = _build_catalog()
    return QuizSessionService(
        catalog=catalog,
        store=InMemorySessionStore(catalog),
        leaderboard=InMemoryLeaderboard(size=int(settings.leaderboard_size)),
    )


def create_app(service: QuizSessionService | None = None) -> FastAPI:
    level = getattr(logging, str(settings.log_level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    app = FastAPI(title="Quiz Arena API", version="1.0.0")

    logger = logging.getLogger("quizarena")

    app.state.quiz_service = service or build_quiz_service()

    allow_origins = [o.strip() for o in str(settings.cors_allow_origins or "").split(",") if o.strip()]
    if "*" in allow_origins:
        raise RuntimeError("CORS_ALLOW_ORIGINS must not include '*' when allow_credentials=true")

    def _parse_csv(value: str) -> list[str]:
        return [x.strip() for x in str(value or "").split(",") if x.strip()]

    allow_methods_raw = str(settings.cors_allow_methods or "*").strip()
    allow_headers_raw = str(settings.cors_allow_headers or "*").strip()
    allow_methods = ["*"] if allow_methods_raw == "*" else _parse_csv(allow_methods_raw)
    allow_headers = ["*"] if allow_headers_raw == "*" else _parse_csv(allow_headers_raw)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        t0 = time.perf_counter()
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = rid
        status_code: int | None = None
        try:
            response = await call_next(request)
            status_code = int(getattr(response, "status_code", 0) or 0)
        except Exception:
            status_code = 500
            raise
        finally:
            path = getattr(getattr(request, "url", None), "path", "")
            if not path.rstrip("/").endswith(("/health", "/health/live")):
                logger.info(
                    json.dumps(
                        {
                            "ts": datetime.now(timezone.utc).isoformat(),
                            "rid": rid,
                            "method": request.method,
                            "path": path,
                            "status": status_code,
                            "duration_ms": int((time.perf_counter() - t0) * 1000),
                        },
                        ensure_ascii=False,
                    )
                )
        response.headers["X-Request-ID"] = rid
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response

    def _request_id(request: Request) -> str | None:
        rid = getattr(getattr(request, "state", None), "request_id", None)
        rid = str(rid or "").strip()
        return rid or None

    @app.exception_handler(QuizError)
    async def quiz_error_handler(request: Request, exc: QuizError):
        return JSONResponse(
            status_code=int(exc.status_code),
            content={
                "ok": False,
                "error_code": exc.error_code,
                "error_message": exc.message,
                "request_id": _request_id(request),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        rid = _request_id(request)
        detail = exc.detail
        if isinstance(detail, dict):
            error_code = str(detail.get("error_code") or "http_error")
            error_message = str(detail.get("error_message") or detail.get("detail") or "request failed")
        else:
            error_code = "not_found" if int(exc.status_code) == 404 else "http_error"
            error_message = str(detail or "request failed")

        payload = {
            "ok": False,
            "error_code": error_code,
            "error_message": error_message,
            "request_id": rid,
        }
        return JSONResponse(status_code=int(exc.status_code), content=payload, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        rid = _request_id(request)
        logger.exception("unhandled exception", extra={"rid": rid})
        return JSONResponse(
            status_code=500,
            content={
                "ok": False,
                "error_code": "internal_error",
                "error_message": "internal server error",
                "request_id": rid,
            },
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=allow_methods,
        allow_headers=allow_headers,
    )

    prefix = str(settings.api_prefix or "").rstrip("/")
    app.include_router(health.router, prefix=prefix)
    app.include_router(quizzes.router, prefix=prefix)
    app.include_router(sessions.router, prefix=prefix)
    app.include_router(leaderboard.router, prefix=prefix)

    logger.info(
        "quiz types available: %s",
        ", ".join(q.id for q in app.state.quiz_service.list_quizzes()),
    )

    return app

app = create_app()
