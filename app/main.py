import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.employees import router as employees_router
from app.core.config import get_settings
from app.core.db import close_db, init_db
from app.core.exceptions import error_response, register_exception_handlers

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Employee Service",
    version="0.1.0",
    description="Employee record CRUD service (REST + SQLite + SQLAlchemy)",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup() -> None:
    # employees 테이블 생성 + 저장소 핸들을 app.state.db 에 보관
    logger.info("Starting %s", settings.SERVICE_NAME)
    await init_db(app, get_settings())


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await close_db(app)


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
    }


@app.get("/")
async def root():
    return {
        "message": "Employee Service is running",
        "docs": "/docs",
    }


app.include_router(employees_router)


# 위 라우터에 걸리지 않은 /api/* 요청
@app.api_route(
    "/api/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
    include_in_schema=False,
)
async def api_not_found(path: str):
    return error_response(404, "API endpoint not found")
