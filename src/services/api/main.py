"""
FastAPI 应用入口

功能：
1. 路由注册（统一前缀 /api/v1）
2. 中间件配置（CORS、Trace ID、请求耗时）
3. 领域异常 → HTTP 状态码（上游失败 502，未找到 404）
4. 健康检查
"""
import time
import uuid
import logging
from contextvars import ContextVar

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.infra.db.session import dispose_engine
from src.services.api.routers import competitions, transfers
from src.shared.config import get_settings
from src.shared.exceptions import NotFoundError, UpstreamError

settings = get_settings()

logging.basicConfig(
    level=settings.service.api.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# 上下文变量：存储 request_id，可在整个请求链路中访问
request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """获取当前请求的 Trace ID"""
    return request_id_ctx.get()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="InFootball API: competiciones, clasificaciones y fichajes",
    docs_url="/docs" if settings.service.api.enable_docs else None,
    redoc_url="/redoc" if settings.service.api.enable_docs else None,
)


# ============ 中间件 ============

@app.middleware("http")
async def trace_id_middleware(request: Request, call_next) -> Response:
    """
    Trace ID 中间件

    功能：
    1. 为每个请求生成唯一的 request_id（或沿用客户端提供的 X-Request-ID）
    2. 在响应头中返回 X-Request-ID 与 X-Process-Time-Ms
    3. 记录请求耗时
    """
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    token = request_id_ctx.set(request_id)
    start_time = time.time()

    try:
        logger.info(f"[{request_id}] Request started: {request.method} {request.url.path}")

        response = await call_next(request)

        duration_ms = int((time.time() - start_time) * 1000)
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time-Ms"] = str(duration_ms)

        logger.info(f"[{request_id}] Request completed: {response.status_code} in {duration_ms}ms")
        return response

    except Exception as e:
        duration_ms = int((time.time() - start_time) * 1000)
        logger.error(f"[{request_id}] Request failed: {str(e)} in {duration_ms}ms", exc_info=True)
        raise

    finally:
        request_id_ctx.reset(token)


# 跨域配置（前端默认 http://localhost:3000）
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.service.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ 异常处理 ============

@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.warning(f"[{get_request_id()}] Upstream failure (status={exc.status_code}) on {request.url.path}")
    return JSONResponse(status_code=502, content={"detail": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


# ============ 路由 ============

app.include_router(competitions.router, prefix=settings.service.api.prefix)
app.include_router(transfers.router, prefix=settings.service.api.prefix)


# ============ 健康检查 ============

@app.get("/health")
async def health_check():
    """健康检查端点"""
    return {
        "status": "ok",
        "version": settings.app_version,
        "service": "infootball-api"
    }


@app.get("/ready")
async def readiness_check():
    """就绪检查端点"""
    return {
        "status": "ready",
        "version": settings.app_version,
        "checks": {
            "api": "ok",
            "api_football_key": "configured" if settings.api_football_key else "missing",
        }
    }


# ============ 启动事件 ============

@app.on_event("startup")
async def startup_event():
    """应用启动时的初始化"""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    if not settings.api_football_key:
        logger.warning("API_FOOTBALL_KEY not set, upstream requests will be rejected")


@app.on_event("shutdown")
async def shutdown_event():
    """应用关闭时的清理"""
    await dispose_engine()
    logger.info(f"Shutting down {settings.app_name}")


# ============ 直接运行 ============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.service.api.host,
        port=settings.service.api.port
    )
