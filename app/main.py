from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import sys
import traceback
from typing import Callable

from app.api.v1.api import api_router
from app.core.config import settings
from app.core.exceptions import AppError
from app.db.base import Database
from app.infrastructure.response import standard_response, error_response, app_error_response
from app.infrastructure.storage.object_storage import StorageFactory
from app.infrastructure.validation import first_error

# 降低watchfiles日志级别，避免频繁输出
logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=VERSION,
    description="手机店后台管理API：顾客、手机、配件、维修、分类和商品"
)

# 配置CORS - 重要: 必须在其他中间件之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """应用异常统一转换为错误响应，状态码由异常类型决定"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} 失败: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return JSONResponse(content=app_error_response(exc), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体校验失败时按字段顺序取第一个错误，转换为应用校验异常"""
    return await app_error_handler(request, first_error(exc.errors()))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """未匹配路由、不支持的方法等框架错误也使用统一响应格式"""
    return JSONResponse(
        content=error_response(message=str(exc.detail), error="HTTPError"),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# 兜底中间件：未被识别的异常返回500和原始错误信息
@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next: Callable) -> Response:
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(f"请求处理错误: {request.method} {request.url.path}: {str(e)}")
        logger.error(traceback.format_exc())
        return JSONResponse(
            content=error_response(message=str(e), error="InternalError"),
            status_code=500
        )


# 包含API路由
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
async def startup_clients():
    """
    应用启动时初始化数据库和对象存储
    """
    logger.info("正在初始化数据库...")
    app.state.database = Database(settings.SQLALCHEMY_DATABASE_URI)
    try:
        app.state.database.init_db(create_tables=settings.CREATE_TABLES)
        logger.info("数据库初始化成功")
    except Exception as e:
        logger.error(f"数据库初始化失败: {str(e)}")
        logger.error(traceback.format_exc())
        logger.warning("应用将继续启动，但数据库功能可能不可用")

    # 初始化MinIO存储桶
    app.state.object_storage = StorageFactory.get_default_storage()
    try:
        logger.info("初始化MinIO存储...")
        app.state.object_storage.initialize()
        logger.info("MinIO初始化完成")
    except Exception as e:
        logger.error(f"MinIO初始化失败: {str(e)}")


@app.on_event("shutdown")
async def shutdown_clients():
    database = getattr(app.state, "database", None)
    if database is not None:
        database.dispose()
        logger.info("数据库连接已释放")


@app.get("/")
async def root():
    """健康检查接口"""
    return standard_response(
        data={
            "status": "online",
            "version": VERSION
        },
        message=f"{settings.PROJECT_NAME} API服务正在运行"
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
