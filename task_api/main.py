import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import tasks
from .config import Settings, settings as default_settings
from .exceptions import TaskNotFoundError, TaskValidationError
from .services.task_service import TaskService
from .storage.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        settings: 服务配置，默认使用全局配置

    Returns:
        已加载任务文档的 FastAPI 应用
    """
    settings = settings or default_settings

    # 任务存储在应用创建时加载，由路由依赖注入获取
    store = TaskStore(path=settings.data_file, persist=settings.persist_changes)
    store.load()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 启动时初始化
        logger.info("🚀 Task API 启动")
        logger.info(f"📄 任务文档: {settings.data_file}")
        logger.info(f"📋 任务数量: {len(store.list_all())}")
        logger.info(f"💾 写回文档: {settings.persist_changes}")
        yield
        # 关闭时清理
        logger.info("👋 Task API 关闭")

    app = FastAPI(
        title=settings.app_name,
        description="任务 CRUD 服务，任务数据来自 JSON 文档",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.task_service = TaskService(store)

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 业务错误统一返回空响应体
    @app.exception_handler(TaskValidationError)
    async def handle_validation_error(request: Request, exc: TaskValidationError):
        return Response(status_code=400)

    @app.exception_handler(TaskNotFoundError)
    async def handle_not_found(request: Request, exc: TaskNotFoundError):
        return Response(status_code=404)

    # 路由注册
    app.include_router(tasks.router, tags=["任务管理"])

    @app.get("/", summary="服务信息", tags=["系统"])
    async def root():
        """获取 API 服务信息"""
        return {"message": "Task API is running", "version": __version__}

    @app.get("/health", summary="健康检查", tags=["系统"])
    async def health():
        """检查服务健康状态"""
        return {"status": "healthy"}

    return app


# 配置日志
logging.basicConfig(
    level=default_settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "task_api.main:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
        reload=True,
    )
