from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """服务配置（环境变量前缀 TASK_API_）"""

    model_config = SettingsConfigDict(
        env_prefix="TASK_API_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Task API"
    host: str = "0.0.0.0"
    port: int = 3000

    # 启动时加载的任务文档
    data_file: str = "task.json"
    # 每次修改后写回文档
    persist_changes: bool = False

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]


settings = Settings()
