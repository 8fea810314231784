#!/usr/bin/env python3
"""
启动 Task API 服务
任务数据保存在进程内存中，只能使用单个 worker
"""
import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    import uvicorn
    from task_api.config import settings

    print("=" * 50)
    print("🚀 启动 Task API")
    print("=" * 50)
    print(f"Host: {settings.host}")
    print(f"Port: {settings.port}")
    print(f"Data file: {settings.data_file}")
    print(f"Persist changes: {settings.persist_changes}")
    print("注意: 多 worker 会导致各进程任务数据不一致")
    print("=" * 50)

    uvicorn.run(
        "task_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower()
    )
