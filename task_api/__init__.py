"""Task API - 基于 JSON 文档的任务 CRUD 服务"""

__version__ = "1.0.0"
