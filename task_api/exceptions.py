"""Task API 自定义异常"""


class TaskApiError(Exception):
    """任务服务基础异常"""
    pass


class TaskValidationError(TaskApiError):
    """任务数据校验失败"""
    pass


class TaskNotFoundError(TaskApiError):
    """任务不存在"""

    def __init__(self, task_id):
        super().__init__(f"任务不存在: {task_id}")
        self.task_id = task_id


class TaskDocumentError(TaskApiError):
    """任务 JSON 文档读写错误"""
    pass
