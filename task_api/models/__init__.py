from .task import Task, TaskData

__all__ = ["Task", "TaskData"]
