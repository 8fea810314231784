from .task_service import TaskService
from .validator import parse_task_id, validate_task_data

__all__ = ["TaskService", "parse_task_id", "validate_task_data"]
