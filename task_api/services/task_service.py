import logging
from typing import Any, List, Optional

from ..exceptions import TaskNotFoundError, TaskValidationError
from ..models.task import Task
from ..storage.task_store import TaskStore
from .validator import parse_task_id, validate_task_data

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    def create_task(self, payload: Any) -> Task:
        """校验请求体并创建任务"""
        data = validate_task_data(payload)
        if data is None:
            logger.info("创建任务失败: 请求数据不合法")
            raise TaskValidationError("任务数据不合法")

        task = self.store.append(data)
        logger.info(f"任务已创建: {task.id}")
        return task

    def list_tasks(self, completed: Optional[List[str]] = None) -> List[Task]:
        """
        查询任务列表

        - completed 为查询参数 completed 的全部取值，None 时返回全部任务
        - 仅有唯一取值 "true" 时视为已完成，其余任何情况均视为未完成
        """
        tasks = self.store.list_all()
        if completed is None:
            return tasks

        is_completed = completed == ["true"]
        return [task for task in tasks if task.completed is is_completed]

    def get_task(self, raw_id: str) -> Task:
        task_id = parse_task_id(raw_id)
        task = self.store.get(task_id)
        if task is None:
            logger.info(f"任务不存在: {raw_id}")
            raise TaskNotFoundError(raw_id)
        return task

    def update_task(self, raw_id: str, payload: Any) -> Task:
        """整体替换任务的可变字段，ID 保持不变"""
        task_id = parse_task_id(raw_id)
        if self.store.find_index(task_id) == -1:
            logger.info(f"更新失败，任务不存在: {raw_id}")
            raise TaskNotFoundError(raw_id)

        data = validate_task_data(payload)
        if data is None:
            logger.info(f"更新失败，请求数据不合法: {task_id}")
            raise TaskValidationError("任务数据不合法")

        task = self.store.replace(task_id, data)
        if task is None:
            # 校验期间已被删除
            raise TaskNotFoundError(raw_id)

        logger.info(f"任务已更新: {task_id}")
        return task

    def delete_task(self, raw_id: str) -> None:
        task_id = parse_task_id(raw_id)
        if not self.store.remove(task_id):
            logger.info(f"删除失败，任务不存在: {raw_id}")
            raise TaskNotFoundError(raw_id)
        logger.info(f"任务已删除: {task_id}")
