import json
import logging
import os
import threading
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..exceptions import TaskDocumentError
from ..models.task import Task, TaskData

logger = logging.getLogger(__name__)


class TaskStore:
    """任务存储（内存有序列表，启动时从 JSON 文档加载）"""

    def __init__(self, path: Optional[str] = None, persist: bool = False):
        self.path = Path(path) if path else None
        self.persist = persist
        self._tasks: List[Task] = []
        # 已分配的最大 ID，删除后不回退
        self._last_id = 0
        self._lock = threading.Lock()

    def load(self) -> None:
        """
        从 JSON 文档加载任务

        文档格式: {"tasks": [{"id": 1, "title": ..., "description": ..., "completed": ...}]}

        Raises:
            TaskDocumentError: 文档无法解析或内容不合法
        """
        if self.path is None or not self.path.exists():
            logger.warning(f"任务文档不存在，使用空列表: {self.path}")
            tasks: List[Task] = []
        else:
            tasks = self._read_document(self.path)

        with self._lock:
            self._tasks = tasks
            self._last_id = max((task.id for task in tasks), default=0)

        logger.info(f"已加载任务: {len(tasks)} 条, 来源: {self.path}")

    def list_all(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def find_index(self, task_id: Optional[int]) -> int:
        """返回第一个匹配任务的位置，未找到返回 -1"""
        with self._lock:
            return self._find_index(task_id)

    def get(self, task_id: Optional[int]) -> Optional[Task]:
        with self._lock:
            index = self._find_index(task_id)
            return self._tasks[index] if index != -1 else None

    def append(self, data: TaskData) -> Task:
        """分配新 ID 并追加任务"""
        with self._lock:
            task = Task.from_data(self._last_id + 1, data)
            self._commit(self._tasks + [task], task.id)
            return task

    def replace(self, task_id: int, data: TaskData) -> Optional[Task]:
        """整体替换指定 ID 的任务，未找到返回 None"""
        with self._lock:
            index = self._find_index(task_id)
            if index == -1:
                return None
            task = Task.from_data(task_id, data)
            tasks = list(self._tasks)
            tasks[index] = task
            self._commit(tasks, self._last_id)
            return task

    def remove(self, task_id: Optional[int]) -> bool:
        """删除第一个匹配的任务"""
        with self._lock:
            index = self._find_index(task_id)
            if index == -1:
                return False
            tasks = list(self._tasks)
            del tasks[index]
            self._commit(tasks, self._last_id)
            return True

    def _find_index(self, task_id: Optional[int]) -> int:
        if task_id is None:
            return -1
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return -1

    def _commit(self, tasks: List[Task], last_id: int) -> None:
        """写回成功（或未开启写回）后才替换内存状态"""
        if self.persist:
            self._write_document(tasks)
        self._tasks = tasks
        self._last_id = last_id

    def _read_document(self, path: Path) -> List[Task]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            raise TaskDocumentError(f"任务文档读取失败: {path}, 错误: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get("tasks"), list):
            raise TaskDocumentError(f"任务文档缺少 tasks 列表: {path}")

        tasks: List[Task] = []
        seen = set()
        for record in document["tasks"]:
            try:
                task = Task.model_validate(record, strict=True)
            except ValidationError as e:
                raise TaskDocumentError(f"任务记录不合法: {record}, 错误: {e}") from e
            if task.id in seen:
                raise TaskDocumentError(f"任务 ID 重复: {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def _write_document(self, tasks: List[Task]) -> None:
        if self.path is None:
            raise TaskDocumentError("未配置任务文档路径，无法写回")

        document = {"tasks": [task.model_dump() for task in tasks]}
        tmp_path = self.path.with_name(self.path.name + ".tmp")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise TaskDocumentError(f"任务文档写入失败: {self.path}, 错误: {e}") from e

        logger.info(f"任务文档已写回: {self.path}, 共 {len(tasks)} 条")
