"""任务 CRUD API"""

from typing import Any, List

from fastapi import APIRouter, Depends, Request, Response

from ..models.task import Task
from ..services.task_service import TaskService

router = APIRouter(prefix="/tasks")


def get_task_service(request: Request) -> TaskService:
    """从应用状态中获取启动时创建的任务服务"""
    return request.app.state.task_service


async def _read_payload(request: Request) -> Any:
    """
    读取原始 JSON 请求体，不做任何类型约束

    Content-Type 不是 application/json、空请求体或非法 JSON 时返回 None
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        return None
    try:
        return await request.json()
    except ValueError:
        return None


@router.get(
    "",
    response_model=List[Task],
    summary="查询任务列表",
    description="返回全部任务，可按完成状态过滤"
)
async def list_tasks(request: Request, service: TaskService = Depends(get_task_service)):
    """
    查询任务列表

    - **completed**: 可选；不传时返回全部任务，仅单个 'true' 视为已完成
    """
    # 同名参数可能出现多次，需要保留全部取值
    completed = request.query_params.getlist("completed")
    return service.list_tasks(completed or None)


@router.post(
    "",
    response_model=Task,
    status_code=201,
    summary="创建任务",
    description="创建任务，ID 由服务分配"
)
async def create_task(request: Request, service: TaskService = Depends(get_task_service)):
    """
    创建任务

    - **title**: 非空字符串
    - **description**: 非空字符串
    - **completed**: 布尔值
    """
    payload = await _read_payload(request)
    return service.create_task(payload)


@router.get("/{task_id}", response_model=Task, summary="查询任务")
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """根据 ID 查询任务"""
    return service.get_task(task_id)


@router.put("/{task_id}", response_model=Task, summary="更新任务")
async def update_task(
    task_id: str,
    request: Request,
    service: TaskService = Depends(get_task_service),
):
    """
    整体替换任务内容（非部分更新）

    - **task_id**: 任务 ID
    - 请求体字段要求与创建任务相同
    """
    payload = await _read_payload(request)
    return service.update_task(task_id, payload)


@router.delete("/{task_id}", summary="删除任务")
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """删除任务，成功时返回空响应体"""
    service.delete_task(task_id)
    return Response(status_code=200)
