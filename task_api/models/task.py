from pydantic import BaseModel, Field


class TaskData(BaseModel):
    """任务可变字段（已通过校验）"""
    title: str = Field(..., description="任务标题")
    description: str = Field(..., description="任务描述")
    completed: bool = Field(..., description="是否已完成")


class Task(BaseModel):
    """任务模型"""
    id: int = Field(..., gt=0, description="任务ID（由服务分配）")
    title: str = Field(..., description="任务标题")
    description: str = Field(..., description="任务描述")
    completed: bool = Field(..., description="是否已完成")

    @classmethod
    def from_data(cls, task_id: int, data: TaskData) -> "Task":
        """使用指定 ID 和校验后的字段构造完整任务"""
        return cls(id=task_id, **data.model_dump())
