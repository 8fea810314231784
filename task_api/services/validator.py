"""任务数据校验"""

import re
from typing import Any, Optional

from ..models.task import TaskData


# 可选符号后跟前导数字，其后的字符忽略；0x/0X 前缀按十六进制解析
_LEADING_HEX = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]*)")
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _is_non_blank_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_task_data(payload: Any) -> Optional[TaskData]:
    """
    校验请求体中的任务字段（不做类型转换）

    Args:
        payload: JSON 解码后的原始请求体，类型未知

    Returns:
        校验通过返回 TaskData，否则返回 None（不区分具体字段）
    """
    if not isinstance(payload, dict):
        return None

    title = payload.get("title")
    description = payload.get("description")
    completed = payload.get("completed")

    if not _is_non_blank_str(title) or not _is_non_blank_str(description):
        return None
    if not isinstance(completed, bool):
        return None

    return TaskData(title=title, description=description, completed=completed)


def parse_task_id(raw: str) -> Optional[int]:
    """
    解析路径中的任务 ID

    解析前导整数部分（"12abc" -> 12，"0x1f" -> 31），无前导数字时返回 None
    """
    text = raw.lstrip()

    hex_match = _LEADING_HEX.match(text)
    if hex_match is not None:
        sign, digits = hex_match.groups()
        if not digits:
            return None
        value = int(digits, 16)
        return -value if sign == "-" else value

    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(0))
