"""Модели ответа API Практикума и состояние опроса"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictStr,
    ValidationError,
    field_validator,
)

from .exceptions import SchemaError

NO_NEW_STATUSES = "Нет новых статусов работ."


class HomeworkStatus(str, Enum):
    """Статусы проверки домашней работы"""

    APPROVED = "approved"
    REVIEWING = "reviewing"
    REJECTED = "rejected"


class HomeworkRecord(BaseModel):
    """Домашняя работа из ответа API"""

    model_config = ConfigDict(frozen=True)

    homework_name: StrictStr
    status: StrictStr
    reviewer_comment: str = ""
    lesson_name: str = ""

    @field_validator("reviewer_comment", "lesson_name", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str:
        # Необязательные поля не валят разбор ответа
        return value if isinstance(value, str) else ""


class ApiResponse(BaseModel):
    """Ответ эндпоинта homework_statuses"""

    model_config = ConfigDict(frozen=True)

    homeworks: List[HomeworkRecord]
    current_date: Optional[int] = None

    @field_validator("current_date", mode="before")
    @classmethod
    def _truncate_timestamp(cls, value: Any) -> Any:
        # API отдает current_date как JSON-число, дробная часть отбрасывается
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return value


@dataclass
class PollState:
    """Состояние фонового опроса: курсор времени и последнее сообщение"""

    from_date: int
    last_message: Optional[str] = None


_SCHEMA_REASONS = {
    "missing": "отсутствует",
    "list_type": "не является списком",
    "model_type": "не является словарем",
    "string_type": "не является строкой",
    "int_type": "не является числом",
    "int_parsing": "не является числом",
    "int_from_float": "не является целым числом",
}


def check_response(payload: Any) -> ApiResponse:
    """Проверка ответа API и преобразование в модели

    Бросает SchemaError с первым неверным полем.
    """
    try:
        return ApiResponse.model_validate(payload)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "<root>"
        reason = _SCHEMA_REASONS.get(error["type"], error["msg"])
        raise SchemaError(field, reason) from e
