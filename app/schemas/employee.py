from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import PydanticCustomError

from app.core.validators import (
    NOT_AN_OBJECT,
    REQUIRED_FIELDS,
    strip_whitespace,
    validate_employee_payload,
)


class EmployeeBase(BaseModel):
    name: str
    email: str
    position: str


class EmployeeWrite(EmployeeBase):
    """POST /api/employees, PUT /api/employees/{id} 요청 바디

    검증 규칙은 validate_employee_payload 순서 그대로 적용하고,
    통과하면 앞뒤 공백을 제거한 값으로 만든다.
    """

    @model_validator(mode="before")
    @classmethod
    def check_payload(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise PydanticCustomError("employee_payload", NOT_AN_OBJECT)

        error = validate_employee_payload(data)
        if error:
            raise PydanticCustomError("employee_payload", error)

        return {field: strip_whitespace(data[field]) for field in REQUIRED_FIELDS}


class Employee(EmployeeBase):
    """응답용 스키마"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class DeleteResult(BaseModel):
    message: str
