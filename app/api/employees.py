from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.exceptions import EmployeeNotFoundError
from app.schemas.employee import (
    DeleteResult,
    Employee as EmployeeSchema,
    EmployeeWrite,
)
from app.services.employee_store import EmployeeStore

MAX_EMPLOYEE_ID = 2**63 - 1

router = APIRouter(
    prefix="/api/employees",
    tags=["employees"],
)


def get_store(db: AsyncSession = Depends(get_db)) -> EmployeeStore:
    return EmployeeStore(db)


def parse_employee_id(employee_id: str) -> int:
    # 숫자가 아닌 id(또는 64bit 범위 밖)는 존재하지 않는 id와 동일하게 처리
    if not (employee_id.isascii() and employee_id.isdigit()):
        raise EmployeeNotFoundError()
    value = int(employee_id)
    if value > MAX_EMPLOYEE_ID:
        raise EmployeeNotFoundError()
    return value


# 끝에 / 가 붙은 경로도 같은 핸들러로 처리 (/api/employees/, /api/employees/1/)
@router.get(
    "",
    response_model=List[EmployeeSchema],
)
@router.get("/", response_model=List[EmployeeSchema], include_in_schema=False)
async def list_employees(
    search: Optional[str] = None,
    store: EmployeeStore = Depends(get_store),
):
    """
    전체 목록 (최근 생성 순).
    search가 있으면 name/email/position 중 하나라도 부분 일치(대소문자 구분)하는 것만.
    """
    return await store.list(search)


@router.get(
    "/{employee_id}",
    response_model=EmployeeSchema,
)
@router.get("/{employee_id}/", response_model=EmployeeSchema, include_in_schema=False)
async def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
):
    return await store.get(parse_employee_id(employee_id))


@router.post(
    "",
    response_model=EmployeeSchema,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/",
    response_model=EmployeeSchema,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_employee(
    payload: EmployeeWrite,
    store: EmployeeStore = Depends(get_store),
):
    return await store.create(payload)


@router.put(
    "/{employee_id}",
    response_model=EmployeeSchema,
)
@router.put("/{employee_id}/", response_model=EmployeeSchema, include_in_schema=False)
async def update_employee(
    employee_id: str,
    payload: EmployeeWrite,
    store: EmployeeStore = Depends(get_store),
):
    return await store.update(parse_employee_id(employee_id), payload)


@router.delete(
    "/{employee_id}",
    response_model=DeleteResult,
)
@router.delete("/{employee_id}/", response_model=DeleteResult, include_in_schema=False)
async def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
):
    await store.delete(parse_employee_id(employee_id))
    return DeleteResult(message="Employee deleted successfully")
