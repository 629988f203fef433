import logging
from typing import List, Optional

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateEmailError, EmployeeNotFoundError, StorageError
from app.models.employee import Employee as EmployeeModel
from app.schemas.employee import EmployeeWrite

logger = logging.getLogger(__name__)

employees_table = EmployeeModel.__table__


class EmployeeStore:
    """
    employees 테이블에 대한 조회/생성/수정/삭제.

    모든 쓰기는 SQL 문 하나 + commit 으로 끝난다.
    이메일 중복은 미리 조회하지 않고 UNIQUE 제약 위반(IntegrityError)으로만 판단한다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list(self, search: Optional[str] = None) -> List[EmployeeModel]:
        stmt = select(EmployeeModel)

        if search:
            # 대소문자 구분 부분 문자열 검색 (LIKE는 SQLite에서 대소문자 무시)
            stmt = stmt.where(
                or_(
                    func.instr(EmployeeModel.name, search) > 0,
                    func.instr(EmployeeModel.email, search) > 0,
                    func.instr(EmployeeModel.position, search) > 0,
                )
            )

        stmt = stmt.order_by(EmployeeModel.created_at.desc(), EmployeeModel.id.desc())

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise self._storage_error(exc) from exc
        return list(result.scalars().all())

    async def get(self, employee_id: int) -> EmployeeModel:
        try:
            result = await self.session.execute(
                select(EmployeeModel).where(EmployeeModel.id == employee_id)
            )
        except SQLAlchemyError as exc:
            raise self._storage_error(exc) from exc

        employee = result.scalar_one_or_none()
        if employee is None:
            raise EmployeeNotFoundError()
        return employee

    async def create(self, payload: EmployeeWrite) -> EmployeeModel:
        try:
            result = await self.session.execute(
                insert(employees_table).values(
                    name=payload.name,
                    email=payload.email,
                    position=payload.position,
                )
            )
            await self.session.commit()
        except IntegrityError as exc:
            raise await self._duplicate_email(exc, payload.email) from exc
        except SQLAlchemyError as exc:
            raise await self._rollback_storage_error(exc) from exc

        employee_id = result.inserted_primary_key[0]
        logger.info("Created employee id=%s", employee_id)
        return await self.get(employee_id)

    async def update(self, employee_id: int, payload: EmployeeWrite) -> EmployeeModel:
        try:
            result = await self.session.execute(
                update(employees_table)
                .where(employees_table.c.id == employee_id)
                .values(
                    name=payload.name,
                    email=payload.email,
                    position=payload.position,
                )
            )
            await self.session.commit()
        except IntegrityError as exc:
            raise await self._duplicate_email(exc, payload.email) from exc
        except SQLAlchemyError as exc:
            raise await self._rollback_storage_error(exc) from exc

        if result.rowcount == 0:
            raise EmployeeNotFoundError()

        logger.info("Updated employee id=%s", employee_id)
        # 이전에 읽어둔 객체가 세션에 남아있을 수 있으므로 새로 읽는다
        self.session.expire_all()
        return await self.get(employee_id)

    async def delete(self, employee_id: int) -> None:
        try:
            result = await self.session.execute(
                delete(employees_table).where(employees_table.c.id == employee_id)
            )
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise await self._rollback_storage_error(exc) from exc

        if result.rowcount == 0:
            raise EmployeeNotFoundError()

        logger.info("Deleted employee id=%s", employee_id)

    async def _duplicate_email(self, exc: IntegrityError, email: str) -> DuplicateEmailError:
        await self.session.rollback()
        logger.warning("Email already exists: %s", email)
        return DuplicateEmailError()

    async def _rollback_storage_error(self, exc: SQLAlchemyError) -> StorageError:
        await self.session.rollback()
        return self._storage_error(exc)

    @staticmethod
    def _storage_error(exc: SQLAlchemyError) -> StorageError:
        logger.exception("Storage error")
        orig = getattr(exc, "orig", None)
        return StorageError(str(orig) if orig is not None else str(exc))
