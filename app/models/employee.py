from sqlalchemy import BigInteger, Column, DateTime, Integer, String, func

from app.core.db import Base


class Employee(Base):
    __tablename__ = "employees"
    # 삭제된 id 재사용 방지 (SQLite AUTOINCREMENT)
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    position = Column(String(100), nullable=False)
    created_at = Column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )
