from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    获取数据库会话的依赖函数

    用于FastAPI依赖注入系统，会话工厂来自应用启动时创建的Database对象
    """
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
