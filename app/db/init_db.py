import logging

from app.core.config import settings
from app.db.base import Database


# 创建所有表
def create_tables(database: Database) -> None:
    database.init_db(create_tables=True)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db = Database(settings.SQLALCHEMY_DATABASE_URI)
    create_tables(db)
    db.dispose()
    logging.info("数据库表已创建")
