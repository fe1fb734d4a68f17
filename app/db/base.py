import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

# 创建基本模型类
Base = declarative_base()


def get_utc_datetime() -> datetime:
    """获取当前UTC时间（不带时区信息，直接写入数据库）"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_db_engine(database_uri: str, **kwargs) -> Engine:
    """
    创建数据库引擎

    MySQL等服务端数据库使用连接池参数；SQLite不支持这些参数，直接创建。
    """
    url = make_url(database_uri)
    if url.get_backend_name() == "sqlite":
        return create_engine(database_uri, **kwargs)

    return create_engine(
        database_uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=False,
        **kwargs
    )


class Database:
    """
    数据库连接的生命周期对象

    在应用启动时创建，关闭时释放，请求通过依赖注入获取会话。
    """

    def __init__(self, database_uri: str, engine: Engine = None):
        self.database_uri = database_uri
        self.engine = engine or create_db_engine(database_uri)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self, create_tables: bool = True) -> None:
        """
        初始化数据库，如果表不存在则创建
        """
        if not create_tables:
            logger.info("自动创建表功能已禁用")
            return

        url = make_url(self.database_uri)
        if url.get_backend_name() == "mysql" and url.database:
            self._ensure_mysql_database(url)

        # 导入模型，保证所有表都注册到Base.metadata上
        from app.models import shop  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("所有表已创建或已存在")

    @staticmethod
    def _ensure_mysql_database(url) -> None:
        # 不指定数据库连接到服务器，检查数据库是否存在
        temp_engine = create_engine(url.set(database=None))
        try:
            with temp_engine.connect() as connection:
                result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": url.database})
                if not result.fetchone():
                    connection.execute(text(
                        f"CREATE DATABASE `{url.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
                    ))
                    logger.info(f"数据库 {url.database} 已创建")
        finally:
            temp_engine.dispose()

    def dispose(self) -> None:
        self.engine.dispose()
