"""
测试建表脚本
"""
from sqlalchemy import inspect

from app.db import init_db
from app.db.base import Database


def create_tables_is_repeatable_test():
    database = Database("sqlite://")
    try:
        init_db.create_tables(database)
        init_db.create_tables(database)

        tables = set(inspect(database.engine).get_table_names())
        assert {"users", "mobiles", "accessories", "services", "categories", "products"} <= tables
    finally:
        database.dispose()


def only_table_creation_is_exposed_test():
    """建表脚本不提供清空数据库的操作"""
    assert not hasattr(init_db, "reset_db")
