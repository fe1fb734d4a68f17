from typing import Dict, Any

from sqlalchemy import Column, JSON, BigInteger, Boolean, DateTime, Float, ForeignKey, \
    Integer, String, TEXT, VARCHAR
from sqlalchemy.orm import relationship

from app.db.base import Base, get_utc_datetime
from app.models.enums import ItemStatus
from app.utils.time_utils import format_timestamp


class TimestampMixin:
    created_at = Column(DateTime, default=get_utc_datetime, nullable=False, index=True)
    updated_at = Column(DateTime, default=get_utc_datetime, onupdate=get_utc_datetime, nullable=False)

    def _timestamps(self) -> Dict[str, Any]:
        return {
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }


class User(TimestampMixin, Base):
    """
    顾客数据库模型

    contact_number 全局唯一，被手机和维修记录弱引用（删除时不级联）
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False)
    contact_number = Column(BigInteger, nullable=False, unique=True)
    email = Column(VARCHAR(255), nullable=True)
    place = Column(VARCHAR(255), nullable=True)
    profile_photo = Column(TEXT, nullable=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            # 大整数以字符串返回，避免前端精度丢失
            "contact_number": str(self.contact_number) if self.contact_number is not None else None,
            "email": self.email,
            "place": self.place,
            "profile_photo": self.profile_photo,
            **self._timestamps(),
        }


class Mobile(TimestampMixin, Base):
    """
    手机库存数据库模型
    """
    __tablename__ = "mobiles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    model_name = Column(VARCHAR(255), nullable=False)
    brand = Column(VARCHAR(32), nullable=True)
    purchase_price = Column(Float, nullable=False)
    selling_price = Column(Float, nullable=True)
    imei = Column(VARCHAR(64), nullable=True)
    country = Column(VARCHAR(128), nullable=True)
    color = Column(VARCHAR(64), nullable=True)
    variant = Column(VARCHAR(128), nullable=True)
    battery = Column(VARCHAR(64), nullable=True)
    notes = Column(TEXT, nullable=True)
    warranty = Column(VARCHAR(255), nullable=True)
    photos = Column(JSON, nullable=True)  # 图片URL列表，保持上传顺序
    status = Column(VARCHAR(32), nullable=True)
    purchase_date = Column(DateTime, nullable=True)
    selling_date = Column(DateTime, nullable=True)
    user_id = Column(Integer, nullable=True, index=True)  # 弱引用 users.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "model_name": self.model_name,
            "brand": self.brand,
            "purchase_price": self.purchase_price,
            "selling_price": self.selling_price,
            "imei": self.imei,
            "country": self.country,
            "color": self.color,
            "variant": self.variant,
            "battery": self.battery,
            "notes": self.notes,
            "warranty": self.warranty,
            "photos": self.photos,
            "status": self.status,
            "purchase_date": format_timestamp(self.purchase_date),
            "selling_date": format_timestamp(self.selling_date),
            "user_id": self.user_id,
            **self._timestamps(),
        }


class Accessory(TimestampMixin, Base):
    """
    配件库存数据库模型
    """
    __tablename__ = "accessories"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False, unique=True)
    brand = Column(VARCHAR(255), nullable=True)
    type = Column(VARCHAR(32), nullable=False)
    purchase_price = Column(Float, nullable=True)
    selling_price = Column(Float, nullable=False)
    description = Column(TEXT, nullable=True)
    stock_count = Column(Integer, nullable=False, default=0)
    sold_count = Column(Integer, nullable=False, default=0)
    status = Column(VARCHAR(32), nullable=False, default=ItemStatus.IN_STOCK.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "type": self.type,
            "purchase_price": self.purchase_price,
            "selling_price": self.selling_price,
            "description": self.description,
            "stock_count": self.stock_count,
            "sold_count": self.sold_count,
            "status": self.status,
            **self._timestamps(),
        }


class Service(TimestampMixin, Base):
    """
    维修服务数据库模型

    service_cost / service_charge 按自由文本保存
    """
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    model = Column(VARCHAR(255), nullable=False)
    imei = Column(VARCHAR(64), nullable=True)
    service_type = Column(VARCHAR(32), nullable=True)
    service_cost = Column(VARCHAR(255), nullable=True)
    service_charge = Column(VARCHAR(255), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    date = Column(DateTime, nullable=True)
    warranty = Column(VARCHAR(255), nullable=True)
    user_id = Column(Integer, nullable=True, index=True)  # 弱引用 users.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "model": self.model,
            "imei": self.imei,
            "service_type": self.service_type,
            "service_cost": self.service_cost,
            "service_charge": self.service_charge,
            "completed": bool(self.completed),
            "date": format_timestamp(self.date),
            "warranty": self.warranty,
            "user_id": self.user_id,
            **self._timestamps(),
        }


class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False, unique=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            **self._timestamps(),
        }


class Product(TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    category = relationship("Category", lazy="joined")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category_id": self.category_id,
            "category": self.category.to_dict() if self.category is not None else None,
            **self._timestamps(),
        }
