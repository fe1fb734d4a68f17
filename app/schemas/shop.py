"""
请求数据模型

每个资源一个 Base 模型声明字段，字段声明顺序即校验顺序；
Create 模型补充创建时的默认值，Update 模型只在校验后保留客户端提交的字段。
"""
from typing import ClassVar, Dict, Optional, Type

from app.infrastructure.validation import Amount, Count, PhoneNumber, RecordRef, RequestModel, Text, Timestamp
from app.models.enums import AccessoryType, Brand, ItemStatus, ServiceType, ShopEnum


class UserBase(RequestModel):
    """顾客请求模型，头像以文件形式单独上传"""
    name: Text
    contact_number: PhoneNumber
    email: Optional[Text] = None
    place: Optional[Text] = None


class UserCreate(UserBase):
    pass


class UserUpdate(UserBase):
    pass


class MobileBase(RequestModel):
    """手机库存请求模型，图片以 photos 文件字段单独上传"""
    choices: ClassVar[Dict[str, Type[ShopEnum]]] = {"brand": Brand, "status": ItemStatus}

    model_name: Text
    purchase_price: Amount
    brand: Optional[Text] = None
    status: Optional[Text] = None
    selling_price: Optional[Amount] = None
    imei: Optional[Text] = None
    country: Optional[Text] = None
    color: Optional[Text] = None
    variant: Optional[Text] = None
    battery: Optional[Text] = None
    notes: Optional[Text] = None
    warranty: Optional[Text] = None
    purchase_date: Optional[Timestamp] = None
    selling_date: Optional[Timestamp] = None
    user_id: Optional[RecordRef] = None


class MobileCreate(MobileBase):
    pass


class MobileUpdate(MobileBase):
    pass


class AccessoryBase(RequestModel):
    choices: ClassVar[Dict[str, Type[ShopEnum]]] = {"type": AccessoryType, "status": ItemStatus}

    name: Text
    type: Text
    selling_price: Amount
    stock_count: Count
    status: Optional[Text] = None
    brand: Optional[Text] = None
    purchase_price: Optional[Amount] = None
    description: Optional[Text] = None
    sold_count: Optional[Count] = None


class AccessoryCreate(AccessoryBase):
    """创建配件时 status 默认 IN_STOCK，sold_count 默认0"""
    status: Optional[Text] = ItemStatus.IN_STOCK.value
    sold_count: Optional[Count] = 0


class AccessoryUpdate(AccessoryBase):
    pass


class ServiceBase(RequestModel):
    choices: ClassVar[Dict[str, Type[ShopEnum]]] = {"service_type": ServiceType}

    model: Text
    service_type: Optional[Text] = None
    date: Optional[Timestamp] = None
    user_id: Optional[RecordRef] = None
    imei: Optional[Text] = None
    # 费用按自由文本保存，不做数值转换
    service_cost: Optional[Text] = None
    service_charge: Optional[Text] = None
    completed: Optional[bool] = None
    warranty: Optional[Text] = None


class ServiceCreate(ServiceBase):
    completed: Optional[bool] = False


class ServiceUpdate(ServiceBase):
    pass


class CategoryBase(RequestModel):
    name: Text


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


class ProductBase(RequestModel):
    name: Text
    price: Amount
    category_id: RecordRef


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass
