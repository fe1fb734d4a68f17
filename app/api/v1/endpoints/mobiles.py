"""
手机库存API接口模块

创建和更新使用 multipart 表单，最多上传10张图片，文件字段为 photos。
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import JSONResponse

from app.api.dependencies import get_mobile_service, mobile_id_param
from app.api.uploads import read_uploads
from app.infrastructure.validation import parse
from app.schemas.shop import MobileCreate, MobileUpdate
from app.services.core import MobileService

router = APIRouter()


def mobile_form(
        model_name: Optional[str] = Form(None),
        purchase_price: Optional[str] = Form(None),
        brand: Optional[str] = Form(None),
        status: Optional[str] = Form(None),
        selling_price: Optional[str] = Form(None),
        imei: Optional[str] = Form(None),
        country: Optional[str] = Form(None),
        color: Optional[str] = Form(None),
        variant: Optional[str] = Form(None),
        battery: Optional[str] = Form(None),
        notes: Optional[str] = Form(None),
        warranty: Optional[str] = Form(None),
        purchase_date: Optional[str] = Form(None),
        selling_date: Optional[str] = Form(None),
        user_id: Optional[str] = Form(None),
) -> Dict[str, Any]:
    return {
        "model_name": model_name,
        "purchase_price": purchase_price,
        "brand": brand,
        "status": status,
        "selling_price": selling_price,
        "imei": imei,
        "country": country,
        "color": color,
        "variant": variant,
        "battery": battery,
        "notes": notes,
        "warranty": warranty,
        "purchase_date": purchase_date,
        "selling_date": selling_date,
        "user_id": user_id,
    }


@router.post("", status_code=201)
async def create_mobile(
        fields: Dict[str, Any] = Depends(mobile_form),
        photos: Optional[List[UploadFile]] = File(None),
        service: MobileService = Depends(get_mobile_service),
):
    """
    创建手机库存记录

    Args:
        fields: 表单字段，model_name、purchase_price 必填
        photos: 可重复的图片文件字段
        service: 手机服务，通过依赖注入获取

    Returns:
        201 与新建记录；图片URL按上传顺序保存在 photos 中
    """
    payload = parse(MobileCreate, fields)
    files = await read_uploads(photos)
    return JSONResponse(status_code=201, content=await service.create(payload, files))


@router.get("")
async def list_mobiles(
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
        service: MobileService = Depends(get_mobile_service),
):
    return await service.list_records(page, limit, search)


@router.get("/{item_id}")
async def get_mobile(
        mobile_id: int = Depends(mobile_id_param),
        service: MobileService = Depends(get_mobile_service),
):
    return await service.get(mobile_id)


@router.put("/{item_id}")
async def update_mobile(
        mobile_id: int = Depends(mobile_id_param),
        fields: Dict[str, Any] = Depends(mobile_form),
        photos: Optional[List[UploadFile]] = File(None),
        service: MobileService = Depends(get_mobile_service),
):
    """
    更新手机库存记录

    上传新图片会替换原有图片列表，不上传则保持不变
    """
    payload = parse(MobileUpdate, fields)
    files = await read_uploads(photos)
    return await service.update(mobile_id, payload, files)


@router.delete("/{item_id}", status_code=204)
async def delete_mobile(
        mobile_id: int = Depends(mobile_id_param),
        service: MobileService = Depends(get_mobile_service),
):
    await service.delete(mobile_id)
    return Response(status_code=204)
