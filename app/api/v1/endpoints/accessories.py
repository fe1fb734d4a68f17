"""
配件库存API接口模块
"""
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.api.dependencies import accessory_id_param, get_accessory_service
from app.schemas.shop import AccessoryCreate, AccessoryUpdate
from app.services.core import AccessoryService

router = APIRouter()


@router.post("", status_code=201)
async def create_accessory(
        payload: AccessoryCreate,
        service: AccessoryService = Depends(get_accessory_service),
):
    """
    创建配件

    name、type、selling_price、stock_count 必填；sold_count 默认0，
    status 默认 IN_STOCK；名称重复返回409
    """
    return JSONResponse(status_code=201, content=await service.create(payload))


@router.get("")
async def list_accessories(
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
        service: AccessoryService = Depends(get_accessory_service),
):
    return await service.list_records(page, limit, search)


@router.get("/{item_id}")
async def get_accessory(
        accessory_id: int = Depends(accessory_id_param),
        service: AccessoryService = Depends(get_accessory_service),
):
    return await service.get(accessory_id)


@router.put("/{item_id}")
async def update_accessory(
        payload: AccessoryUpdate,
        accessory_id: int = Depends(accessory_id_param),
        service: AccessoryService = Depends(get_accessory_service),
):
    return await service.update(accessory_id, payload)


@router.delete("/{item_id}", status_code=204)
async def delete_accessory(
        accessory_id: int = Depends(accessory_id_param),
        service: AccessoryService = Depends(get_accessory_service),
):
    await service.delete(accessory_id)
    return Response(status_code=204)
