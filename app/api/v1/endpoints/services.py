"""
维修服务API接口模块
"""
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.api.dependencies import get_repair_service, service_id_param
from app.schemas.shop import ServiceCreate, ServiceUpdate
from app.services.core import RepairService

router = APIRouter()


@router.post("", status_code=201)
async def create_service(
        payload: ServiceCreate,
        service: RepairService = Depends(get_repair_service),
):
    """创建维修记录，仅 model 必填；completed 默认 false"""
    return JSONResponse(status_code=201, content=await service.create(payload))


@router.get("")
async def list_services(
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
        service: RepairService = Depends(get_repair_service),
):
    return await service.list_records(page, limit, search)


@router.get("/{item_id}")
async def get_service(
        service_id: int = Depends(service_id_param),
        service: RepairService = Depends(get_repair_service),
):
    return await service.get(service_id)


@router.put("/{item_id}")
async def update_service(
        payload: ServiceUpdate,
        service_id: int = Depends(service_id_param),
        service: RepairService = Depends(get_repair_service),
):
    return await service.update(service_id, payload)


@router.delete("/{item_id}", status_code=204)
async def delete_service(
        service_id: int = Depends(service_id_param),
        service: RepairService = Depends(get_repair_service),
):
    await service.delete(service_id)
    return Response(status_code=204)
