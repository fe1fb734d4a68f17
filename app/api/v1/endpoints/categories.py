"""
商品分类API接口模块
"""
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.api.dependencies import category_id_param, get_category_service
from app.schemas.shop import CategoryCreate, CategoryUpdate
from app.services.core import CategoryService

router = APIRouter()


@router.post("", status_code=201)
async def create_category(
        payload: CategoryCreate,
        service: CategoryService = Depends(get_category_service),
):
    return JSONResponse(status_code=201, content=await service.create(payload))


@router.get("")
async def list_categories(
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
        service: CategoryService = Depends(get_category_service),
):
    return await service.list_records(page, limit, search)


@router.get("/{item_id}")
async def get_category(
        category_id: int = Depends(category_id_param),
        service: CategoryService = Depends(get_category_service),
):
    return await service.get(category_id)


@router.put("/{item_id}")
async def update_category(
        payload: CategoryUpdate,
        category_id: int = Depends(category_id_param),
        service: CategoryService = Depends(get_category_service),
):
    return await service.update(category_id, payload)


@router.delete("/{item_id}", status_code=204)
async def delete_category(
        category_id: int = Depends(category_id_param),
        service: CategoryService = Depends(get_category_service),
):
    await service.delete(category_id)
    return Response(status_code=204)
