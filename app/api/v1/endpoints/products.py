"""
商品API接口模块

商品通过 category_id 关联分类，分类不存在时返回404
"""
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.api.dependencies import get_product_service, product_id_param
from app.schemas.shop import ProductCreate, ProductUpdate
from app.services.core import ProductService

router = APIRouter()


@router.post("", status_code=201)
async def create_product(
        payload: ProductCreate,
        service: ProductService = Depends(get_product_service),
):
    return JSONResponse(status_code=201, content=await service.create(payload))


@router.get("")
async def list_products(
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
        service: ProductService = Depends(get_product_service),
):
    return await service.list_records(page, limit, search)


@router.get("/{item_id}")
async def get_product(
        product_id: int = Depends(product_id_param),
        service: ProductService = Depends(get_product_service),
):
    return await service.get(product_id)


@router.put("/{item_id}")
async def update_product(
        payload: ProductUpdate,
        product_id: int = Depends(product_id_param),
        service: ProductService = Depends(get_product_service),
):
    return await service.update(product_id, payload)


@router.delete("/{item_id}", status_code=204)
async def delete_product(
        product_id: int = Depends(product_id_param),
        service: ProductService = Depends(get_product_service),
):
    await service.delete(product_id)
    return Response(status_code=204)
