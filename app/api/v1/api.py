from fastapi import APIRouter

from app.api.v1.endpoints import accessories, categories, mobiles, products, services, users


api_router = APIRouter()

# 包含各模块的路由
api_router.include_router(users.router, prefix="/users", tags=["顾客"])
api_router.include_router(mobiles.router, prefix="/mobiles", tags=["手机库存"])
api_router.include_router(accessories.router, prefix="/accessories", tags=["配件"])
api_router.include_router(services.router, prefix="/services", tags=["维修服务"])
api_router.include_router(categories.router, prefix="/categories", tags=["商品分类"])
api_router.include_router(products.router, prefix="/products", tags=["商品"])
