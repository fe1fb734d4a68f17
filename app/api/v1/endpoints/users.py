"""
顾客管理API接口模块

创建和更新使用 multipart 表单，头像文件字段为 profile_photo。
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import JSONResponse

from app.api.dependencies import get_user_service, user_id_param
from app.api.uploads import read_uploads
from app.infrastructure.validation import parse
from app.schemas.shop import UserCreate, UserUpdate
from app.services.core import UserService

router = APIRouter()


def user_form(
        name: Optional[str] = Form(None),  # 姓名，必填
        contact_number: Optional[str] = Form(None),  # 联系电话，必填且唯一
        email: Optional[str] = Form(None),
        place: Optional[str] = Form(None),
) -> Dict[str, Any]:
    """表单字段原样收集，必填和格式校验交给请求模型"""
    return {"name": name, "contact_number": contact_number, "email": email, "place": place}


# 创建顾客接口
@router.post("", status_code=201)
async def create_user(
        fields: Dict[str, Any] = Depends(user_form),
        profile_photo: Optional[UploadFile] = File(None),
        service: UserService = Depends(get_user_service),
):
    """
    创建顾客

    Args:
        fields: 表单字段，name、contact_number 必填，email、place 可选
        profile_photo: 可选头像文件
        service: 顾客服务，通过依赖注入获取

    Returns:
        201 与新建的顾客信息；联系电话已存在时返回409
    """
    payload = parse(UserCreate, fields)
    files = await read_uploads([profile_photo])
    return JSONResponse(status_code=201, content=await service.create(payload, files))


# 获取顾客列表接口
@router.get("")
async def list_users(
        page: Optional[str] = None,  # 页码，默认第1页
        limit: Optional[str] = None,  # 每页条数，默认10条
        search: Optional[str] = None,  # 按姓名、邮箱、地址、电话模糊搜索
        service: UserService = Depends(get_user_service),
):
    """
    分页获取顾客列表

    Returns:
        dict: data 中包含 users 列表和 pagination 分页信息
    """
    return await service.list_records(page, limit, search)


# 获取顾客详情接口
@router.get("/{item_id}")
async def get_user(
        user_id: int = Depends(user_id_param),
        service: UserService = Depends(get_user_service),
):
    """根据ID获取顾客详情，ID格式错误返回400，不存在返回404"""
    return await service.get(user_id)


# 更新顾客接口
@router.put("/{item_id}")
async def update_user(
        user_id: int = Depends(user_id_param),
        fields: Dict[str, Any] = Depends(user_form),
        profile_photo: Optional[UploadFile] = File(None),
        service: UserService = Depends(get_user_service),
):
    """
    更新顾客

    name、contact_number 每次都必须提交；未提交的可选字段保持不变，
    未上传头像时保留原头像。
    """
    payload = parse(UserUpdate, fields)
    files = await read_uploads([profile_photo])
    return await service.update(user_id, payload, files)


# 删除顾客接口
@router.delete("/{item_id}", status_code=204)
async def delete_user(
        user_id: int = Depends(user_id_param),
        service: UserService = Depends(get_user_service),
):
    """删除顾客，成功时无响应体；关联的手机和维修记录保持原样"""
    await service.delete(user_id)
    return Response(status_code=204)
