"""
上传文件转换

multipart 表单中的 UploadFile 读入内存，转换为上传适配器使用的 UploadedAsset。
"""
from typing import List, Optional, Sequence

from fastapi import UploadFile

from app.infrastructure.storage import UploadedAsset


async def read_uploads(uploads: Optional[Sequence[Optional[UploadFile]]]) -> List[UploadedAsset]:
    """
    读取上传文件

    Args:
        uploads: 表单中的文件，未上传时为None

    Returns:
        按提交顺序排列的文件；浏览器未选择文件时提交的空文件会被忽略
    """
    assets: List[UploadedAsset] = []
    for upload in uploads or ():
        if upload is None:
            continue
        content = await upload.read()
        if not upload.filename and not content:
            continue
        assets.append(UploadedAsset(filename=upload.filename, content=content, content_type=upload.content_type))
    return assets
