"""
MinIO Object Storage Adapter

Implements ObjectStorageInterface for MinIO object storage.
This adapter wraps the MinIO client to provide a consistent interface.
"""

import io
import json
import logging
from typing import Optional, BinaryIO, Union

from minio import Minio
from minio.error import S3Error

from .base import ObjectStorageInterface, StorageConfig

logger = logging.getLogger(__name__)


class MinIOAdapter(ObjectStorageInterface):
    """
    MinIO implementation of ObjectStorageInterface

    Images are stored in a bucket with an anonymous read-only policy so
    that the returned URLs can be used directly by clients.
    """

    def __init__(self, config: StorageConfig):
        super().__init__(config)
        self.client = Minio(
            endpoint=config.endpoint,
            access_key=config.access_key,
            secret_key=config.secret_key,
            secure=config.secure,
            region=config.region
        )

    def ensure_bucket_exists(self, bucket_name: str) -> bool:
        """Ensure bucket exists, create if it doesn't"""
        try:
            if not self.client.bucket_exists(bucket_name):
                self.client.make_bucket(bucket_name)
                logger.info(f"✅ 创建存储桶 '{bucket_name}' 成功")
            return True
        except S3Error as e:
            logger.error(f"❌ 存储桶操作失败: {e}")
            return False

    def upload_file_object(
        self,
        file_data: Union[bytes, BinaryIO],
        bucket_name: str,
        object_name: str,
        content_type: Optional[str] = None
    ) -> bool:
        """Upload an in-memory file or a seekable stream to MinIO"""
        if isinstance(file_data, bytes):
            data_stream, file_size = io.BytesIO(file_data), len(file_data)
        else:
            content = file_data.read()
            data_stream, file_size = io.BytesIO(content), len(content)

        logger.debug(f"正在上传对象: {bucket_name}/{object_name} (大小: {file_size}字节)")

        try:
            self.client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data_stream,
                length=file_size,
                content_type=content_type or "application/octet-stream"
            )
        except S3Error as e:
            logger.error(f"❌ 文件上传失败 {bucket_name}/{object_name}: {e}")
            raise

        logger.info(f"✅ 文件对象上传成功: {bucket_name}/{object_name}")
        return True

    def get_public_url(self, bucket_name: str, object_name: str) -> str:
        """Build the anonymous-read URL of an object"""
        base_url = self.config.public_url
        if not base_url:
            scheme = "https" if self.config.secure else "http"
            base_url = f"{scheme}://{self.config.endpoint}"
        return f"{base_url.rstrip('/')}/{bucket_name}/{object_name}"

    def _public_read_policy(self, bucket_name: str) -> str:
        return json.dumps({
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Effect": "Allow",
                    "Principal": {"AWS": ["*"]},
                    "Action": ["s3:GetObject"],
                    "Resource": [f"arn:aws:s3:::{bucket_name}/*"],
                }
            ],
        })

    def initialize(self) -> bool:
        """Initialize MinIO service (create the image bucket and make it readable)"""
        logger.info(f"开始初始化MinIO存储桶, 终端: {self.config.endpoint}")

        try:
            buckets = self.client.list_buckets()
            logger.info(f"已连接到MinIO服务器, 当前存在{len(buckets)}个存储桶")
        except Exception as e:
            logger.error(f"❌ 连接MinIO服务器失败: {e}")
            return False

        bucket = self.config.image_bucket
        if not self.ensure_bucket_exists(bucket):
            logger.error("❌ MinIO存储桶初始化失败")
            return False

        try:
            self.client.set_bucket_policy(bucket, self._public_read_policy(bucket))
        except S3Error as e:
            logger.error(f"❌ 设置存储桶公开读取策略失败: {e}")
            return False

        logger.info("✅ MinIO存储桶初始化完成")
        return True
