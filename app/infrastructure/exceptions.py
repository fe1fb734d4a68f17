"""
Custom exceptions for the Infrastructure layer.
"""
from app.core.exceptions import AppError


class InfrastructureError(AppError):
    """Base class for exceptions in the infrastructure layer."""
    status_code = 500
    code = "InfrastructureError"


class StoreError(InfrastructureError):
    """The relational store failed for a reason other than a constraint."""
    code = "StoreError"


class UploadFailed(InfrastructureError):
    """An object storage upload failed."""
    code = "UploadFailed"


class MissingAssetData(InfrastructureError):
    """An uploaded asset arrived without any content."""
    code = "MissingAssetData"
