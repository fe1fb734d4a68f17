"""
Validation Infrastructure Module

Pydantic request field types and the translation of pydantic errors into the
application error taxonomy.
"""

from .fields import (
    INT32_MAX,
    INT64_MAX,
    Amount,
    Count,
    PhoneNumber,
    RecordRef,
    RequestModel,
    Text,
    Timestamp,
    is_absent,
)
from .pipeline import CreateRecord, PatchRecord, first_error, parse, to_app_error, to_record, validate

__all__ = [
    'INT32_MAX',
    'INT64_MAX',
    'Amount',
    'Count',
    'PhoneNumber',
    'RecordRef',
    'RequestModel',
    'Text',
    'Timestamp',
    'is_absent',
    'CreateRecord',
    'PatchRecord',
    'first_error',
    'parse',
    'to_app_error',
    'to_record',
    'validate',
]
