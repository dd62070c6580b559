from .base import (
    AppError,
    DomainError,
    FaultClass,
    InfrastructureError,
    ServerFault,
    ValidationError,
    missing_fields_error,
)
from .http import STATUS_BY_FAULT, handle_app_error, register_error_handler, status_for

__all__ = [
    "AppError",
    "DomainError",
    "FaultClass",
    "InfrastructureError",
    "STATUS_BY_FAULT",
    "ServerFault",
    "ValidationError",
    "handle_app_error",
    "missing_fields_error",
    "register_error_handler",
    "status_for",
]
