"""Application layer for the DPP CSV mapper.

This layer contains the use case and application-level orchestration logic.
It defines ports (interfaces) for external dependencies.
"""

from .models import (
    AutoMapRequest,
    AutoMapResponse,
    GenerateRequest,
    GenerateResponse,
    MappedColumn,
    ProfileRequest,
    ProfileResponse,
    ValidateRequest,
    ValidateResponse,
)

__all__ = [
    "AutoMapRequest",
    "AutoMapResponse",
    "GenerateRequest",
    "GenerateResponse",
    "MappedColumn",
    "ProfileRequest",
    "ProfileResponse",
    "ValidateRequest",
    "ValidateResponse",
]
