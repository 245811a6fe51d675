"""Domain layer: constants, errors and schemas."""

from .errors import (
    BuildToolError,
    CordovaAppError,
    ErrorCodes,
    TemplateCompileError,
)
from .schemas import BuildResult, CompileResult

__all__ = [
    "CordovaAppError",
    "TemplateCompileError",
    "BuildToolError",
    "ErrorCodes",
    "CompileResult",
    "BuildResult",
]
