"""
Error definitions for the build pipeline.

규칙:
- 조용한 실패 금지 → CordovaAppError 계열로 명시적 실패
- 첫 번째 에러에서 즉시 중단 (fail-fast), 재시도 없음
- 원인 예외는 항상 체이닝 (raise ... from e)
"""

from typing import Any


class CordovaAppError(Exception):
    """
    빌드 파이프라인 에러의 기반 클래스.

    Usage:
        raise CordovaAppError("TEMPLATE_READ_FAILED", path=str(path), error=str(e))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class TemplateCompileError(CordovaAppError):
    """템플릿 탐색/읽기/렌더/쓰기 실패."""


class BuildToolError(CordovaAppError):
    """
    Cordova CLI 실행 실패.

    - 실행 자체 실패 (executable 없음 등): BUILD_TOOL_LAUNCH_FAILED
    - 0이 아닌 종료 코드: BUILD_TOOL_EXIT_NONZERO (exit_code 포함)
    """

    @property
    def exit_code(self) -> int | None:
        code: int | None = self.context.get("exit_code")
        return code


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Template Compile ===
    TEMPLATE_DIR_NOT_FOUND = "TEMPLATE_DIR_NOT_FOUND"
    TEMPLATE_LIST_FAILED = "TEMPLATE_LIST_FAILED"
    TEMPLATE_READ_FAILED = "TEMPLATE_READ_FAILED"
    TEMPLATE_WRITE_FAILED = "TEMPLATE_WRITE_FAILED"
    TEMPLATE_RENDER_FAILED = "TEMPLATE_RENDER_FAILED"

    # === Build Tool ===
    BUILD_TOOL_LAUNCH_FAILED = "BUILD_TOOL_LAUNCH_FAILED"
    BUILD_TOOL_EXIT_NONZERO = "BUILD_TOOL_EXIT_NONZERO"
