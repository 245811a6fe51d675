"""
Data schemas for the build pipeline.

- CompileResult: 템플릿 컴파일 결과 (소스 → 출력 파일)
- BuildResult: Cordova CLI 1회 실행 결과
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class CompileResult:
    """템플릿 트리 컴파일 결과."""
    root: Path
    compiled: list[tuple[Path, Path]] = field(default_factory=list)
    skipped: int = 0  # 템플릿이 아닌 파일 수

    @property
    def count(self) -> int:
        return len(self.compiled)

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": str(self.root),
            "compiled": [
                {"source": str(src), "output": str(out)}
                for src, out in self.compiled
            ],
            "skipped": self.skipped,
        }


@dataclass
class BuildResult:
    """
    Cordova CLI 실행 결과.

    exit_code == 0 인 경우에만 생성됨 (실패는 BuildToolError로 전달).
    """
    run_id: str
    subcommand: str  # build / run
    platform: str
    command: list[str]
    exit_code: int
    started_at: str
    finished_at: str
    compile_result: CompileResult | None = None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "subcommand": self.subcommand,
            "platform": self.platform,
            "command": list(self.command),
            "exit_code": self.exit_code,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "compile_result": (
                self.compile_result.to_dict() if self.compile_result else None
            ),
        }
