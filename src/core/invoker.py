"""
Cordova CLI 실행기: build / run 서브커맨드.

상태 (호출 1회 기준):
    Idle → Spawning → Running → Succeeded | Failed(exit_code) | Failed(launch)

- cwd = 앱 루트, 인자 = [subcommand, platform]
- stdout/stderr는 부모 프로세스로 그대로 전달
- 대기 지점은 프로세스 종료 1곳, 타임아웃/재시도 없음
"""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path

from src.core.config import BuildToolConfig
from src.core.ids import generate_run_id
from src.domain.constants import SUBCOMMANDS
from src.domain.errors import BuildToolError, ErrorCodes
from src.domain.schemas import BuildResult

logger = logging.getLogger(__name__)


class CordovaInvoker:
    """
    Cordova CLI 서브프로세스 실행기.

    Usage:
        invoker = CordovaInvoker(BuildToolConfig.from_config(load_config()))
        result = await invoker.invoke("build", app_root, "android")
    """

    def __init__(self, config: BuildToolConfig):
        self.config = config

    def build_command(self, subcommand: str, platform: str | None = None) -> list[str]:
        """실행할 argv 구성."""
        if subcommand not in SUBCOMMANDS:
            raise ValueError(f"Unknown subcommand: {subcommand!r}")
        return [
            str(self.config.executable),
            subcommand,
            platform or self.config.default_platform,
        ]

    async def invoke(
        self,
        subcommand: str,
        cwd: Path,
        platform: str | None = None,
    ) -> BuildResult:
        """
        Cordova CLI 실행 후 종료 대기.

        Args:
            subcommand: "build" 또는 "run"
            cwd: 앱 루트 디렉토리
            platform: 대상 플랫폼 (None이면 default_platform)

        Returns:
            BuildResult (exit_code == 0)

        Raises:
            BuildToolError: BUILD_TOOL_LAUNCH_FAILED, BUILD_TOOL_EXIT_NONZERO
        """
        command = self.build_command(subcommand, platform)
        run_id = generate_run_id()
        started_at = datetime.now(UTC).isoformat()

        logger.info(f"[{run_id}] Running {' '.join(command)} in {cwd}")

        try:
            process = await asyncio.create_subprocess_exec(*command, cwd=str(cwd))
        except OSError as e:
            raise BuildToolError(
                ErrorCodes.BUILD_TOOL_LAUNCH_FAILED,
                command=command,
                error=str(e),
            ) from e

        exit_code = await process.wait()
        finished_at = datetime.now(UTC).isoformat()

        if exit_code != 0:
            raise BuildToolError(
                ErrorCodes.BUILD_TOOL_EXIT_NONZERO,
                command=command,
                exit_code=exit_code,
            )

        logger.info(f"[{run_id}] {subcommand} finished successfully")

        return BuildResult(
            run_id=run_id,
            subcommand=subcommand,
            platform=command[2],
            command=command,
            exit_code=exit_code,
            started_at=started_at,
            finished_at=finished_at,
        )
