"""
Cordova 앱: 루트 경로 + 템플릿 경로 보관, build/run 진입점.

흐름:
- build: (템플릿 경로 설정 시) 템플릿 전체 컴파일 → cordova build <platform>
- run: cordova run <platform> (컴파일 없음)
- 컴파일 실패 시 서브프로세스는 실행되지 않음
"""

import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from src.core.config import BuildToolConfig, load_config
from src.core.invoker import CordovaInvoker
from src.domain.constants import SUBCOMMAND_BUILD, SUBCOMMAND_RUN, WWW_DIR
from src.domain.schemas import BuildResult, CompileResult
from src.templates.compiler import TemplateCompiler

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[Exception | None], None]


class CordovaApp:
    """
    Cordova 앱 디렉토리.

    루트 폴더에는 www/, platforms/, hooks/, plugins/ 등이 있음.

    Usage:
        app = CordovaApp(Path("my_app")).set_template_path("templates")
        result = await app.build("android")
    """

    def __init__(
        self,
        path: Path | str,
        invoker: CordovaInvoker | None = None,
        compiler: TemplateCompiler | None = None,
    ):
        """
        Args:
            path: 앱 루트 디렉토리
            invoker: Cordova CLI 실행기 (None이면 default.yaml + 환경으로 구성)
            compiler: 템플릿 컴파일러 (None이면 기본 Pug 컴파일러)
        """
        self._path = Path(path)
        self.template_path: Path | None = None

        if invoker is None:
            invoker = CordovaInvoker(BuildToolConfig.from_config(load_config()))
        self.invoker = invoker
        self.compiler = compiler or TemplateCompiler()

    @property
    def path(self) -> Path:
        return self._path

    def set_template_path(self, template_path: Path | str) -> "CordovaApp":
        """
        템플릿 경로 설정 (www/ 기준 상대 경로).

        Returns:
            self (체이닝용)
        """
        self.template_path = self._path / WWW_DIR / template_path
        return self

    async def compile_templates(self) -> CompileResult | None:
        """템플릿 컴파일 (템플릿 경로 미설정 시 건너뜀 → None)."""
        if self.template_path is None:
            logger.debug("No template path configured, skipping compile")
            return None
        return await self.compiler.compile_tree_async(self.template_path)

    async def build(
        self,
        platform: str | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> BuildResult | None:
        """
        템플릿 컴파일 후 앱 빌드.

        Args:
            platform: 대상 플랫폼 (기본: android)
            on_complete: 완료 콜백 (에러 또는 None). 지정 시 에러는 콜백으로만 전달

        Returns:
            BuildResult (on_complete 지정 + 실패 시 None)
        """
        async def _build() -> BuildResult:
            compile_result = await self.compile_templates()
            result = await self.invoker.invoke(SUBCOMMAND_BUILD, self._path, platform)
            result.compile_result = compile_result
            return result

        return await self._complete(_build, on_complete)

    async def run(
        self,
        platform: str | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> BuildResult | None:
        """앱 실행 (컴파일 없음)."""
        async def _run() -> BuildResult:
            return await self.invoker.invoke(SUBCOMMAND_RUN, self._path, platform)

        return await self._complete(_run, on_complete)

    @staticmethod
    async def _complete(
        operation: Callable[[], Awaitable[BuildResult]],
        on_complete: CompletionCallback | None,
    ) -> BuildResult | None:
        if on_complete is None:
            return await operation()

        try:
            result = await operation()
        except Exception as e:
            on_complete(e)
            return None

        on_complete(None)
        return result
