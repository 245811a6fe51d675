"""
템플릿 컴파일러: 디렉토리 재귀 탐색 + Pug → .tpl 변환.

규칙:
- *.pug 파일만 컴파일, 같은 폴더에 <stem>.tpl로 저장 (기존 파일 덮어쓰기)
- 그 외 파일은 건드리지 않음
- 템플릿 폴더가 없으면 TEMPLATE_DIR_NOT_FOUND (조용한 성공 금지)
- fail-fast: 첫 에러에서 중단, 이미 쓴 출력은 롤백하지 않음
"""

import asyncio
import logging
from pathlib import Path

from src.domain.constants import (
    COMPILED_EXTENSION,
    TEMPLATE_ENCODING,
    TEMPLATE_EXTENSION,
)
from src.domain.errors import ErrorCodes, TemplateCompileError
from src.domain.schemas import CompileResult
from src.render.pug import PugRenderer

logger = logging.getLogger(__name__)


def compiled_path_for(source: Path) -> Path:
    """home.pug → home.tpl (같은 폴더)."""
    return source.with_suffix(COMPILED_EXTENSION)


def is_template_file(path: Path) -> bool:
    return path.suffix == TEMPLATE_EXTENSION


class TemplateCompiler:
    """
    템플릿 트리 컴파일러.

    Usage:
        compiler = TemplateCompiler()
        result = compiler.compile_tree(app_root / "www" / "templates")
    """

    def __init__(self, renderer: PugRenderer | None = None):
        self.renderer = renderer

    def _renderer_for(self, root: Path) -> PugRenderer:
        if self.renderer is not None:
            return self.renderer
        return PugRenderer([root])

    def compile_tree(self, directory: Path) -> CompileResult:
        """
        디렉토리 전체를 재귀적으로 컴파일.

        Args:
            directory: 템플릿 루트 폴더

        Returns:
            CompileResult

        Raises:
            TemplateCompileError: TEMPLATE_DIR_NOT_FOUND, TEMPLATE_LIST_FAILED,
                TEMPLATE_READ_FAILED, TEMPLATE_RENDER_FAILED, TEMPLATE_WRITE_FAILED
        """
        directory = Path(directory)
        try:
            exists = directory.is_dir()
        except OSError as e:
            raise TemplateCompileError(
                ErrorCodes.TEMPLATE_LIST_FAILED,
                path=str(directory),
                error=str(e),
            ) from e

        if not exists:
            raise TemplateCompileError(
                ErrorCodes.TEMPLATE_DIR_NOT_FOUND,
                path=str(directory),
            )

        result = CompileResult(root=directory)
        renderer = self._renderer_for(directory)
        self._scan_folder(directory, renderer, result)

        logger.info(
            f"Compiled {result.count} template(s) under {directory} "
            f"({result.skipped} other file(s) skipped)"
        )
        return result

    async def compile_tree_async(self, directory: Path) -> CompileResult:
        """compile_tree를 워커 스레드에서 실행."""
        return await asyncio.to_thread(self.compile_tree, directory)

    def _scan_folder(
        self,
        directory: Path,
        renderer: PugRenderer,
        result: CompileResult,
    ) -> None:
        try:
            entries = [(entry, entry.is_dir()) for entry in sorted(directory.iterdir())]
        except OSError as e:
            raise TemplateCompileError(
                ErrorCodes.TEMPLATE_LIST_FAILED,
                path=str(directory),
                error=str(e),
            ) from e

        for entry, is_dir in entries:
            if is_dir:
                self._scan_folder(entry, renderer, result)
            elif is_template_file(entry):
                output = self._compile(entry, renderer)
                result.compiled.append((entry, output))
            else:
                result.skipped += 1

    def compile_file(self, source: Path) -> Path:
        """
        단일 Pug 파일 컴파일.

        Args:
            source: .pug 파일 경로

        Returns:
            생성된 .tpl 파일 경로
        """
        source = Path(source)
        return self._compile(source, self._renderer_for(source.parent))

    def _compile(self, source: Path, renderer: PugRenderer) -> Path:
        try:
            content = source.read_text(encoding=TEMPLATE_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateCompileError(
                ErrorCodes.TEMPLATE_READ_FAILED,
                path=str(source),
                error=str(e),
            ) from e

        html = renderer.render(content, filename=source)

        output = compiled_path_for(source)
        try:
            output.write_text(html, encoding=TEMPLATE_ENCODING)
        except OSError as e:
            raise TemplateCompileError(
                ErrorCodes.TEMPLATE_WRITE_FAILED,
                path=str(output),
                error=str(e),
            ) from e

        logger.debug(f"Compiled {source} -> {output}")
        return output


def compile_templates(directory: Path) -> CompileResult:
    """템플릿 트리 컴파일 (간편 함수)."""
    return TemplateCompiler().compile_tree(directory)
