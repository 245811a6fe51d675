"""
Pug 렌더러: pypugjs + Jinja2 기반.

- Pug 소스 → pypugjs Jinja2 확장이 Jinja 템플릿으로 변환 → HTML 렌더링
- include: 해당 파일 폴더 기준 → 없으면 템플릿 루트(search_paths[0]) 기준
- extends: Jinja 로더가 파일 폴더 → search_paths 순으로 검색
- 텍스트/속성에 있는 {{ }}, {% %}, {# #}는 그대로 출력 (클라이언트 템플릿 바인딩 보존)
- 렌더링 엔진의 모든 실패는 TEMPLATE_RENDER_FAILED로 전달
"""

import os
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, FunctionLoader
from pypugjs.ext.jinja import Compiler as JinjaCompiler
from pypugjs.ext.jinja import PyPugJSExtension
from pypugjs.utils import process

from src.domain.constants import TEMPLATE_EXTENSION
from src.domain.errors import ErrorCodes, TemplateCompileError

_JINJA_OPENERS = re.compile(r"\{[{%#]")


def escape_jinja_literals(text: str) -> str:
    """'{{' → "{{ '{{' }}" (Jinja 렌더 후 원문 그대로 남도록)."""
    return _JINJA_OPENERS.sub(lambda m: "{{ %r }}" % m.group(0), text)


class LiteralTextCompiler(JinjaCompiler):
    """Pug 원문 텍스트의 Jinja 구분자를 이스케이프하는 컴파일러."""

    def interpolate(self, text, escape=None):
        return super().interpolate(escape_jinja_literals(text), escape)

    def visitLiteral(self, node):
        self.buffer(escape_jinja_literals(node.str))

    def visitComment(self, comment):
        comment.val = escape_jinja_literals(comment.val)
        super().visitComment(comment)

    def visitAttributes(self, attrs):
        attrs = [
            dict(attr, val=escape_jinja_literals(attr["val"]))
            if attr["static"] and isinstance(attr["val"], str)
            else attr
            for attr in attrs
        ]
        super().visitAttributes(attrs)


class PugExtension(PyPugJSExtension):
    """
    pypugjs Jinja2 확장.

    - options를 인스턴스별로 보관 (클래스 공유 dict 사용 안 함)
    - include 기준 폴더(basedir)는 environment.pug_basedir로 명시
    """

    def __init__(self, environment):
        self.options = {}
        super().__init__(environment)
        environment.extend(pug_basedir=None)

    def preprocess(self, source, name, filename=None):
        if not name or os.path.splitext(name)[1] != TEMPLATE_EXTENSION:
            return source
        options = dict(
            self.options,
            basedir=self.environment.pug_basedir,
            source_path=filename,
        )
        return process(source, filename=name, compiler=LiteralTextCompiler, **options)


class PugRenderer:
    """
    Pug 템플릿 렌더러.

    Usage:
        renderer = PugRenderer([templates_root])
        html = renderer.render(source, filename=templates_root / "home.pug")
    """

    def __init__(
        self,
        search_paths: Sequence[Path] | None = None,
        context: dict[str, Any] | None = None,
    ):
        """
        Args:
            search_paths: include/extends 해석용 추가 검색 경로 (첫 번째 = 템플릿 루트)
            context: 렌더링 시 전달할 변수 (기본: 없음)
        """
        self.search_paths = [Path(p).absolute() for p in search_paths or []]
        self.context = dict(context or {})

    def _build_environment(self, name: str, source: str, filename: Path | None) -> Environment:
        """렌더 1회용 Environment 구성."""
        paths: list[Path] = []
        if filename is not None:
            paths.append(filename.parent)
        paths.extend(p for p in self.search_paths if p not in paths)

        # 소스는 메모리에서, filename은 그대로 preprocess까지 전달
        source_filename = str(filename) if filename is not None else None

        def load_source(template_name: str):
            if template_name != name:
                return None
            return source, source_filename, lambda: True

        env = Environment(
            loader=ChoiceLoader([
                FunctionLoader(load_source),
                FileSystemLoader([str(p) for p in paths]),
            ]),
            extensions=[PugExtension],
            autoescape=False,
        )

        if self.search_paths:
            basedir = self.search_paths[0]
        elif filename is not None:
            basedir = filename.parent
        else:
            basedir = Path.cwd()
        env.pug_basedir = str(basedir)
        return env

    def render(self, source: str, filename: Path | str | None = None) -> str:
        """
        Pug 소스를 HTML 문자열로 렌더링.

        Args:
            source: Pug 소스
            filename: 원본 파일 경로 (상대 include 해석용)

        Returns:
            렌더링된 HTML

        Raises:
            TemplateCompileError: TEMPLATE_RENDER_FAILED
        """
        path = Path(filename).absolute() if filename is not None else None
        # .pug로 끝나는 이름만 Pug로 변환됨
        name = path.name if path is not None else f"<string>{TEMPLATE_EXTENSION}"
        if not name.endswith(TEMPLATE_EXTENSION):
            name += TEMPLATE_EXTENSION

        try:
            env = self._build_environment(name, source, path)
            return env.get_template(name).render(**self.context)
        except Exception as e:
            raise TemplateCompileError(
                ErrorCodes.TEMPLATE_RENDER_FAILED,
                path=str(filename) if filename is not None else name,
                error=str(e),
            ) from e


# =============================================================================
# 간편 함수
# =============================================================================


def render_pug(
    source: str,
    filename: Path | str | None = None,
    search_paths: Sequence[Path] | None = None,
) -> str:
    """
    Pug 소스 렌더링 (간편 함수).

    Args:
        source: Pug 소스
        filename: 원본 파일 경로
        search_paths: 추가 include 검색 경로

    Returns:
        렌더링된 HTML
    """
    return PugRenderer(search_paths).render(source, filename=filename)
