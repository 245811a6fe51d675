"""
Templates layer: 템플릿 트리 컴파일.

주의: 폴더 구분
- src/templates/ → 코드 (이 모듈)
- <app>/www/<template_path>/ → 실제 Pug 소스 (앱 쪽 데이터)
"""

from .compiler import (
    TemplateCompiler,
    compile_templates,
    compiled_path_for,
    is_template_file,
)

__all__ = [
    "TemplateCompiler",
    "compile_templates",
    "compiled_path_for",
    "is_template_file",
]
