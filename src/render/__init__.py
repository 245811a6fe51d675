"""
Render layer: Pug → HTML.

역할:
- 템플릿 소스 → 마크업 문자열
- pypugjs (Jinja2 확장)
"""

from .pug import PugRenderer, render_pug

__all__ = [
    "render_pug",
    "PugRenderer",
]
