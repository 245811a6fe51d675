"""
Pytest fixtures for the build pipeline tests.

테스트 구성:
- 앱 디렉토리 (www/templates 포함)
- 종료 코드를 지정할 수 있는 가짜 cordova 실행 파일
"""

import stat
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from src.core.config import BuildToolConfig
from src.core.invoker import CordovaInvoker

# =============================================================================
# App Fixtures
# =============================================================================

SAMPLE_PAGE = """\
doctype html
html
  head
    title Sample
  body
    h1 Hello
"""


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """
    테스트용 Cordova 앱 루트.

    포함:
    - www/templates/ (비어 있음)
    - www/index.html
    """
    root = tmp_path / "my_app"
    (root / "www" / "templates").mkdir(parents=True)
    (root / "www" / "index.html").write_text("<html></html>", encoding="utf-8")
    return root


@pytest.fixture
def templates_dir(app_root: Path) -> Path:
    """www/templates 경로."""
    return app_root / "www" / "templates"


@pytest.fixture
def sample_page() -> str:
    """정상 Pug 소스."""
    return SAMPLE_PAGE


# =============================================================================
# Build Tool Fixtures
# =============================================================================

@pytest.fixture
def fake_cordova(tmp_path: Path) -> Callable[[int], Path]:
    """
    지정한 종료 코드로 끝나는 가짜 cordova 스크립트 생성기.

    실행 시 인자와 cwd를 invocation.log에 기록.
    """
    if sys.platform == "win32":
        pytest.skip("shell script executable requires POSIX")

    def _make(exit_code: int = 0) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / f"cordova_{exit_code}"
        log_path = tmp_path / "invocation.log"
        script.write_text(
            "#!/bin/sh\n"
            f'echo "$(pwd -P) $*" >> "{log_path}"\n'
            f"exit {exit_code}\n",
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def invocation_log(tmp_path: Path) -> Path:
    """가짜 cordova 호출 기록 파일."""
    return tmp_path / "invocation.log"


@pytest.fixture
def make_invoker(fake_cordova: Callable[[int], Path]) -> Callable[[int], CordovaInvoker]:
    """종료 코드별 CordovaInvoker 생성기."""
    def _make(exit_code: int = 0) -> CordovaInvoker:
        return CordovaInvoker(BuildToolConfig(executable=fake_cordova(exit_code)))

    return _make


# =============================================================================
# Working Directory Fixtures
# =============================================================================

@pytest.fixture
def elsewhere_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """템플릿 트리와 무관한 폴더를 작업 디렉토리로 설정."""
    cwd = tmp_path / "elsewhere"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
