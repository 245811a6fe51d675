"""
설정 로드: default.yaml + Cordova 실행 파일 경로 해석.

실행 파일 경로 우선순위:
1. default.yaml의 cordova.executable (명시 설정)
2. %APPDATA%/npm/node_modules/cordova/bin/cordova.cmd (Windows npm 전역 설치)
3. PATH 상의 cordova
4. "cordova" 그대로 (실행 시 BUILD_TOOL_LAUNCH_FAILED로 드러남)

환경 변수는 설정 생성 시 한 번만 읽고, 호출 시점에는 다시 읽지 않음.
"""

import os
import shutil
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    CORDOVA_APPDATA_ENV,
    CORDOVA_EXECUTABLE_NAME,
    CORDOVA_NPM_BIN_PARTS,
    CORDOVA_WINDOWS_SCRIPT,
    DEFAULT_PLATFORM,
)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드 (없으면 빈 dict)."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def resolve_cordova_executable(
    environ: Mapping[str, str] | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> Path:
    """
    Cordova 실행 파일 경로 추정.

    Args:
        environ: 환경 변수 (None이면 os.environ 스냅샷)
        which: PATH 검색 함수 (테스트 주입용)

    Returns:
        실행 파일 경로 (존재 여부는 보장하지 않음)
    """
    if environ is None:
        environ = dict(os.environ)

    appdata = environ.get(CORDOVA_APPDATA_ENV)
    if appdata:
        return Path(appdata).joinpath(*CORDOVA_NPM_BIN_PARTS, CORDOVA_WINDOWS_SCRIPT)

    found = which(CORDOVA_EXECUTABLE_NAME)
    if found:
        return Path(found)

    return Path(CORDOVA_EXECUTABLE_NAME)


@dataclass(frozen=True)
class BuildToolConfig:
    """Cordova CLI 실행 설정."""
    executable: Path
    default_platform: str = DEFAULT_PLATFORM

    @classmethod
    def from_config(
        cls,
        config: dict | None = None,
        environ: Mapping[str, str] | None = None,
        which: Callable[[str], str | None] = shutil.which,
    ) -> "BuildToolConfig":
        """
        설정 dict에서 생성.

        Args:
            config: load_config() 결과 (cordova 섹션 사용)
            environ: 환경 변수 스냅샷
            which: PATH 검색 함수
        """
        section = (config or {}).get("cordova") or {}

        explicit = section.get("executable")
        if explicit:
            executable = Path(explicit).expanduser()
        else:
            executable = resolve_cordova_executable(environ, which)

        return cls(
            executable=executable,
            default_platform=section.get("default_platform") or DEFAULT_PLATFORM,
        )
