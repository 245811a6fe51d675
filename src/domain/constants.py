"""
Domain Constants: 빌드 파이프라인 전역 상수.

앱 디렉토리 구조, 템플릿 확장자, Cordova 설치 경로 등
시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# App Directory Structure (앱 디렉토리 구조)
# =============================================================================
# <root>/
# ├── www/<template_path>/**/*.pug   → 같은 폴더에 *.tpl 생성
# ├── platforms/
# ├── plugins/
# └── hooks/

WWW_DIR = "www"

# =============================================================================
# Templates (템플릿 확장자 정책)
# =============================================================================
# 예: www/templates/home.pug → www/templates/home.tpl

TEMPLATE_EXTENSION = ".pug"
COMPILED_EXTENSION = ".tpl"
TEMPLATE_ENCODING = "utf-8"

# =============================================================================
# Cordova CLI
# =============================================================================
# Windows npm 전역 설치 위치:
# %APPDATA%/npm/node_modules/cordova/bin/cordova.cmd

DEFAULT_PLATFORM = "android"

SUBCOMMAND_BUILD = "build"
SUBCOMMAND_RUN = "run"
SUBCOMMANDS = (SUBCOMMAND_BUILD, SUBCOMMAND_RUN)

CORDOVA_EXECUTABLE_NAME = "cordova"
CORDOVA_APPDATA_ENV = "APPDATA"
CORDOVA_NPM_BIN_PARTS = ("npm", "node_modules", "cordova", "bin")
CORDOVA_WINDOWS_SCRIPT = "cordova.cmd"

# =============================================================================
# ID Prefixes
# =============================================================================

RUN_ID_PREFIX = "RUN-"
