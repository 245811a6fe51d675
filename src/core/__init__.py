"""
Core layer: 앱 설정 + Cordova CLI 실행.

역할:
- CordovaApp (build/run 진입점)
- CLI 실행기, 설정 로드, run_id
"""

from .app import CordovaApp
from .config import BuildToolConfig, load_config, resolve_cordova_executable
from .ids import generate_run_id
from .invoker import CordovaInvoker

__all__ = [
    # app
    "CordovaApp",
    # config
    "BuildToolConfig",
    "load_config",
    "resolve_cordova_executable",
    # invoker
    "CordovaInvoker",
    # ids
    "generate_run_id",
]
