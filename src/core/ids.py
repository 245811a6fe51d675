"""
ID 생성: run_id

- cordova build/run 호출 1회마다 새 run_id 발급
- 로그 라인 접두어([RUN-...])와 BuildResult.run_id에 사용
"""

import uuid
from datetime import UTC, datetime

from src.domain.constants import RUN_ID_PREFIX


def generate_run_id() -> str:
    """
    Cordova CLI 호출 식별자 생성.

    같은 앱에서 build/run을 여러 번 실행해도 로그에서 호출별로 구분되도록
    UTC 시각 + 랜덤 접미어를 조합.

    Returns:
        "RUN-{YYYYmmddHHMMSS}-{hex8}"
    """
    started = datetime.now(UTC).strftime("%Y%m%d%H%M%S")
    return f"{RUN_ID_PREFIX}{started}-{uuid.uuid4().hex[:8]}"
