"""
로깅 설정

표준 logging 모듈을 사용하며, 로그 레벨은 Settings.log_level을 따릅니다.
"""

import logging

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(settings: Settings) -> None:
    """
    루트 로거에 스트림 핸들러를 등록하고 레벨을 설정합니다.

    여러 번 호출되어도 핸들러는 한 번만 추가되며, 레벨만 갱신됩니다.

    Args:
        settings: 애플리케이션 설정
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())

    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
