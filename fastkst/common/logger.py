"""진단/CLI 로거

레코드는 QueueHandler로 즉시 큐에 넣고, 실제 출력(stderr, 일 단위 로테이션 파일)은
QueueListener 스레드가 담당합니다. 동시성 검사처럼 여러 스레드가 로그를 남겨도
호출 스레드는 I/O를 기다리지 않습니다.

변환 코어(offtime, kst)는 로그를 남기지 않습니다.
"""

from __future__ import annotations

import logging
import queue
import sys
from datetime import date
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from pathlib import Path
from typing import Any

from fastkst.config.settings import logging_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(component)s] %(message)s"
BACKUP_DAYS = 7

# logger.log()에 파라미터로 넘겨야 하는 키
_LOG_CALL_KEYS = ("exc_info",)


def merge_extra(
    component: str, context: dict[str, Any], fields: dict[str, Any]
) -> tuple[dict[str, Any], dict[str, Any]]:
    """레코드 extra 병합.

    우선순위: component < extra={...} < 바인딩된 context < 키워드 필드

    Returns:
        (record extra, logger.log 호출 파라미터)
    """
    call_kwargs = {key: fields.pop(key) for key in _LOG_CALL_KEYS if key in fields}
    merged: dict[str, Any] = {"component": component}
    nested = fields.pop("extra", None)
    if isinstance(nested, dict):
        merged.update(nested)
    merged.update(context)
    merged.update(fields)
    return merged, call_kwargs


def _build_handlers(
    *, console: bool, log_path: Path | None, rotation: str
) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                filename=log_path, when=rotation, backupCount=BACKUP_DAYS, encoding="utf-8"
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


class DiagnosticLogger:
    """큐 기반 진단 로거.

    with 블록으로 사용하면 종료 시 큐에 남은 레코드를 모두 내보냅니다.
    """

    @classmethod
    def get_logger(cls, name: str, component: str | None = None, **kwargs) -> DiagnosticLogger:
        return cls(name, component, **kwargs)

    def __init__(
        self,
        name: str,
        component: str | None = None,
        level: int | str | None = None,
        log_to_file: bool | None = None,
        log_to_console: bool | None = None,
        log_dir: str | None = None,
        rotation: str = "midnight",
    ):
        """
        Args:
            name: 로거 이름
            component: 컴포넌트 이름 (로거 이름 접미사, 파일 하위 디렉토리)
            level: 로깅 레벨 (None이면 LOG_LEVEL)
            log_to_file: 파일 출력 여부 (None이면 LOG_TO_FILE)
            log_to_console: stderr 출력 여부 (None이면 LOG_TO_CONSOLE)
            log_dir: 로그 디렉토리 (None이면 LOG_DIR)
            rotation: TimedRotatingFileHandler 로테이션 주기
        """
        self.name = name
        self.component = component
        self.context: dict[str, Any] = {}
        self.log_dir = Path(log_dir or logging_settings.dir)

        to_file = logging_settings.to_file if log_to_file is None else log_to_file
        to_console = logging_settings.to_console if log_to_console is None else log_to_console

        self.logger = logging.getLogger(f"{name}.{component}" if component else name)
        self.logger.setLevel(level if level is not None else logging_settings.level.upper())
        # 같은 이름으로 다시 만들면 이전 큐 핸들러를 대체
        self.logger.handlers.clear()

        # 무제한 큐: emit이 queue.Full로 실패하지 않음
        records: queue.Queue = queue.Queue()
        self.logger.addHandler(QueueHandler(records))
        self.listener = QueueListener(
            records,
            *_build_handlers(
                console=to_console,
                log_path=self.log_path() if to_file else None,
                rotation=rotation,
            ),
            respect_handler_level=True,
        )
        self.listener.start()
        self._started = True

    def log_path(self) -> Path:
        """<log_dir>/[<component>/]<name>_<YYYY-MM-DD>.log"""
        directory = self.log_dir / self.component if self.component else self.log_dir
        return directory / f"{self.name}_{date.today().isoformat()}.log"

    def set_context(self, **kwargs) -> None:
        """이후 모든 레코드에 붙일 필드"""
        self.context.update(kwargs)

    def clear_context(self) -> None:
        self.context.clear()

    def log(self, level: int, msg: str, **fields) -> None:
        extra, call_kwargs = merge_extra(self.component or "main", self.context, fields)
        self.logger.log(level, msg, extra=extra, **call_kwargs)

    def debug(self, msg: str, **fields) -> None:
        self.log(logging.DEBUG, msg, **fields)

    def info(self, msg: str, **fields) -> None:
        self.log(logging.INFO, msg, **fields)

    def warning(self, msg: str, **fields) -> None:
        self.log(logging.WARNING, msg, **fields)

    def error(self, msg: str, **fields) -> None:
        self.log(logging.ERROR, msg, **fields)

    def close(self) -> None:
        """큐를 비우고 리스너와 핸들러를 닫음 (여러 번 호출해도 안전)"""
        if not self._started:
            return
        self._started = False
        self.listener.stop()
        for handler in self.listener.handlers:
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()

    def __enter__(self) -> DiagnosticLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
