"""통합 Settings 모듈 - 환경변수 기반

이 모듈의 역할:
    1. 코드에 합리적인 기본값 제공
    2. 환경변수로 오버라이드 (우선순위 높음)
    3. 타입 안전성 보장 (Pydantic 자동 검증)

설정 우선순위:
    1. 환경변수 (최우선) - export FASTKST_YEAR_FIELD_BITS=64
    2. .env 파일 - fastkst/config/.env
    3. 코드 기본값 (settings.py 내부)

사용 예시:
    # 기본값 (32-bit 연도 필드)
    fastkst convert 2147483647

    # 64-bit 연도 필드로 확장
    export FASTKST_YEAR_FIELD_BITS=64
    fastkst convert 9223372036854775807
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 설정 파일 경로
config_dir = Path(__file__).parent


def yaml_settings(prefix: str) -> SettingsConfigDict:
    """환경변수 + .env 통합 설정

    Args:
        prefix: 환경변수 접두사 (예: FASTKST_, LOG_)

    Returns:
        Pydantic 설정 딕셔너리
    """
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=config_dir / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class KstSettings(BaseSettings):
    """KST 변환 설정

    환경변수 오버라이드:
        FASTKST_YEAR_FIELD_BITS: 연도 필드 폭 (32 또는 64) (기본: 32)
    """

    year_field_bits: int = 32

    model_config = yaml_settings("FASTKST_")

    @field_validator("year_field_bits")
    @classmethod
    def _check_bits(cls, value: int) -> int:
        if value not in (32, 64):
            raise ValueError("year_field_bits must be 32 or 64")
        return value


class LoggingSettings(BaseSettings):
    """로깅 설정

    환경변수 오버라이드:
        LOG_LEVEL: 로깅 레벨 (기본: INFO)
        LOG_TO_FILE: 파일 로깅 여부 (기본: false)
        LOG_TO_CONSOLE: 콘솔 로깅 여부 (기본: true)
        LOG_DIR: 로그 디렉토리 (기본: logs)
    """

    level: str = "INFO"
    to_file: bool = False
    to_console: bool = True
    dir: str = "logs"

    model_config = yaml_settings("LOG_")


class BenchSettings(BaseSettings):
    """벤치마크 / 동시성 점검 설정

    환경변수 오버라이드:
        BENCH_ITERATIONS: 벤치마크 반복 횟수 (기본: 100000)
        BENCH_WORKERS: 동시 호출 스레드 수 (기본: 10)
        BENCH_ITERATIONS_PER_WORKER: 스레드당 호출 횟수 (기본: 1000)
    """

    iterations: int = 100_000
    workers: int = 10
    iterations_per_worker: int = 1000

    model_config = yaml_settings("BENCH_")


# ========================================
# 설정 인스턴스 (싱글톤)
# ========================================

kst_settings = KstSettings()
logging_settings = LoggingSettings()
bench_settings = BenchSettings()
