"""pwstrength 기본 정책 파라미터 (환경변수로 override 가능)"""
import os

from .errors import ConfigError


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


POLICY_CONFIG = {
    "max_repetition": _env_int("PWSTRENGTH_MAX_REPETITION", 3),  # 같은 문자 ≤3 회
    "max_sequence": _env_int("PWSTRENGTH_MAX_SEQUENCE", 3),      # 연속 문자 ≤3 개
    "backend": os.getenv("PWSTRENGTH_BACKEND", "python"),
    "processes": None,     # default_processes(): None → cpu_count - 1 (CLI -p 0)
    "chunk_size": 1000,    # audit: passwords per worker task
}
