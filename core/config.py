import os

from pydantic import BaseModel, Field

from core.errors import InvalidSettingError, MissingApiKeyError

API_KEY_ENV = "FREEPIK_API_KEY"
TIMEOUT_ENV = "FREEPIK_TIMEOUT"
LOG_LEVEL_ENV = "FREEPIK_LOG_LEVEL"
DEFAULT_BASE_URL = "https://api.freepik.com/v1"


class ProcessConfig(BaseModel, frozen=True):
    """
    Process-wide settings, built once at startup.
    Passed explicitly to the client; nothing reads the environment later.
    """

    api_key: str = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ProcessConfig":
        api_key = os.getenv(API_KEY_ENV, "").strip()
        if not api_key:
            raise MissingApiKeyError(API_KEY_ENV)

        return cls(
            api_key=api_key,
            timeout_s=_timeout_from_env(),
            log_level=os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper(),
        )


def _timeout_from_env() -> float:
    raw = os.getenv(TIMEOUT_ENV, "30")
    try:
        timeout = float(raw)
    except ValueError:
        raise InvalidSettingError(TIMEOUT_ENV, raw, "expected a number of seconds") from None
    if not timeout > 0:
        raise InvalidSettingError(TIMEOUT_ENV, raw, "must be greater than 0")
    return timeout
