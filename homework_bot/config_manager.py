"""Управление конфигурацией бота (чтение настроек из окружения)"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

ENDPOINT = "https://practicum.yandex.ru/api/user_api/homework_statuses/"


@dataclass(frozen=True)
class Settings:
    """Настройки бота"""

    practicum_token: str = field(repr=False)
    telegram_token: str = field(repr=False)
    telegram_chat_id: str
    endpoint: str = ENDPOINT
    retry_period: int = 600
    request_timeout: int = 15
    status_lookback: int = 3600
    from_date_offset: int = 0
    log_file: str = "bot.log"
    lock_file: str = "bot.lock"


class ConfigManager:
    """Менеджер конфигурации, читающий переменные окружения"""

    REQUIRED_VARIABLES = (
        "PRACTICUM_TOKEN",
        "TELEGRAM_TOKEN",
        "TELEGRAM_CHAT_ID",
    )

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    @property
    def log_file(self) -> str:
        """Путь к файлу журнала (доступен до проверки токенов)"""
        return self.environ.get("LOG_FILE") or "bot.log"

    def get_config_status(self) -> Tuple[bool, List[str]]:
        """Проверка полноты конфигурации"""
        missing = [
            name for name in self.REQUIRED_VARIABLES if not self.environ.get(name)
        ]
        return len(missing) == 0, missing

    def load_settings(self) -> Settings:
        """Собирает настройки, бросает ConfigError при ошибке"""
        is_complete, missing = self.get_config_status()
        if not is_complete:
            raise ConfigError(
                f"Отсутствуют переменные окружения: {', '.join(missing)}",
                missing=missing,
            )

        settings = Settings(
            practicum_token=self.environ["PRACTICUM_TOKEN"],
            telegram_token=self.environ["TELEGRAM_TOKEN"],
            telegram_chat_id=self.environ["TELEGRAM_CHAT_ID"],
            endpoint=self.environ.get("PRACTICUM_ENDPOINT") or ENDPOINT,
            retry_period=self._get_int("RETRY_PERIOD", 600, minimum=1),
            request_timeout=self._get_int("REQUEST_TIMEOUT", 15, minimum=1),
            status_lookback=self._get_int("STATUS_LOOKBACK", 3600),
            from_date_offset=self._get_int("FROM_DATE_OFFSET", 0),
            log_file=self.log_file,
            lock_file=self.environ.get("LOCK_FILE") or "bot.lock",
        )
        logger.info(
            "Конфигурация загружена: период опроса %s с, чат %s",
            settings.retry_period,
            settings.telegram_chat_id,
        )
        return settings

    def _get_int(self, name: str, default: int, minimum: int = 0) -> int:
        """Читает целочисленную настройку"""
        raw = self.environ.get(name)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError as e:
            raise ConfigError(
                f"Переменная {name} должна быть целым числом: {raw!r}"
            ) from e
        if value < minimum:
            raise ConfigError(
                f"Переменная {name} должна быть не меньше {minimum}: {value}"
            )
        return value
