"""Взаимодействие с API Практикума (получение статусов домашних работ)"""

import logging
from http import HTTPStatus
from logging import Logger
from typing import Dict

import requests

from .config_manager import Settings
from .exceptions import ApiJSONError, ApiStatusError, ApiUnavailableError

logger: Logger = logging.getLogger(__name__)


class PracticumClient:
    """Клиент эндпоинта homework_statuses"""

    def __init__(self, settings: Settings, session: requests.Session = None):
        self.endpoint = settings.endpoint
        self.timeout = settings.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {"Authorization": f"OAuth {settings.practicum_token}"}
        )

    def get_api_answer(self, from_date: int) -> Dict:
        """Запрос статусов работ, изменившихся после from_date"""
        params = {"from_date": from_date}

        try:
            response = self.session.get(
                self.endpoint, params=params, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise ApiUnavailableError(
                f"Ошибка при выполнении запроса к API: {e}"
            ) from e

        if response.status_code != HTTPStatus.OK:
            raise ApiStatusError(response.status_code)

        try:
            data = response.json()
        except requests.exceptions.JSONDecodeError as e:
            raise ApiJSONError(
                f"Ошибка при декодировании ответа от API: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ApiJSONError("Ответ API не является JSON-объектом")

        logger.info("Успешно получен ответ от API (from_date=%s)", from_date)
        return data
