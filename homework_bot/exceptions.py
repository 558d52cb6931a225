"""Исключения бота проверки домашних работ"""

from typing import Iterable


class HomeworkBotError(Exception):
    """Базовое исключение бота"""


class ConfigError(HomeworkBotError):
    """Отсутствуют или некорректны переменные окружения"""

    def __init__(self, message: str, missing: Iterable[str] = ()):
        super().__init__(message)
        self.missing = list(missing)


class FetchError(HomeworkBotError):
    """Не удалось получить ответ от API Практикума"""


class ApiUnavailableError(FetchError):
    """Сетевая ошибка при запросе к API"""


class ApiStatusError(FetchError):
    """API ответил кодом, отличным от 200"""

    def __init__(self, status_code: int):
        super().__init__(
            f"Запрос к API завершился с кодом статуса: {status_code}"
        )
        self.status_code = status_code


class ApiJSONError(FetchError):
    """Тело ответа API не является JSON-объектом"""


class SchemaError(HomeworkBotError):
    """Ответ API не соответствует ожидаемой структуре"""

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Неверный формат ответа: поле '{field}' - {reason}"
        )
        self.field = field
        self.reason = reason


class UnknownStatusError(HomeworkBotError):
    """Незадокументированный статус домашней работы"""

    def __init__(self, status: str):
        super().__init__(f"Неизвестный статус домашней работы: {status}")
        self.status = status


class DeliveryError(HomeworkBotError):
    """Не удалось отправить сообщение в Telegram"""
