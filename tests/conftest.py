"""автоматически настраивать pytest"""

import os
import sys
from unittest.mock import patch

import pytest

# Добавляем корень проекта в sys.path
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
)

from homework_bot.config_manager import Settings


class FakeClient:
    """Подменяет PracticumClient: возвращает заготовленные ответы"""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.requests = []

    def get_api_answer(self, from_date):
        self.requests.append(from_date)
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


class FakeNotifier:
    """Подменяет Notifier: запоминает отправленные сообщения"""

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send_message(self, chat_id, text):
        if self.error is not None:
            raise self.error
        self.sent.append((chat_id, text))


@pytest.fixture
def settings(tmp_path):
    """Настройки с тестовыми токенами"""
    return Settings(
        practicum_token="practicum-token",
        telegram_token="123456:TEST-telegram-token",
        telegram_chat_id="100500",
        endpoint="https://example.test/api/homework_statuses/",
        log_file=str(tmp_path / "logs" / "bot.log"),
        lock_file=str(tmp_path / "bot.lock"),
    )


@pytest.fixture
def mock_requests_get():
    """Mock для requests.get"""
    with patch("requests.Session.get") as mock_get:
        yield mock_get
