"""Периодическая проверка статуса домашней работы"""

import asyncio
import logging
from typing import Union

from .exceptions import (
    DeliveryError,
    FetchError,
    SchemaError,
    UnknownStatusError,
)
from .message_formatters import parse_status
from .models import (
    NO_NEW_STATUSES,
    ApiResponse,
    HomeworkRecord,
    PollState,
    check_response,
)
from .notifier import Notifier
from .practicum_client import PracticumClient

logger = logging.getLogger(__name__)


async def get_homeworks(client: PracticumClient, from_date: int) -> ApiResponse:
    """Запрос к API в отдельном потоке и проверка ответа"""
    payload = await asyncio.to_thread(client.get_api_answer, from_date)
    return check_response(payload)


async def get_status_report(client: PracticumClient, from_date: int) -> str:
    """Сообщение о статусе первой работы или заглушка, если работ нет

    FetchError, SchemaError и UnknownStatusError пробрасываются.
    """
    response = await get_homeworks(client, from_date)
    if response.homeworks:
        homework = response.homeworks[0]
    else:
        homework = HomeworkRecord(homework_name="", status=NO_NEW_STATUSES)
    return parse_status(homework)


class StatusPoller:
    """Проверяет статус работы и уведомляет только об изменениях

    Единственный владелец PollState: состояние меняется только здесь.
    """

    def __init__(
        self,
        client: PracticumClient,
        notifier: Notifier,
        chat_id: Union[int, str],
        state: PollState,
    ):
        self.client = client
        self.notifier = notifier
        self.chat_id = chat_id
        self.state = state

    async def check_homeworks(self):
        """Один цикл опроса"""
        logger.info(
            "Проверка статуса домашних работ (from_date=%s)...",
            self.state.from_date,
        )

        try:
            response = await get_homeworks(self.client, self.state.from_date)
        except FetchError as e:
            logger.error("Не удалось получить ответ от API: %s", e)
            return
        except SchemaError as e:
            logger.error("Неверный ответ от API: %s", e)
            return

        if response.current_date is not None:
            self.state.from_date = response.current_date

        if not response.homeworks:
            logger.info("Результат запроса к API: %s", NO_NEW_STATUSES)
            return

        try:
            message = parse_status(response.homeworks[0])
        except UnknownStatusError as e:
            logger.error("Ошибка при разборе статуса домашней работы: %s", e)
            return

        if message == self.state.last_message:
            logger.debug("Статус работы не изменился")
            return

        try:
            await self.notifier.send_message(self.chat_id, message)
        except DeliveryError as e:
            logger.error("%s", e)
            return

        self.state.last_message = message
