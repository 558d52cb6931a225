"""Отправка сообщений в Telegram"""

import logging
from typing import Union

from telegram import Bot
from telegram.error import TelegramError

from .exceptions import DeliveryError

logger = logging.getLogger(__name__)


class Notifier:
    """Отправляет текстовые сообщения через Bot API"""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_message(self, chat_id: Union[int, str], text: str):
        """Одна попытка отправки, ошибка Telegram -> DeliveryError"""
        try:
            await self.bot.send_message(chat_id=chat_id, text=text)
        except TelegramError as e:
            raise DeliveryError(
                f"Ошибка при отправке сообщения в Telegram: {e}"
            ) from e
        logger.info("Сообщение отправлено в чат %s: %s", chat_id, text)
