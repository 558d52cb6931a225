#!/usr/bin/env python3
"""Telegram бот для отслеживания статуса проверки домашних работ Практикума"""

import logging
import sys

from dotenv import load_dotenv

from homework_bot.config_manager import ConfigManager
from homework_bot.exceptions import ConfigError
from homework_bot.telegram_bot import HomeworkStatusBot
from homework_bot.utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Основная функция"""
    # Загружаем переменные из .env файла
    load_dotenv()
    config_manager = ConfigManager()
    setup_logging(config_manager.log_file)
    logger.info("Бот запущен")

    try:
        settings = config_manager.load_settings()
    except ConfigError as e:
        logger.critical("%s", e)
        sys.exit(1)

    bot = HomeworkStatusBot(settings)
    bot.run()
    logger.info("Бот остановлен")


if __name__ == "__main__":
    main()
