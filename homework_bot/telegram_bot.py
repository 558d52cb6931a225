"""Логика Telegram-бота: команды, фоновый опрос и запуск"""

import logging
import time
from datetime import datetime

from apscheduler.events import EVENT_JOB_ERROR, JobExecutionEvent
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from .config_manager import Settings
from .exceptions import (
    DeliveryError,
    FetchError,
    SchemaError,
    UnknownStatusError,
)
from .models import PollState
from .notifier import Notifier
from .poller import StatusPoller, get_status_report
from .practicum_client import PracticumClient
from .utils import file_lock

logger = logging.getLogger(__name__)

GREETING = "Привет! Я бот, который отслеживает статус проверки домашних работ."
STATUS_FAILURE = "Не удалось получить статус домашних работ."


class HomeworkStatusBot:
    """Telegram бот для уведомлений о проверке домашних работ Практикума"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client = PracticumClient(settings)
        self.state = PollState(
            from_date=int(time.time()) - settings.from_date_offset
        )
        self.scheduler = AsyncIOScheduler()
        self.application = None
        self.notifier = None
        self.poller = None

    def build_application(self) -> Application:
        """Создает приложение и регистрирует обработчики"""
        self.application = (
            Application.builder()
            .token(self.settings.telegram_token)
            .post_init(self.on_startup)
            .post_shutdown(self.on_shutdown)
            .build()
        )
        self.notifier = Notifier(self.application.bot)
        self.poller = StatusPoller(
            self.client,
            self.notifier,
            self.settings.telegram_chat_id,
            self.state,
        )

        self.application.add_handler(
            CommandHandler("start", self.start_command)
        )
        # /status ходит в сеть, не блокируем обработку остальных обновлений
        self.application.add_handler(
            CommandHandler("status", self.status_command, block=False)
        )
        self.application.add_error_handler(self.error_handler)
        return self.application

    async def on_startup(self, application: Application):
        """Запуск фонового опроса после инициализации бота"""
        logger.info("Авторизован как @%s", application.bot.username)

        self.scheduler.add_listener(self.on_job_error, EVENT_JOB_ERROR)
        self.scheduler.add_job(
            self.poller.check_homeworks,
            IntervalTrigger(seconds=self.settings.retry_period),
            id="check_homeworks",
            next_run_time=datetime.now(),
            max_instances=1,
            coalesce=True,
        )
        self.scheduler.start()
        logger.info(
            "Бот начал работу: проверка статусов каждые %s с",
            self.settings.retry_period,
        )

    async def on_shutdown(self, application: Application):
        """Остановка планировщика без ожидания текущих задач"""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)

    @staticmethod
    def on_job_error(event: JobExecutionEvent):
        """Журналирует необработанные ошибки фонового опроса"""
        logger.error(
            "Необработанная ошибка в задаче %s: %r\n%s",
            event.job_id,
            event.exception,
            event.traceback,
        )

    async def error_handler(
        self, update: object, context: ContextTypes.DEFAULT_TYPE
    ):
        """Журналирует необработанные ошибки обработчиков команд"""
        logger.error(
            "Ошибка при обработке обновления %s", update, exc_info=context.error
        )

    async def start_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ):
        """Обработчик команды /start"""
        logger.info(
            "Получена команда /start от пользователя с ID %s",
            self._user_id(update),
        )
        await self._reply(update, GREETING)

    async def status_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ):
        """Обработчик команды /status: разовый запрос к API"""
        logger.info(
            "Получена команда /status от пользователя с ID %s",
            self._user_id(update),
        )
        from_date = int(time.time()) - self.settings.status_lookback

        try:
            message = await get_status_report(self.client, from_date)
        except (FetchError, SchemaError, UnknownStatusError) as e:
            logger.error("Не удалось получить статус по команде /status: %s", e)
            message = STATUS_FAILURE
        else:
            logger.info("Результат запроса к API: %s", message)

        await self._reply(update, message)

    async def _reply(self, update: Update, text: str):
        try:
            await self.notifier.send_message(update.effective_chat.id, text)
        except DeliveryError as e:
            logger.error("%s", e)

    @staticmethod
    def _user_id(update: Update):
        user = update.effective_user
        return user.id if user else None

    def run(self):
        """Синхронный запуск бота до получения SIGINT/SIGTERM"""
        try:
            with file_lock(self.settings.lock_file):
                self.build_application()
                logger.info("Запуск Telegram бота...")
                self.application.run_polling(
                    allowed_updates=Update.ALL_TYPES
                )
        except RuntimeError as e:
            logger.error("Ошибка запуска бота: %s", e)
            raise
