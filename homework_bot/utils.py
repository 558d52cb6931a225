"""Вспомогательные функции: журнал и блокировка единственного экземпляра"""

import fcntl
import logging
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_file: str, level: int = logging.INFO):
    """Журнал в файл (дозапись) и дублирование в консоль"""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    # httpx пишет каждый запрос getUpdates на уровне INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


@contextmanager
def file_lock(lock_file: str):
    """Контекстный менеджер для файловой блокировки"""
    with open(lock_file, "w", encoding="UTF-8") as f:
        try:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError as e:
            logger.error(
                "Другой экземпляр бота уже запущен (lock file: %s)", lock_file
            )
            raise RuntimeError(
                "Another instance of the bot is already running"
            ) from e
        try:
            yield
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
