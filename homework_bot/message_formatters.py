"""Форматирование сообщений о статусе домашней работы"""

from .exceptions import UnknownStatusError
from .models import NO_NEW_STATUSES, HomeworkRecord, HomeworkStatus

HOMEWORK_VERDICTS = {
    HomeworkStatus.APPROVED: "Работа проверена: ревьюеру всё понравилось. Ура!",
    HomeworkStatus.REVIEWING: "Работа взята на проверку ревьюером.",
    HomeworkStatus.REJECTED: "Работа проверена: у ревьюера есть замечания.",
}


def parse_status(homework: HomeworkRecord) -> str:
    """Текст уведомления об изменении статуса работы"""
    if homework.status == NO_NEW_STATUSES:
        return NO_NEW_STATUSES

    try:
        verdict = HOMEWORK_VERDICTS[HomeworkStatus(homework.status)]
    except ValueError as e:
        raise UnknownStatusError(homework.status) from e

    message = f'Изменился статус проверки работы "{homework.homework_name}"'
    if homework.lesson_name:
        message += f' для урока "{homework.lesson_name}"'
    message += f": {verdict}"
    if homework.reviewer_comment:
        message += f"\nКомментарий ревьюера: {homework.reviewer_comment}"
    return message
