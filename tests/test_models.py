"""Тесты проверки ответа API"""

import pytest
from pydantic import ValidationError

from homework_bot.exceptions import SchemaError
from homework_bot.models import HomeworkRecord, check_response


def test_check_response_valid():
    payload = {
        "homeworks": [
            {
                "homework_name": "hw1",
                "status": "approved",
                "reviewer_comment": "Отлично",
                "lesson_name": "Спринт 1",
            },
            {"homework_name": "hw0", "status": "rejected"},
        ],
        "current_date": 1000,
    }
    response = check_response(payload)

    assert len(response.homeworks) == len(payload["homeworks"])
    assert response.current_date == 1000
    first, second = response.homeworks
    assert first == HomeworkRecord(
        homework_name="hw1",
        status="approved",
        reviewer_comment="Отлично",
        lesson_name="Спринт 1",
    )
    assert second.homework_name == "hw0"
    assert second.status == "rejected"
    assert second.reviewer_comment == ""
    assert second.lesson_name == ""


def test_check_response_empty_list():
    response = check_response({"homeworks": [], "current_date": 2000})
    assert response.homeworks == []
    assert response.current_date == 2000


def test_optional_fields_mistyped_default_to_empty():
    payload = {
        "homeworks": [
            {
                "homework_name": "hw1",
                "status": "reviewing",
                "reviewer_comment": None,
                "lesson_name": 42,
            }
        ]
    }
    homework = check_response(payload).homeworks[0]
    assert homework.reviewer_comment == ""
    assert homework.lesson_name == ""


def test_current_date_is_optional():
    assert check_response({"homeworks": []}).current_date is None


@pytest.mark.parametrize(
    "payload,field",
    [
        ({"current_date": 1000}, "homeworks"),
        ({"homeworks": "hw1"}, "homeworks"),
        ({"homeworks": {"homework_name": "hw1"}}, "homeworks"),
        ({"homeworks": ["hw1"]}, "homeworks.0"),
        (
            {"homeworks": [{"homework_name": "hw1", "status": "approved"}, 7]},
            "homeworks.1",
        ),
        ({"homeworks": [{"status": "approved"}]}, "homeworks.0.homework_name"),
        (
            {"homeworks": [{"homework_name": 1, "status": "approved"}]},
            "homeworks.0.homework_name",
        ),
        ({"homeworks": [{"homework_name": "hw1"}]}, "homeworks.0.status"),
        (
            {"homeworks": [{"homework_name": "hw1", "status": None}]},
            "homeworks.0.status",
        ),
    ],
)
def test_check_response_schema_errors(payload, field):
    with pytest.raises(SchemaError) as exc_info:
        check_response(payload)
    assert exc_info.value.field == field
    assert field in str(exc_info.value)


def test_check_response_reports_first_error():
    payload = {"homeworks": [{"homework_name": 1, "status": 2}]}
    with pytest.raises(SchemaError) as exc_info:
        check_response(payload)
    assert exc_info.value.field == "homeworks.0.homework_name"
    assert exc_info.value.reason == "не является строкой"


def test_homework_record_is_immutable():
    homework = HomeworkRecord(homework_name="hw1", status="approved")
    with pytest.raises(ValidationError):
        homework.status = "rejected"


def test_fractional_current_date_truncated():
    payload = {
        "homeworks": [{"homework_name": "hw1", "status": "approved"}],
        "current_date": 1000.5,
    }
    response = check_response(payload)
    assert response.current_date == 1000
    assert len(response.homeworks) == 1


def test_non_numeric_current_date_rejected():
    with pytest.raises(SchemaError) as exc_info:
        check_response({"homeworks": [], "current_date": "завтра"})
    assert exc_info.value.field == "current_date"
