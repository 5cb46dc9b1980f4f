# tests/conftest.py
# Wspólny dokument przykładowy: dwie gałęzie, pola różnych typów,
# głębokość z wiodących znaków sterujących (\x01 = jeden poziom).

import pytest

from rules_text import parse_document

SAMPLE_TEXT = (
    "Продаж:\n"
    "\x01Замовлення:\n"
    "?N Сума:·100·500\n"
    "?C Оплата:Спосіб·1·Готівка·2·Картка\n"
    "?S Клієнт:ТОВ Ромашка·40\n"
    "Поля позначені * обов'язкові\n"
    "\x01Повернення:\n"
    "?R Документ:R·37\n"
    "?T Причина:multiline\n"
    "Склад:\n"
    "\x01Прихід:\n"
    "#Позиції:·Назва·Кількість\n"
    "$\n"
)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_report():
    return parse_document(SAMPLE_TEXT)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
