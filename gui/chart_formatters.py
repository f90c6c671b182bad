"""
Форматирование подписей графика и таблицы.
"""

from datetime import date


def format_axis_date(day: date) -> str:
    """Подпись даты на оси: MM/dd."""
    return day.strftime("%m/%d")


def format_axis_value(value: float) -> str:
    """Подпись значения на оси: целое число без дробной части."""
    return f"{int(value)}"


def format_table_date(day: date) -> str:
    """Короткая дата для таблицы: M/d/yy."""
    return f"{day.month}/{day.day}/{day.strftime('%y')}"


def format_table_value(value: int) -> str:
    return f"{value}"
