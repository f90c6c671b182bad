"""
Подбор "красивых" значений для делений оси.

Реализация алгоритма loose labeling из Graphics Gems
("Nice Numbers for Graph Labels", Paul Heckbert).
"""

import math
from typing import List, Optional

from loguru import logger

# Шаг сетки для вырожденного диапазона (все значения одинаковые)
FLAT_RANGE_STEP = 1.0

# Минимальный шаг для счетных (целых) данных
COUNT_MIN_STEP = 1.0


def nice_number(x: float, round_result: bool) -> float:
    """
    Находит "красивое" число (1, 2, 5 или 10, умноженное на степень 10),
    примерно равное x.

    Параметры:
        x: Положительное число.
        round_result: True - округлять до ближайшего, False - брать не меньшее.

    Исключения:
        ValueError: Если x <= 0 (логарифм не определен).
    """
    if not x > 0 or math.isinf(x):
        raise ValueError(f"nice_number требует положительное конечное число, получено {x}")
    exp = math.floor(math.log10(x))
    f = x / 10 ** exp
    if round_result:
        if f < 1.5:
            nf = 1.0
        elif f < 3.0:
            nf = 2.0
        elif f < 7.0:
            nf = 5.0
        else:
            nf = 10.0
    else:
        if f <= 1.0:
            nf = 1.0
        elif f <= 2.0:
            nf = 2.0
        elif f <= 5.0:
            nf = 5.0
        else:
            nf = 10.0
    return nf * 10 ** exp


def _fraction_digits(step: float) -> int:
    """Число знаков после запятой, нужное для шага step."""
    return max(-math.floor(math.log10(step)), 0)


def _flat_label(minimum: float, maximum: float) -> List[float]:
    """Два деления с фиксированным шагом для вырожденного диапазона."""
    start = math.floor(minimum / FLAT_RANGE_STEP) * FLAT_RANGE_STEP
    end = max(start + FLAT_RANGE_STEP, math.ceil(maximum / FLAT_RANGE_STEP) * FLAT_RANGE_STEP)
    return [start, end]


def loose_label(minimum: float, maximum: float, ticks: int, min_step: Optional[float] = None) -> List[float]:
    """
    Возвращает деления оси, с запасом охватывающие диапазон [minimum, maximum].

    Результат упорядочен по возрастанию, шаг постоянный,
    первое деление <= minimum, последнее >= maximum.

    Параметры:
        minimum: Минимальное значение данных.
        maximum: Максимальное значение данных.
        ticks: Желаемое число делений (не меньше 2).
        min_step: Нижняя граница шага (например, 1 для целых значений).

    Исключения:
        ValueError: Если ticks < 2 или minimum > maximum.
    """
    if ticks < 2:
        raise ValueError(f"Нужно не меньше 2 делений, получено {ticks}")
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) больше maximum ({maximum})")

    if maximum - minimum <= 0:
        # Плоский ряд: фиксированный шаг вместо log10(0)
        return _flat_label(minimum, maximum)

    value_range = nice_number(maximum - minimum, False)
    step = nice_number(value_range / (ticks - 1), True)
    if min_step is not None and step < min_step:
        step = min_step
    grid_min = math.floor(minimum / step) * step
    grid_max = math.ceil(maximum / step) * step
    digits = _fraction_digits(step)

    result = []
    k = 0
    value = grid_min
    while value < grid_max + 0.5 * step:
        result.append(round(value, digits))
        k += 1
        value = grid_min + k * step

    # Диапазон меньше точности float: сетка вырождается в повторы
    if (len(result) < 2 or result[0] > minimum or result[-1] < maximum
            or any(b <= a for a, b in zip(result, result[1:]))):
        logger.debug(f"Сетка для [{minimum}, {maximum}] вырождена, используем шаг {FLAT_RANGE_STEP}")
        return _flat_label(minimum, maximum)
    return result


def value_ticks(minimum: float, maximum: float, ticks: int) -> List[float]:
    """
    Деления оси для счетных данных (случаи, смерти, тесты).

    Счетные значения целые и не бывают отрицательными: шаг не меньше 1,
    деления ниже нуля отбрасываются, а ось начинается с 0.
    """
    labels = loose_label(minimum, maximum, ticks, min_step=COUNT_MIN_STEP)
    if labels[0] >= 0:
        return labels
    positive = [value for value in labels if value > 0]
    return [0.0] + positive if positive else [0.0, FLAT_RANGE_STEP]
