"""
Domain errors — нарушения области определения формул роста

Все формулы пакета являются чистыми функциями. Любой вход, при котором формула
даёт деление на ноль, логарифм неположительного числа или переполнение,
отклоняется исключением ДО того, как NaN/Inf попадут к вызывающему коду.

Иерархия:
    DomainError (ValueError)
    ├── InvalidPeriod       doubling period / time constant == 0
    ├── InvalidRatio        неположительное значение внутри log2(a / b)
    ├── UndefinedPeriod     период нельзя вывести из наблюдений
    ├── InvalidBandwidth    bandwidth <= 0
    └── ProjectionOverflow  конечные входы, бесконечный результат
"""


class DomainError(ValueError):
    """Базовое нарушение domain для формул экспоненциального роста."""


class InvalidPeriod(DomainError):
    """
    Недопустимый период удвоения.

    doubling_period == 0 превращает показатель 2^(t / T) в деление на ноль.
    """


class InvalidRatio(DomainError):
    """
    Отношение под log2 не определено.

    log2(target / base) требует base > 0 и target > 0.
    """


class UndefinedPeriod(DomainError):
    """
    Период удвоения не определён по наблюдениям.

    current == base даёт log2(1) = 0 в знаменателе.
    """


class InvalidBandwidth(DomainError):
    """Bandwidth должен быть положительным целым."""


class ProjectionOverflow(DomainError):
    """Результат вышел за пределы float при конечных входах."""
