"""
Errors — Таксономия исключений алгебры гомотопий

Вычисление корректно построенной гомотопии тотально: `f`, `g` и `h` никогда
не выбрасывают исключений. Все ошибки ниже возникают при КОНСТРУИРОВАНИИ
комбинатора (или на входе предиката валидации), но не во время вычисления.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Несовпадение арности отклоняется до вычисления любого значения
2. Значение без `* float` / `+` никогда не доходит до вычисления Lerp/Bezier
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class HomotopyError(Exception):
    """Базовый класс всех ошибок алгебры гомотопий."""
    pass


class ArityError(HomotopyError, TypeError):
    """
    Несовпадение арности параметра.

    Возникает когда:
    1. Комбинатор строится над операндами несовместимой арности
       (Square над 2-параметрическим операндом, Compose выше MAX_ARITY, ...)
    2. Запрошена грань по оси, которой нет у родителя
    3. Предикат валидации получил гомотопию неверной арности
    """
    pass


class CapabilityError(HomotopyError, TypeError):
    """
    Значения домена не поддерживают арифметику интерполирующего примитива.

    Lerp и кривые Безье требуют `value * float` и `value + value`
    для каждой пары смешиваемых значений.
    """
    pass


class FaceValueError(HomotopyError, ValueError):
    """
    Значение грани вне границы гиперкуба.

    Грань фиксирует координату ровно в 0.0 или 1.0; произвольное значение
    задаётся сечением (CrossSection).
    """
    pass
