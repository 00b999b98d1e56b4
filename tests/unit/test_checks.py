"""
Тесты для рекурсивной проверки (checks)

Проверяет:
1. check / check2 / check3 / check4 принимают корректные гомотопии
2. Сломанный угол обнаруживается при любой арности, в том числе внутри грани
3. Рекурсия действительно вычисляет углы граней
4. Неверная арность отклоняется с ArityError
5. Диспетчеризацию check_n
6. Семантику values_equal (вложенные последовательности, массивы, точные float,
   несравнимые значения дают False, а не исключение)
"""

import logging

import numpy as np
import pytest

from homotopy.combinators import Compose, Cube, Square
from homotopy.core.capability import Homotopy
from homotopy.core.errors import ArityError
from homotopy.primitives import Dirac, Identity, Lerp
from homotopy.validation import (
    check,
    check2,
    check3,
    check4,
    check_n,
    values_equal,
)


class Recorder(Homotopy):
    """Произведение координат; запоминает каждый параметр, в котором её вычислили"""

    def __init__(self, arity):
        self.arity = arity
        self.seen = []

    def f(self, x):
        return 0.0

    def g(self, x):
        return 1.0

    def h(self, x, s):
        coords = (s,) if self.arity == 1 else tuple(s)
        self.seen.append(coords)
        result = 1.0
        for c in coords:
            result *= c
        return result


class WrongEnd(Homotopy):
    """h(x, 1) не совпадает с g(x)"""

    def __init__(self, arity):
        self.arity = arity

    def f(self, x):
        return 0.0

    def g(self, x):
        return 2.0

    def h(self, x, s):
        return 0.0


class ShapeShift(Homotopy):
    """Концы — векторы длины 2, промежуточные значения — длины 3"""

    def f(self, x):
        return np.zeros(2)

    def g(self, x):
        return np.zeros(2)

    def h(self, x, s):
        return np.zeros(3)


@pytest.fixture
def four():
    return Compose(
        Square(Lerp(0.0, 1.0), Lerp(2.0, 3.0)),
        Square(Identity(), Identity()),
        split=True,
    )


# =============================================================================
# WELL-FORMED HOMOTOPIES
# =============================================================================


class TestChecksAccept:
    """Корректные гомотопии проходят при любой арности"""

    def test_check(self):
        assert check(Lerp(0.0, 1.0), ())
        assert check(Dirac(), ())

    def test_check2(self):
        assert check2(Square(Lerp(0.0, 1.0), Dirac()), ((), ()))

    def test_check3(self):
        assert check3(Cube(Lerp(0.0, 1.0), Dirac(), Lerp(5.0, -5.0)), ((), (), ()))

    def test_check4(self, four):
        assert four.arity == 4
        assert check4(four, ((), ()))

    def test_recorder_is_well_formed(self):
        for arity, checker in ((1, check), (2, check2), (3, check3), (4, check4)):
            assert checker(Recorder(arity), ())


# =============================================================================
# FAILURES
# =============================================================================


class TestChecksReject:
    """Сломанные гомотопии дают False"""

    def test_check_wrong_end(self):
        assert not check(WrongEnd(1), ())

    @pytest.mark.parametrize(
        "arity, checker", [(2, check2), (3, check3), (4, check4)]
    )
    def test_wrong_end_any_arity(self, arity, checker):
        assert not checker(WrongEnd(arity), ())

    def test_nan_output_never_equal(self):
        nan_line = Lerp(float("nan"), 1.0)
        assert not check(nan_line, ())

    def test_broken_operand_inside_square(self):
        """Квадрат над сломанным операндом падает на собственных углах"""
        assert not check2(Square(WrongEnd(1), Lerp(0.0, 1.0)), ((), ()))

    def test_failure_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="homotopy.validation.checks")
        assert not check(WrongEnd(1), ())
        assert "h(x, corner) != g(x)" in caplog.text

    def test_mismatched_array_shapes_are_unequal(self):
        """Сравнение массивов разной формы даёт False, а не ValueError"""
        assert not check(ShapeShift(), ())


# =============================================================================
# RECURSION
# =============================================================================


class TestRecursion:
    """Рекурсия по граням вычисляет каждый угол грани"""

    def test_check2_visits_square_corners(self):
        rec = Recorder(2)
        assert check2(rec, ())
        for c in ((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 0.0)):
            assert c in rec.seen

    def test_check3_visits_all_cube_corners(self):
        rec = Recorder(3)
        assert check3(rec, ())
        corners = {
            (a, b, c) for a in (0.0, 1.0) for b in (0.0, 1.0) for c in (0.0, 1.0)
        }
        assert corners <= set(rec.seen)

    def test_check4_visits_all_tesseract_corners(self):
        rec = Recorder(4)
        assert check4(rec, ())
        corners = {
            (a, b, c, d)
            for a in (0.0, 1.0)
            for b in (0.0, 1.0)
            for c in (0.0, 1.0)
            for d in (0.0, 1.0)
        }
        assert corners <= set(rec.seen)


# =============================================================================
# ARITY
# =============================================================================


class TestArity:
    """Предикаты отклоняют гомотопии неверной арности"""

    def test_check_on_square(self):
        with pytest.raises(ArityError, match="check must be a 1-parameter"):
            check(Square(Lerp(0.0, 1.0), Lerp(0.0, 1.0)), ((), ()))

    def test_check2_on_scalar(self):
        with pytest.raises(ArityError, match="check2"):
            check2(Lerp(0.0, 1.0), ())

    def test_check3_on_square(self):
        with pytest.raises(ArityError):
            check3(Square(Lerp(0.0, 1.0), Lerp(0.0, 1.0)), ((), ()))

    def test_check4_on_cube(self):
        with pytest.raises(ArityError):
            check4(Cube(Dirac(), Dirac(), Dirac()), ((), (), ()))


class TestCheckN:
    """Тесты для check_n"""

    def test_dispatch(self, four):
        assert check_n(Lerp(0.0, 1.0), ())
        assert check_n(Square(Dirac(), Dirac()), ((), ()))
        assert check_n(Cube(Dirac(), Dirac(), Dirac()), ((), (), ()))
        assert check_n(four, ((), ()))
        assert not check_n(WrongEnd(3), ())

    def test_unsupported_arity(self):
        with pytest.raises(ArityError, match="arity must be in"):
            check_n(WrongEnd(5), ())


# =============================================================================
# EQUALITY
# =============================================================================


class TestValuesEqual:
    """Тесты для values_equal"""

    def test_scalars_are_exact(self):
        assert values_equal(1.0, 1.0)
        assert not values_equal(0.1 + 0.2, 0.3)

    def test_nested_sequences(self):
        assert values_equal(((1.0, 2.0), 3.0), ((1.0, 2.0), 3.0))
        assert values_equal([1.0, (2.0, 3.0)], (1.0, [2.0, 3.0]))
        assert not values_equal((1.0, 2.0), (1.0, 2.0, 3.0))
        assert not values_equal(((1.0, 2.0), 3.0), ((1.0, 2.5), 3.0))

    def test_arrays(self):
        assert values_equal(np.array([1.0, 2.0]), np.array([1.0, 2.0]))
        assert not values_equal(np.array([1.0, 2.0]), np.array([1.0, 2.5]))

    def test_arrays_of_different_shapes(self):
        assert not values_equal(np.zeros(2), np.zeros(3))
        assert not values_equal(np.zeros((2, 1)), np.zeros((1, 2)))
        assert not values_equal((np.zeros(2), 1.0), (np.zeros(3), 1.0))

    def test_other_types(self):
        assert values_equal("a", "a")
        assert values_equal(True, True)
        assert not values_equal(None, 0.0)
