"""
Тесты для структурных комбинаторов

Проверяет:
1. Compose: общий параметр при равных арностях, иначе позиционное разбиение
2. Сценарий композиции Lerp ∘ DiracFrom (разрывный скачок около 0)
3. Square / Cube: независимое вычисление по осям, диагональ
4. Inverse: обмен концов, инволюция
5. AsVec: мост tuple ⇄ list
6. Map / SMap / sweep
7. Отклонение несовпадающих арностей при построении
"""

import pytest

from homotopy.combinators import (
    AsVec,
    Compose,
    Cube,
    Inverse,
    Map,
    SMap,
    Square,
    blend_points,
    sweep,
)
from homotopy.core.errors import ArityError
from homotopy.primitives import Circle, Dirac, DiracFrom, Identity, Lerp
from homotopy.validation import check, check2, check3, sample_unit_interval


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def line():
    return Lerp(3.0, 10.0)


@pytest.fixture
def square():
    return Square(Lerp(1.0, 5.0), Lerp(11.0, 15.0))


@pytest.fixture
def cube():
    return Cube(Lerp(0.0, 1.0), Lerp(10.0, 20.0), Lerp(-1.0, 1.0))


# =============================================================================
# COMPOSE
# =============================================================================


class TestCompose:
    """Тесты для Compose"""

    def test_composition(self, line):
        """Отрезок от 3 до 10, сдвинутый вниз при s == 0 и вверх в остальных точках"""
        assert line.h((), 0.0) == 3.0
        assert line.h((), 0.5) == 6.5
        assert line.h((), 1.0) == 10.0

        step = DiracFrom(lambda x: x - 2.0, lambda x: x + 2.0)
        c = Compose(line, step)

        assert c.arity == 1
        assert check(c, ())
        assert c.h((), 0.0) == 1.0
        assert c.h((), 0.0000000000000001) == 5.0
        assert c.h((), 0.5) == 8.5
        assert c.h((), 1.0) == 12.0

    def test_then_shorthand(self, line):
        step = DiracFrom(lambda x: x - 2.0, lambda x: x + 2.0)
        assert line.then(step).h((), 0.5) == 8.5

    def test_endpoints_compose(self, line):
        double = DiracFrom(lambda x: 2.0 * x, lambda x: 2.0 * x)
        c = Compose(line, double)
        assert c.f(()) == 6.0
        assert c.g(()) == 20.0

    def test_forced_split_of_scalars(self):
        """Две скалярные гомотопии с split=True дают 2-параметрическую"""
        c = Compose(Lerp(0.0, 10.0), DiracFrom(lambda x: x, lambda x: -x), split=True)
        assert c.arity == 2
        assert c.h((), (0.5, 0.0)) == 5.0
        assert c.h((), (0.5, 0.3)) == -5.0
        assert check2(c, ())

    def test_scalar_then_square(self):
        """Арность 1 в композиции с арностью 2 даёт 3; параметр делится 1 + 2"""
        inner = Lerp(1.0, 2.0)
        outer = Square(Identity(), Lerp(0.0, 4.0)).map(lambda p: p[0])
        # домен outer — пара: подаём (y, ())
        c = Compose(inner.map(lambda y: (y, ())), outer)

        assert c.arity == 3
        assert c.h((), (0.5, 0.9, 0.9)) == 1.5
        assert check3(c, ())

    def test_square_then_scalar(self, square):
        """Арность 2 в композиции с арностью 1 даёт 3; параметр делится 2 + 1"""
        total = DiracFrom(lambda p: p[0] + p[1], lambda p: p[0] - p[1])
        c = Compose(square, total)

        assert c.arity == 3
        assert c.h(((), ()), (0.5, 0.5, 0.0)) == 16.0
        assert c.h(((), ()), (0.5, 0.5, 1.0)) == -10.0
        assert check3(c, ((), ()))

    def test_equal_arities_share_parameter(self, square):
        swap = Square(Identity(), Identity()).map(lambda p: p)
        c = Compose(square.map(lambda p: (p[1], p[0])), swap)
        assert c.arity == 2
        assert c.h(((), ()), (0.5, 0.5)) == (13.0, 3.0)

    def test_arity_overflow_rejected(self, cube, square):
        with pytest.raises(ArityError, match="arity must be in"):
            Compose(cube, square)

    def test_unsupported_operand_arity_rejected(self):
        class Broken:
            arity = 7

            def f(self, x):
                return x

            def g(self, x):
                return x

            def h(self, x, s):
                return x

        with pytest.raises(ArityError):
            Compose(Broken(), Identity())


# =============================================================================
# SQUARE / CUBE
# =============================================================================


class TestSquare:
    """Тесты для Square"""

    def test_check2_holds(self, square):
        assert check2(square, ((), ()))

    def test_independent_axes(self, square):
        assert square.h(((), ()), (0.0, 1.0)) == (1.0, 15.0)
        assert square.h(((), ()), (1.0, 0.0)) == (5.0, 11.0)
        assert square.h(((), ()), (0.25, 0.75)) == (2.0, 14.0)

    def test_diagonal(self, square):
        assert square.diagonal().h(((), ()), 0.5) == (3.0, 13.0)

    def test_default_input(self, square):
        assert square.default_input() == ((), ())
        assert square.hu((0.5, 0.5)) == (3.0, 13.0)

    def test_rejects_multi_parameter_operand(self, square):
        with pytest.raises(ArityError, match="Square operand h1"):
            Square(square, Lerp(0.0, 1.0))

    def test_accepts_duck_typed_operands(self):
        class Constant:
            def f(self, x):
                return 1

            def g(self, x):
                return 1

            def h(self, x, s):
                return 1

        sq = Square(Constant(), Dirac())
        assert sq.h(((), ()), (0.5, 0.0)) == (1, 1.0)
        assert check2(sq, ((), ()))


class TestCube:
    """Тесты для Cube"""

    def test_check3_holds(self, cube):
        assert check3(cube, ((), (), ()))

    def test_independent_axes(self, cube):
        assert cube.hu((0.5, 0.0, 1.0)) == (0.5, 10.0, 1.0)

    def test_diagonal(self, cube):
        assert cube.diagonal().hu(0.5) == (0.5, 15.0, 0.0)

    def test_rejects_multi_parameter_operand(self, square):
        with pytest.raises(ArityError, match="Cube operand h3"):
            Cube(Lerp(0.0, 1.0), Lerp(0.0, 1.0), square)


# =============================================================================
# INVERSE
# =============================================================================


class TestInverse:
    """Тесты для Inverse"""

    def test_swaps_endpoints(self, line):
        inv = Inverse(line)
        assert inv.f(()) == 10.0
        assert inv.g(()) == 3.0
        assert inv.h((), 0.25) == line.h((), 0.75)
        assert check(inv, ())

    def test_involution(self, line):
        twice = line.inverse().inverse()
        assert twice is line
        for s in sample_unit_interval():
            assert twice.h((), s) == line.h((), s)

    def test_constructed_involution(self, line):
        """Inverse(Inverse(h)) совпадает с h с точностью до округления 1 - (1 - s)"""
        twice = Inverse(Inverse(line))
        assert twice.f(()) == line.f(())
        assert twice.g(()) == line.g(())
        for s in sample_unit_interval():
            assert twice.h((), s) == pytest.approx(line.h((), s))

    def test_reverses_every_coordinate(self, square):
        inv = square.inverse()
        assert inv.arity == 2
        assert inv.hu((0.0, 0.25)) == square.hu((1.0, 0.75))
        assert check2(inv, ((), ()))


# =============================================================================
# AS VEC
# =============================================================================


class TestAsVec:
    """Тесты для AsVec"""

    def test_lists_in_lists_out(self):
        swap = DiracFrom(lambda p: p, lambda p: (p[1], p[0]))
        vec = AsVec(swap)
        assert vec.f([1.0, 2.0]) == [1.0, 2.0]
        assert vec.g([1.0, 2.0]) == [2.0, 1.0]
        assert vec.h([1.0, 2.0], 0.5) == [2.0, 1.0]
        assert check(vec, [1.0, 2.0])

    def test_square_output_as_list(self, square):
        vec = square.as_vec()
        assert vec.arity == 2
        assert vec.h([(), ()], (0.5, 0.5)) == [3.0, 13.0]
        assert check2(vec, [(), ()])

    def test_other_values_pass_through(self, line):
        vec = AsVec(line)
        assert vec.h((), 0.5) == 6.5
        assert vec.default_input() == ()

    def test_triples(self, cube):
        vec = AsVec(cube)
        assert vec.hu((0.0, 0.0, 0.0)) == [0.0, 10.0, -1.0]


# =============================================================================
# MAP / SMAP / SWEEP
# =============================================================================


class TestMap:
    """Тесты для Map и SMap"""

    def test_map(self, square):
        summed = Map(square, lambda p: p[0] + p[1])
        assert summed.arity == 2
        assert summed.hu((0.5, 0.5)) == 16.0
        assert check2(summed, ((), ()))

    def test_smap_adds_trailing_parameter(self, line):
        scaled = SMap(line, lambda y, t: y * (1.0 + t))
        assert scaled.arity == 2
        assert scaled.f(()) == 3.0
        assert scaled.g(()) == 20.0
        assert scaled.hu((0.5, 1.0)) == 13.0
        assert check2(scaled, ())

    def test_smap_arity_overflow_rejected(self):
        four = Compose(
            Square(Lerp(0.0, 1.0), Lerp(0.0, 1.0)),
            Square(Identity(), Identity()),
            split=True,
        )
        assert four.arity == 4
        with pytest.raises(ArityError):
            four.smap(lambda y, t: y)


class TestSweep:
    """Тесты для sweep"""

    def test_blend_points(self):
        assert blend_points(((0.0, 1.0), (0.0, 2.0)), 0.5) == (0.0, 1.5)

    def test_inner_to_outer_circle(self):
        inner = Circle(center=(0.0, 0.0), radius=1.0)
        outer = Circle(center=(0.0, 0.0), radius=2.0)
        ring = sweep(inner, outer)

        assert ring.arity == 2
        assert ring.fu() == (1.0, 0.0)
        assert ring.gu() == (2.0, 0.0)
        x, y = ring.hu((0.25, 0.5))
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(1.5)
        assert check2(ring, ring.default_input())

    def test_rejects_multi_parameter_curve(self, square):
        with pytest.raises(ArityError):
            sweep(square, Circle())
