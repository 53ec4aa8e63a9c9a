"""Тесты для CalculatorSession.

Coverage:
- Инициализация из конфигурации
- Приём и отклонение ввода (парсинг, положительность, диапазон комиссии)
- Синхронизация цена ↔ слайдер
- Перекалибровка слайдеров
- Отображение (render) и снапшот
- Логирование отклонённых изменений
"""

import logging

import jsonschema
import pytest

from src.calculator import (
    CalculatorConfig,
    CalculatorSession,
    FieldId,
    SessionDefaults,
    SliderConfig,
    parse_float,
)
from src.core.contracts import CalculatorOutputValidator
from src.core.math.numerical_safeguards import InvalidArgument


@pytest.fixture
def session():
    return CalculatorSession()


class TestParseFloat:
    """Парсинг сырого ввода."""

    def test_strings(self):
        assert parse_float("1.5") == 1.5
        assert parse_float("  42 ") == 42.0
        assert parse_float("1e-3") == 0.001

    def test_numbers(self):
        assert parse_float(3) == 3.0
        assert parse_float(2.5) == 2.5

    def test_unparseable(self):
        assert parse_float("abc") is None
        assert parse_float("") is None
        assert parse_float(None) is None
        assert parse_float(True) is None

    def test_int_beyond_float_range(self):
        """Целое вне диапазона float64 не парсится."""
        assert parse_float(10**400) is None
        assert parse_float(-(10**400)) is None


class TestInitialization:
    """Создание сессии."""

    def test_defaults(self, session):
        """Значения по умолчанию и начальный пересчёт."""
        assert session.state.initial_liquidity == 1000.0
        assert session.state.final_price == 1.1
        assert session.last_result.result.base_wallet_delta > 0
        assert session.initial_slider == 0.5

    def test_custom_defaults(self):
        """SessionDefaults из конфигурации."""
        config = CalculatorConfig(
            session_defaults=SessionDefaults(initial_liquidity=50.0, initial_price=4.0, final_price=4.0)
        )
        session = CalculatorSession(config)

        assert session.last_result.initial.base_reserves() == pytest.approx(25.0)
        assert session.last_result.result.is_noop()

    def test_initialization_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="src.calculator.session")
        CalculatorSession()

        assert "CPMM calculator session initialized" in caplog.text


class TestFieldEdits:
    """Изменение полей ввода."""

    def test_liquidity_accepted(self, session):
        outcome = session.set_initial_liquidity("2000")

        assert outcome.accepted
        assert outcome.field == FieldId.INITIAL_LIQUIDITY
        assert outcome.value == 2000.0
        assert session.last_result.initial.liquidity == 2000.0
        assert session.last_result.final.liquidity == 2000.0

    @pytest.mark.parametrize("raw", ["0", "-5", "abc", "", "nan", "inf"])
    def test_liquidity_rejected(self, session, raw):
        """Отклонённое изменение сохраняет прежнее значение."""
        before = session.last_result

        outcome = session.set_initial_liquidity(raw)

        assert not outcome.accepted
        assert outcome.value is None
        assert outcome.reason
        assert session.state.initial_liquidity == 1000.0
        assert session.last_result is before

    def test_huge_integer_rejected(self, session):
        outcome = session.set_initial_liquidity(10**400)

        assert not outcome.accepted
        assert session.state.initial_liquidity == 1000.0

    def test_overflowing_reserves_rejected(self, session):
        """Конечная liquidity, при которой резервы переполняются, отклоняется."""
        session.set_initial_price("0.25")
        session.set_final_price("0.2")
        before = session.last_result

        outcome = session.set_initial_liquidity("1e308")

        assert not outcome.accepted
        assert "outside float range" in outcome.reason
        assert session.state.initial_liquidity == 1000.0
        assert session.last_result is before
        assert session.last_result.is_finite()
        assert CalculatorOutputValidator().is_valid(session.render())

    def test_overflowing_price_rejected(self, session):
        """Цена, при которой base резервы уходят в inf, отклоняется."""
        assert session.set_initial_liquidity("1e300").accepted

        outcome = session.set_final_price("1e-20")

        assert not outcome.accepted
        assert session.state.final_price == 1.1
        result = session.last_result.result
        assert result.base_wallet_delta > 0
        assert result.quote_fee_collected > 0

    @pytest.mark.parametrize("raw", ["0", "-1.2"])
    def test_price_rejected(self, session, raw):
        assert not session.set_initial_price(raw).accepted
        assert not session.set_final_price(raw).accepted
        assert session.state.initial_price == 1.0
        assert session.state.final_price == 1.1

    @pytest.mark.parametrize("raw,accepted", [("0", True), ("99.99", True), ("100", False), ("-0.1", False)])
    def test_fee_range(self, session, raw, accepted):
        outcome = session.set_fee_percent(raw)

        assert outcome.accepted is accepted
        if not accepted:
            assert session.state.fee_percent == 0.3

    def test_fee_changes_collected(self, session):
        session.set_fee_percent("1")
        result = session.last_result.result

        assert result.quote_fee_collected == pytest.approx(-result.quote_wallet_delta * 0.01)

    def test_final_price_flips_direction(self, session):
        """Цена ниже начальной — продажа base."""
        session.set_final_price("0.81")
        result = session.last_result.result

        assert result.base_wallet_delta < 0
        assert result.base_fee_collected > 0
        assert result.quote_fee_collected == 0.0

    def test_rejection_logged(self, session, caplog):
        caplog.set_level(logging.DEBUG, logger="src.calculator.session")
        session.set_initial_liquidity("-5")

        assert "Rejected edit of initial-liquidity" in caplog.text


class TestSliderSync:
    """Синхронизация цена ↔ слайдер."""

    def test_price_edit_moves_slider(self, session):
        session.set_final_price("1000")

        assert session.final_slider == pytest.approx(1.0, abs=1e-12)

    def test_slider_edit_sets_price(self, session):
        outcome = session.set_final_slider("1.0")

        assert outcome.accepted
        assert session.state.final_price == pytest.approx(1000.0, rel=1e-12)
        assert session.final_slider == pytest.approx(1.0, abs=1e-12)
        assert session.render()["final-price"] == "1000.000000"

    def test_initial_slider_edit(self, session):
        session.set_initial_slider(0.0)

        assert session.state.initial_price == pytest.approx(0.001, rel=1e-12)
        assert session.last_result.result.input_side() is not None

    def test_slider_extrapolation_accepted(self, session):
        """Слайдер не ограничен [0, 1]."""
        outcome = session.set_final_slider("1.1")

        assert outcome.accepted
        assert session.state.final_price == pytest.approx(10 ** 3.6, rel=1e-9)

    @pytest.mark.parametrize("raw", ["abc", "nan", "1000", "-1000"])
    def test_slider_unusable_input_rejected(self, session, raw):
        """Непарсируемые позиции и непредставимые цены отклоняются."""
        outcome = session.set_final_slider(raw)

        assert not outcome.accepted
        assert session.state.final_price == 1.1

    def test_widget_clamp_in_render(self, session):
        session.set_final_price("1e6")

        assert session.final_slider == pytest.approx(1.5, abs=1e-12)
        assert session.render()["final-price-slider"] == "1.0"


class TestSliderCalibration:
    """Перекалибровка слайдеров."""

    def test_recalibrate(self, session):
        outcome = session.set_slider_calibration("10", "2")

        assert outcome.accepted
        assert session.state.initial_price == 1.0
        assert session.initial_slider == pytest.approx(0.25, abs=1e-12)

    @pytest.mark.parametrize("center,decades", [("0", "2"), ("10", "0"), ("x", "2"), ("10", "-1")])
    def test_invalid_calibration(self, session, center, decades):
        outcome = session.set_slider_calibration(center, decades)

        assert not outcome.accepted
        assert session.state.center_price == 1.0
        assert session.state.decades == 3.0


class TestRender:
    """Строки отображения."""

    def test_default_render(self, session):
        fields = session.render()

        assert set(fields) == {field.value for field in FieldId} - {FieldId.SLIDER_CALIBRATION.value}
        assert fields["initial-liquidity"] == "1000.000000"
        assert fields["initial-price"] == "1.000000"
        assert fields["final-price"] == "1.100000"
        assert fields["fee-percent"] == "0.300000"
        assert fields["initial-price-slider"] == "0.5"
        assert fields["final-price-slider"] == "0.507"
        assert fields["initial-base-reserves"] == "1000.000000"
        assert fields["initial-quote-reserves"] == "1000.000000"
        assert fields["delta-price"] == "0.100000"
        assert fields["fee-base-collected"] == "0.000000"

    def test_scientific_render(self, session):
        session.set_initial_liquidity("1e-9")

        assert session.render()["initial-base-reserves"] == "1.000000e-09"

    def test_render_checked_against_contract(self, session, monkeypatch):
        """Строка, нарушающая контракт calculator_output, не уходит наружу."""
        monkeypatch.setattr("src.calculator.session.format_number", lambda value: "n/a")

        with pytest.raises(jsonschema.ValidationError):
            session.render()

    def test_contract_check_disabled(self, monkeypatch):
        session = CalculatorSession(CalculatorConfig(validate_contracts=False))
        monkeypatch.setattr("src.calculator.session.format_number", lambda value: "n/a")

        assert session.render()["delta-price"] == "n/a"

    def test_snapshot(self, session):
        session.set_fee_percent("0.05")

        assert session.snapshot() == {
            "initial_liquidity": 1000.0,
            "initial_price": 1.0,
            "final_price": 1.1,
            "fee_percent": 0.05,
            "center_price": 1.0,
            "decades": 3.0,
        }


class TestSliderConfig:
    """Параметры виджета слайдера."""

    def test_clamp(self):
        slider = SliderConfig()

        assert slider.clamp_for_widget(-0.2) == 0.0
        assert slider.clamp_for_widget(0.3) == 0.3
        assert slider.clamp_for_widget(7.0) == 1.0

    def test_snap_to_step(self):
        """Позиция привязывается к ближайшему делению."""
        assert SliderConfig().clamp_for_widget(0.50689) == 0.507
        assert SliderConfig(step=0.25).clamp_for_widget(0.3) == 0.25
        assert SliderConfig(min_value=0.1, step=0.2).clamp_for_widget(0.62) == 0.7

    def test_snap_never_exceeds_max(self):
        assert SliderConfig(step=0.6).clamp_for_widget(0.95) == 1.0

    def test_invalid_bounds(self):
        with pytest.raises(InvalidArgument):
            SliderConfig(min_value=1.0, max_value=0.0)
        with pytest.raises(InvalidArgument):
            SliderConfig(step=0.0)
