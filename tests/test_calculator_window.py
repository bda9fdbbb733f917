import logging

import pytest

pytest.importorskip('PyQt5.QtWidgets')

from calculator import Calculator, DEFAULT_DISPLAY, ERROR_MESSAGE, OPERATOR_ADD  # noqa: E402
from calculator_window import (  # noqa: E402
    BUTTONS,
    DEFAULT_FONT_SIZE,
    OPERATOR_LABELS,
    parse_args,
    press,
    setup_logger,
)


@pytest.fixture
def engine():
    return Calculator()


@pytest.fixture
def clean_logger():
    logger = logging.getLogger('calculator')
    saved = list(logger.handlers)
    logger.handlers = []
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers = saved


def press_all(engine, labels):
    display = DEFAULT_DISPLAY
    for label in labels:
        display = press(engine, label, display)
    return display


class TestLayout:
    def test_every_operator_label_has_a_button(self):
        labels = {label for row in BUTTONS for label in row}
        assert set(OPERATOR_LABELS) <= labels

    def test_every_button_is_handled(self, engine):
        for row in BUTTONS:
            for label in row:
                engine.clear()
                assert isinstance(press(engine, label, '12'), str)


class TestPress:
    def test_simple_addition(self, engine):
        assert press_all(engine, ['1', '2', '+', '3', '=']) == '15'

    def test_chained_operators(self, engine):
        assert press_all(engine, ['5', '+', '3', '×']) == '8'
        assert engine.pending_operator == 'multiply'

    def test_division_by_zero_then_recover(self, engine):
        assert press_all(engine, ['1', '0', '÷', '0', '=']) == ERROR_MESSAGE
        assert press(engine, '7', ERROR_MESSAGE) == '7'
        assert not engine.has_error

    def test_sign_percent_and_backspace(self, engine):
        assert press_all(engine, ['5', '0', '+/-']) == '-50'
        assert press(engine, '%', '-50') == '-0.5'
        assert press(engine, '⌫', '123') == '12'

    def test_decimal_and_clear(self, engine):
        assert press_all(engine, ['.', '5']) == '0.5'
        press(engine, '+', '0.5')
        assert press(engine, 'AC', '0.5') == DEFAULT_DISPLAY
        assert engine.pending_operator is None

    def test_operator_label_maps_to_code(self, engine):
        press(engine, '+', '4')
        assert engine.pending_operator == OPERATOR_ADD

    @pytest.mark.parametrize('display', [None, ''])
    def test_missing_display_defaults_to_zero(self, engine, display):
        assert press(engine, '=', display) == DEFAULT_DISPLAY

    def test_unknown_label_is_noop(self, engine):
        assert press(engine, 'sin', '9') == '9'


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.log is None
        assert args.log_level == 'INFO'
        assert args.font_size == DEFAULT_FONT_SIZE

    def test_overrides(self):
        args = parse_args(['--log', 'calc.log', '--log-level', 'DEBUG', '--font-size', '20'])
        assert args.log == 'calc.log'
        assert args.log_level == 'DEBUG'
        assert args.font_size == 20

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit):
            parse_args(['--log-level', 'LOUD'])


class TestSetupLogger:
    def test_console_and_file_handlers(self, clean_logger, tmp_path):
        log_path = tmp_path / 'calculator.log'
        logger = setup_logger(str(log_path), 'DEBUG')
        assert logger is clean_logger
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG

        logger.warning('[오류] 테스트')
        for h in logger.handlers:
            h.flush()
        assert '[오류] 테스트' in log_path.read_text(encoding='utf-8')

    def test_does_not_duplicate_handlers(self, clean_logger):
        setup_logger()
        setup_logger()
        assert len(clean_logger.handlers) == 1

    def test_engine_logs_error_latch(self, clean_logger, engine, caplog):
        with caplog.at_level(logging.WARNING, logger='calculator'):
            engine.process_operator('divide', '1')
            engine.process_equals('0')
        assert any('[오류]' in r.getMessage() for r in caplog.records)
