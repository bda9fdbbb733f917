# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import argparse
import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
)

from calculator import (
    Calculator,
    DEFAULT_DISPLAY,
    OPERATOR_ADD,
    OPERATOR_SUBTRACT,
    OPERATOR_MULTIPLY,
    OPERATOR_DIVIDE,
)

DEFAULT_FONT_SIZE = 28
BUTTON_HEIGHT = 56
WINDOW_SIZE = (360, 520)
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

BUTTONS = [
    ['AC',  '⌫', '%', '÷'],
    ['7',   '8', '9', '×'],
    ['4',   '5', '6', '−'],
    ['1',   '2', '3', '+'],
    ['+/-', '0', '.', '='],
]

# UI 기호 → 엔진 연산자 코드
OPERATOR_LABELS = {
    '+': OPERATOR_ADD,
    '−': OPERATOR_SUBTRACT,
    '×': OPERATOR_MULTIPLY,
    '÷': OPERATOR_DIVIDE,
}


def setup_logger(log_path=None, level='INFO'):
    """콘솔과 (경로가 있으면) 파일(UTF-8)로 로그를 남기는 로거를 설정한다."""
    logger = logging.getLogger('calculator')
    logger.setLevel(level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def press(engine: Calculator, label: str, display) -> str:
    """버튼 하나를 엔진 호출 하나로 옮기고 새 표시 문자열을 돌려준다."""
    display = display or DEFAULT_DISPLAY

    if label == 'AC':
        return engine.clear()
    if label == '⌫':
        return engine.process_backspace(display)
    if label == '+/-':
        return engine.toggle_sign(display)
    if label == '%':
        return engine.process_percent(display)
    if label == '=':
        return engine.process_equals(display)
    if label == '.':
        return engine.process_decimal(display)
    if label in OPERATOR_LABELS:
        return engine.process_operator(OPERATOR_LABELS[label], display)
    if label.isdigit():
        return engine.process_digit(label, display)
    return display


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼 → Calculator 엔진 연결"""

    def __init__(self, font_size: int = DEFAULT_FONT_SIZE) -> None:
        super().__init__()
        self.engine = Calculator()
        self._logger = logging.getLogger('calculator')
        self._build_ui(font_size)

    def _build_ui(self, font_size: int) -> None:
        self.setWindowTitle('Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(font_size)
        self.display.setFont(font)
        self.display.setText(DEFAULT_DISPLAY)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(BUTTON_HEIGHT)
                btn.setCursor(Qt.PointingHandCursor)
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c)

        self.resize(*WINDOW_SIZE)

    def on_button(self, ch: str) -> None:
        before = self.display.text()
        after = press(self.engine, ch, before)
        self._logger.debug('[입력] %s: %r -> %r', ch, before, after)
        self.display.setText(after)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='사칙연산 계산기(즉시 실행 방식)를 실행합니다.'
    )
    parser.add_argument('--log', default=None,
                        help='로그 파일 경로(기본값: 파일 로그 없음)')
    parser.add_argument('--log-level', default='INFO', choices=LOG_LEVELS,
                        help='로그 레벨(기본값: INFO)')
    parser.add_argument('--font-size', type=int, default=DEFAULT_FONT_SIZE,
                        help='표시부 글자 크기(포인트, 기본값: 28)')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logger = setup_logger(args.log, args.log_level)
    logger.info('[시작] 계산기 실행(글자 크기=%d)', args.font_size)

    app = QApplication(sys.argv)
    w = CalculatorWindow(font_size=args.font_size)
    w.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
