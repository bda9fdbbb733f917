# calculator.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
import re
from typing import Optional

OPERATOR_ADD = 'add'
OPERATOR_SUBTRACT = 'subtract'
OPERATOR_MULTIPLY = 'multiply'
OPERATOR_DIVIDE = 'divide'
ERROR_MESSAGE = 'Error'
DEFAULT_DISPLAY = '0'

SCIENTIFIC_UPPER = 1e15  # 이 값 이상은 지수 표기
SCIENTIFIC_LOWER = 1e-10  # 0이 아니면서 이 값 미만도 지수 표기

# 부호, 소수점 하나, 지수부만 허용 (inf/nan/밑줄 표기는 거부)
_NUMBER_RE = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$')

logger = logging.getLogger('calculator')


def apply_operator(left: float, right: float, op: str) -> float:
    """두 피연산자에 연산자를 적용한다. 0으로 나누면 nan, 모르는 연산자는 right"""
    if op == OPERATOR_ADD:
        return left + right
    if op == OPERATOR_SUBTRACT:
        return left - right
    if op == OPERATOR_MULTIPLY:
        return left * right
    if op == OPERATOR_DIVIDE:
        return math.nan if right == 0 else left / right
    return right


def is_valid_result(value: float) -> bool:
    return not (math.isnan(value) or math.isinf(value))


def format_number(value: float) -> str:
    """
    표시용 문자열로 변환한다.
    - nan/inf 는 'Error'
    - 1e15 이상, 또는 0이 아닌 1e-10 미만은 지수 표기(예: 1.000000E+016)
    - 그 외는 최단 표현에서 소수부 끝의 0과 남는 '.'을 제거
    """
    if not is_valid_result(value):
        return ERROR_MESSAGE
    if value == 0:
        # -0.0 도 '0'
        return DEFAULT_DISPLAY

    magnitude = abs(value)
    if magnitude >= SCIENTIFIC_UPPER or magnitude < SCIENTIFIC_LOWER:
        mantissa, exponent = '{:.6E}'.format(value).split('E')
        return '{}E{:+04d}'.format(mantissa, int(exponent))

    s = repr(value)
    if 'e' in s:
        # 최단 표현이 이미 지수형(예: 1e-05)이면 마커만 대문자로
        return s.replace('e', 'E')
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    return s


def parse_display(text: Optional[str]) -> Optional[float]:
    """표시 문자열을 float로 해석한다. 숫자가 아니면 None"""
    if not text or not _NUMBER_RE.match(text):
        return None
    return float(text)


class Calculator:
    """연산 엔진: 누산기/대기 연산자/입력 모드/오류 상태를 관리한다.

    표시 문자열은 엔진이 보관하지 않는다. 호출자가 현재 표시값을 넘기면
    새 표시값을 돌려준다.
    """

    def __init__(self) -> None:
        self._reset()

    # 읽기 전용 상태
    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def pending_operator(self) -> Optional[str]:
        return self._pending_operator

    @property
    def is_new_entry(self) -> bool:
        return self._is_new_entry

    @property
    def has_error(self) -> bool:
        return self._has_error

    # 입력 처리
    def process_digit(self, digit: Optional[str], current_display: str) -> str:
        if self._has_error:
            self._clear_error()
            current_display = DEFAULT_DISPLAY

        if not digit:
            return current_display

        if self._is_new_entry or current_display == DEFAULT_DISPLAY:
            self._is_new_entry = False
            return digit

        return current_display + digit

    def process_decimal(self, current_display: str) -> str:
        if self._has_error:
            self._clear_error()
            current_display = DEFAULT_DISPLAY

        if self._is_new_entry:
            # 새 입력의 소수점은 항상 0. 부터
            self._is_new_entry = False
            return '0.'

        if '.' not in current_display:
            return current_display + '.'

        return current_display

    def process_backspace(self, current_display: str) -> str:
        if self._has_error:
            # 오류 직전의 숫자는 복원하지 않음
            self._clear_error()
            return DEFAULT_DISPLAY

        if len(current_display) > 1 and current_display != DEFAULT_DISPLAY:
            self._is_new_entry = False
            return current_display[:-1]

        self._is_new_entry = True
        return DEFAULT_DISPLAY

    def clear(self) -> str:
        self._reset()
        logger.debug('[초기화] 모든 상태를 기본값으로 되돌림')
        return DEFAULT_DISPLAY

    def toggle_sign(self, current_display: str) -> str:
        # 오류 상태에서는 부호 전환으로 복구되지 않음
        if self._has_error:
            return current_display

        value = parse_display(current_display)
        if value is None:
            return current_display
        return format_number(-value)

    def process_percent(self, current_display: str) -> str:
        if self._has_error:
            return current_display

        value = parse_display(current_display)
        if value is None:
            return current_display

        self._is_new_entry = True
        return format_number(value / 100.0)

    def process_operator(self, op: Optional[str], current_display: str) -> str:
        if self._has_error or not op:
            return current_display

        # 해석 실패 시 계산만 건너뛰고 연산자는 기록한다
        value = parse_display(current_display)
        if value is not None:
            if self._pending_operator is not None and not self._is_new_entry:
                result = apply_operator(self._accumulator, value, self._pending_operator)
                if not is_valid_result(result):
                    self._set_error()
                    return ERROR_MESSAGE
                self._accumulator = result
            else:
                # 첫 연산자이거나 연속으로 누른 연산자 교체
                self._accumulator = value

        self._pending_operator = op
        self._is_new_entry = True
        logger.debug('[연산자] %s, 누산기=%r', op, self._accumulator)
        return format_number(self._accumulator)

    def process_equals(self, current_display: str) -> str:
        if self._has_error or self._pending_operator is None:
            return current_display

        value = parse_display(current_display)
        if value is None:
            return current_display

        result = apply_operator(self._accumulator, value, self._pending_operator)
        if not is_valid_result(result):
            self._set_error()
            return ERROR_MESSAGE

        logger.debug('[결과] %r %s %r = %r',
                     self._accumulator, self._pending_operator, value, result)
        self._accumulator = result
        self._pending_operator = None
        self._is_new_entry = True
        return format_number(self._accumulator)

    # 내부 유틸
    def _reset(self) -> None:
        self._accumulator = 0.0
        self._pending_operator = None  # 'add', 'subtract', 'multiply', 'divide'
        self._is_new_entry = True
        self._has_error = False

    def _clear_error(self) -> None:
        logger.debug('[복구] 오류 상태 해제')
        self._reset()

    def _set_error(self) -> None:
        logger.warning('[오류] 계산 결과가 유효하지 않음(대기 연산자=%s)',
                       self._pending_operator)
        self._has_error = True
        self._pending_operator = None
        self._is_new_entry = True
