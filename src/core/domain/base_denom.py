"""
Базовая грамматика деноминаций

Общие правила для любого денома (нативного или bridged):
- первый символ — ASCII буква
- далее буквы, цифры и символы '/', ':', '.', '_', '-'
- длина от 3 до 128 символов

Формат совместим с деноминациями Cosmos SDK (например, 'uatom', 'ibc/...').
"""

import re
from typing import Final

from .errors import BaseDenomError


# =============================================================================
# ГРАММАТИКА
# =============================================================================

BASE_DENOM_MIN_LEN: Final[int] = 3
BASE_DENOM_MAX_LEN: Final[int] = 128

_BASE_DENOM_REGEX: Final[re.Pattern[str]] = re.compile(
    r"[a-zA-Z][a-zA-Z0-9/:._-]{%d,%d}" % (BASE_DENOM_MIN_LEN - 1, BASE_DENOM_MAX_LEN - 1)
)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base_denom(denom: str) -> None:
    """
    Проверка денома по базовой грамматике.

    Args:
        denom: Деном для проверки

    Raises:
        BaseDenomError: Если деном не соответствует грамматике
    """
    if _BASE_DENOM_REGEX.fullmatch(denom) is None:
        raise BaseDenomError(f"invalid denom: {denom}")


def is_valid_base_denom(denom: str) -> bool:
    """Проверка без exception"""
    return _BASE_DENOM_REGEX.fullmatch(denom) is not None
