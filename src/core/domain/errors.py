"""
Ошибки схемы деноминаций моста

Все ошибки наследуют DenomError (подкласс ValueError), поэтому вызывающий код
может ловить их как обычную ошибку невалидного значения.

Иерархия:
- BaseDenomError            — нарушение базовой грамматики денома
- EthAddressError           — невалидный Ethereum адрес
- MalformedDenomError       — строка не соответствует формату 'gravity/{address}'
- InvalidContractAddressError — адресная часть bridged денома невалидна
- MappingError              — ошибки записи ERC20 ↔ denom
    - InvalidDenomError
    - InvalidAddressError
    - DuplicateMappingError
"""


class DenomError(ValueError):
    """Базовая ошибка деноминаций"""


class BaseDenomError(DenomError):
    """Деном не проходит базовую грамматику (длина, набор символов)"""


class EthAddressError(DenomError):
    """Строка не является валидным Ethereum адресом"""


class MalformedDenomError(DenomError):
    """Деном не соответствует формату 'gravity/{address}' или нативному"""


class _WrappedDenomError(DenomError):
    """
    Ошибка с сохранённой первопричиной.

    Первопричина доступна через .cause; при raise ... from cause
    она же попадает в __cause__.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class InvalidContractAddressError(_WrappedDenomError):
    """Адрес контракта в bridged деноме невалиден"""

    def __init__(self, cause: Exception | None = None):
        super().__init__("invalid contract address", cause)


class MappingError(_WrappedDenomError):
    """Базовая ошибка записи ERC20 ↔ denom"""


class InvalidDenomError(MappingError):
    """Cosmos деном в записи невалиден"""

    def __init__(self, cause: Exception | None = None, message: str = "invalid cosmos denomination"):
        super().__init__(message, cause)


class InvalidAddressError(MappingError):
    """ERC20 адрес в записи невалиден"""

    def __init__(self, cause: Exception | None = None, message: str = "invalid erc20 address"):
        super().__init__(message, cause)


class DuplicateMappingError(MappingError):
    """Деном или ERC20 адрес уже зарегистрированы"""
