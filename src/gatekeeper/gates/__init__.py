"""Gates — индивидуальные гейты Gatekeeper системы.

- GATE 0: Denom check / выбор маршрута BURN или LOCK
"""

from .gate_00_denom_check import BridgeRoute, Gate00Config, Gate00DenomCheck, Gate00Result

__all__ = [
    "Gate00DenomCheck",
    "Gate00Result",
    "Gate00Config",
    "BridgeRoute",
]
