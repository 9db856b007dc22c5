"""Gatekeeper — гейты допуска активов к передаче через мост."""

from .gates.gate_00_denom_check import Gate00DenomCheck, Gate00Result

__all__ = [
    "Gate00DenomCheck",
    "Gate00Result",
]
