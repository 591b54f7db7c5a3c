from __future__ import annotations
import enum
from typing import Dict

from gatelex.errors import NoSuchGateError


class Gate(enum.Enum):
    """The logic gates a gate expression can name."""

    AND = 'AND'
    OR = 'OR'
    NOT = 'NOT'
    NAND = 'NAND'
    NOR = 'NOR'
    XOR = 'XOR'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f'Gate.{self.value}'


_gates_by_name: Dict[str, Gate] = {
    'AND': Gate.AND,
    'OR': Gate.OR,
    'NOT': Gate.NOT,
    'NAND': Gate.NAND,
    'NOR': Gate.NOR,
    'XOR': Gate.XOR,
}


def classify_gate(keyword: str) -> Gate:
    """Resolve an alphabetic keyword to a gate, ignoring case.

    Raises NoSuchGateError carrying the uppercased keyword if it names no
    gate."""
    name = keyword.upper()
    if name not in _gates_by_name:
        raise NoSuchGateError(name)
    return _gates_by_name[name]
