"""
Схемный решатель постоянного тока.

Граф схемы (CircuitGraph) объединяет выводы в узлы, ассемблер
(CircuitAssembler) строит узловую систему G * v = b, драйвер
(CircuitSimulator) решает её с фиксированным шагом и обновляет
физику компонентов.
"""
from .wire import Wire
from .topology import CircuitGraph, Node, NodeIdAllocator
from .assembler import CircuitAssembler
from .simulator import CircuitSimulator

__all__ = [
    "Wire",
    "CircuitGraph",
    "Node",
    "NodeIdAllocator",
    "CircuitAssembler",
    "CircuitSimulator",
]
