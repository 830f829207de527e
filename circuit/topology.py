"""
Топология схемы: выдача идентификаторов узлов и слияние узлов проводами.

Каждый вывод при подключении компонента получает собственный
идентификатор (base_node). При перестроении все выводы возвращаются к
base_node, затем для каждого провода идентификатор с большим номером
переписывается на меньший у всех выводов. Это прямое объединение без
сжатия путей, O(выводы * провода); для схем, собранных вручную, этого
достаточно. При росте масштаба - заменить на union-find.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from devices.base import Component, ComponentKind, Terminal
from .wire import Wire


class NodeIdAllocator:
    """Счётчик идентификаторов узлов, принадлежащий графу схемы"""

    def __init__(self):
        self._next = 1

    def issue(self) -> int:
        node_id = self._next
        self._next += 1
        return node_id

    def reset(self) -> None:
        self._next = 1

    @property
    def issued(self) -> int:
        return self._next - 1


@dataclass
class Node:
    """Класс эквивалентности выводов, соединённых проводами"""

    id: int
    voltage: float = 0.0
    terminals: list[Terminal] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)


class CircuitGraph:
    """
    Граф схемы.

    Владеет счётчиком идентификаторов и картой узлов node_id -> Node.
    Узел земли: узел минусового вывода первого источника, а при
    отсутствии источников - узел с наименьшим идентификатором
    """

    def __init__(self):
        self.allocator = NodeIdAllocator()
        self.nodes: dict[int, Node] = {}
        self.ground: Optional[int] = None

    def attach(self, component: Component) -> None:
        """Выдать выводам компонента новые идентификаторы"""
        for terminal in component.terminals:
            terminal.base_node = self.allocator.issue()
            terminal.node = terminal.base_node

    def rebuild(
        self,
        components: list[Component],
        wires: Iterable[Wire],
    ) -> dict[int, Node]:
        """Пересобрать разбиение выводов на узлы"""
        terminals = [t for c in components for t in c.terminals]
        for terminal in terminals:
            terminal.node = terminal.base_node

        present = {id(c) for c in components}
        for wire in wires:
            ends = wire.endpoints()
            if ends is None:
                continue
            if id(wire.start) not in present or id(wire.end) not in present:
                continue
            self._merge(terminals, ends[0].node, ends[1].node)

        nodes: dict[int, Node] = {}
        for component in components:
            for terminal in component.terminals:
                node = nodes.get(terminal.node)
                if node is None:
                    node = nodes[terminal.node] = Node(id=terminal.node)
                node.terminals.append(terminal)
                if component not in node.components:
                    node.components.append(component)

        self.nodes = nodes
        self.ground = self._select_ground(components)
        return nodes

    @staticmethod
    def _merge(terminals: list[Terminal], a: int, b: int) -> None:
        if a == b:
            return
        keep, drop = min(a, b), max(a, b)
        for terminal in terminals:
            if terminal.node == drop:
                terminal.node = keep

    def _select_ground(self, components: list[Component]) -> Optional[int]:
        if not self.nodes:
            return None
        for component in components:
            if component.kind is ComponentKind.SOURCE:
                return component.terminals[1].node
        return min(self.nodes)

    def non_ground_ids(self) -> list[int]:
        """Идентификаторы неизвестных узлов по возрастанию"""
        return sorted(n for n in self.nodes if n != self.ground)

    def partition(self) -> set[frozenset[int]]:
        """Разбиение base_node-идентификаторов по узлам"""
        return {
            frozenset(t.base_node for t in node.terminals)
            for node in self.nodes.values()
        }

    @property
    def size(self) -> int:
        return len(self.nodes)

    def clear(self) -> None:
        self.nodes = {}
        self.ground = None
        self.allocator.reset()
