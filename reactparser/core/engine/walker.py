"""
Typed-dispatch traversal of tree-sitter syntax trees.

A ``TreeWalker`` holds a table mapping node kinds to handlers. Walking is
depth-first and pre-order over named children. When a node's kind has a
handler, the handler receives the node and a continuation; calling the
continuation schedules the node's children, not calling it prunes the branch.
A handler may return a callable that runs once the node's subtree has been
walked, which is where scoped state is restored. Nodes without a handler are
descended past.

The walk keeps its own stack, so tree depth is not bounded by the
interpreter's recursion limit.
"""
import logging
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from tree_sitter import Node

logger = logging.getLogger(__name__)

Continuation = Callable[[], None]
ExitCallback = Callable[[], None]
Handler = Callable[[Node, Continuation], Optional[ExitCallback]]


class TreeWalker:
    """Walks a syntax tree, dispatching on ``node.type``."""

    def __init__(self, handlers: Mapping[str, Handler]):
        self.handlers: Dict[str, Handler] = dict(handlers)

    def walk(self, node: Node) -> None:
        # Entries are either a node to enter or a callback to run on exit.
        stack: List[Tuple[Optional[Node], Optional[ExitCallback]]] = [(node, None)]
        while stack:
            current, on_exit = stack.pop()
            if current is None:
                on_exit()
                continue
            handler = self.handlers.get(current.type)
            if handler is None:
                self._push_children(stack, current)
                continue
            descend = []
            on_exit = handler(current, lambda: descend.append(True))
            if on_exit is not None:
                stack.append((None, on_exit))
            if descend:
                self._push_children(stack, current)

    @staticmethod
    def _push_children(stack: List[Tuple[Optional[Node], Optional[ExitCallback]]], node: Node) -> None:
        stack.extend((child, None) for child in reversed(node.named_children))


def walk(node: Node, handlers: Mapping[str, Handler]) -> None:
    """Walk ``node`` with a one-off handler table."""
    TreeWalker(handlers).walk(node)
