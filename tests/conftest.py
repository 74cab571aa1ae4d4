import pytest

from reactparser import ReactParser
from reactparser.core.config import config


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def react_parser():
    """Provides a ReactParser instance configured for TSX."""
    return ReactParser('tsx')


@pytest.fixture
def js_parser():
    """Provides a ReactParser instance configured for JavaScript."""
    return ReactParser('javascript')


def find_first(node, node_type):
    """Depth-first search for the first named node of ``node_type``."""
    if node.type == node_type:
        return node
    for child in node.named_children:
        found = find_first(child, node_type)
        if found is not None:
            return found
    return None


@pytest.fixture
def first_node(react_parser):
    """Parses code and returns its first node of the requested type."""
    def _first_node(code, node_type):
        node = find_first(react_parser.parse(code), node_type)
        assert node is not None, f"No {node_type} node in: {code}"
        return node
    return _first_node
