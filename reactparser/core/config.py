"""
Configuration management for reactparser.
"""
import copy
from typing import Any

_DEFAULTS = {
    'parsing': {
        'dialect': 'tsx',
        'strict': True,
        'cache_size': 128
    },
    'extraction': {
        'factory_callees': ['createClass', 'createReactClass'],
        'state_supplier': 'getInitialState',
        'base_components': ['Component', 'PureComponent']
    },
    'logging': {
        'level': 'WARNING'
    }
}


class Configuration:
    """Configuration manager for reactparser."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Configuration, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize the configuration with defaults."""
        self._config = copy.deepcopy(_DEFAULTS)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            return default

    def set(self, section: str, key: str, value: Any):
        """Set a configuration value."""
        if section not in self._config:
            self._config[section] = {}
        self._config[section][key] = value

    def reset(self):
        """Restore every section to its default values."""
        self._initialize()

# Initialize configuration
config = Configuration()
