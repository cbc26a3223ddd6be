from .loader import (
    DEFAULT_CONFIG_FILE,
    create_default_config,
    load_config,
    require_api_key,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "create_default_config",
    "load_config",
    "require_api_key",
]
