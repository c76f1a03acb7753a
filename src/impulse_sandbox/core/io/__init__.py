from .config_io import (
    config_from_dict,
    config_to_dict,
    deserialize_config,
    load_config,
    save_config,
    serialize_config,
)

__all__ = [
    "config_from_dict",
    "config_to_dict",
    "deserialize_config",
    "load_config",
    "save_config",
    "serialize_config",
]
