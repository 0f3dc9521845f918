from .host_config import (
    DEFAULT_CONFIG_PATH,
    ConfigDocument,
    HostRecord,
    MergedConfig,
    expand_home,
    load_config,
    merge_hosts,
    read_document,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigDocument",
    "HostRecord",
    "MergedConfig",
    "expand_home",
    "load_config",
    "merge_hosts",
    "read_document",
]
