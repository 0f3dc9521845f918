from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Any
from dacite import from_dict, DaciteError
import yaml
from pathlib import Path
from loguru import logger

from mssh.errors import ConfigError

DEFAULT_CONFIG_PATH = "~/.mssh"

# YAML key -> HostRecord field
HOST_KEYS = {
    "Via": "via",
    "Hostname": "hostname",
    "GatewayCommand": "gateway_command",
}


@dataclass(frozen=True)
class HostRecord:
    via: str = ""
    hostname: str = ""
    gateway_command: str = ""


@dataclass
class ConfigDocument:
    path: Path
    hosts: Dict[str, HostRecord] = field(default_factory=dict)
    includes: List[str] = field(default_factory=list)


@dataclass
class MergedConfig:
    hosts: Dict[str, HostRecord] = field(default_factory=dict)
    source_path: Optional[Path] = None

    def names(self) -> List[str]:
        return list(self.hosts)

    def get(self, name: str) -> HostRecord:
        if name not in self.hosts:
            raise ConfigError(f"Host not found in config: {name}")
        return self.hosts[name]


def expand_home(path: str) -> Path:
    """Expand a leading ``~/`` to the home directory, leave anything else alone."""
    if path.startswith("~/"):
        return Path.home() / path[2:]
    return Path(path)


def merge_hosts(base: Dict[str, HostRecord], incoming: Dict[str, HostRecord]) -> Dict[str, HostRecord]:
    """
    Fold ``incoming`` into a copy of ``base``. Names already in ``base`` win;
    the incoming duplicate is dropped with an informational note.
    """
    merged = dict(base)
    for name, record in incoming.items():
        if name in merged:
            logger.info(f"{name} is ignored")
            continue
        merged[name] = record
    return merged


def _scalar_text(value: Any) -> Any:
    """Render YAML scalars as their text; anything else is left for dacite to reject."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _parse_host(name: str, raw: Any, path: Path) -> HostRecord:
    if raw is None:
        return HostRecord()
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: host '{name}' must be a mapping, got {type(raw).__name__}")

    data = {}
    for key, attr in HOST_KEYS.items():
        value = raw.get(key)
        if value is not None:
            data[attr] = _scalar_text(value)
    try:
        return from_dict(data_class=HostRecord, data=data)
    except DaciteError as e:
        raise ConfigError(f"{path}: invalid value for host '{name}': {e}") from e


def read_document(path: Path) -> ConfigDocument:
    """Read and decode a single YAML document without following its includes."""
    try:
        with open(path, "rb") as f:
            raw_dict = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot decode config file {path}: {e}") from e

    if raw_dict is None:
        return ConfigDocument(path=path)
    if not isinstance(raw_dict, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    hosts_raw = raw_dict.get("hosts") or {}
    if not isinstance(hosts_raw, dict):
        raise ConfigError(f"{path}: 'hosts' must be a mapping")

    includes = raw_dict.get("include") or []
    if not isinstance(includes, list) or not all(isinstance(p, str) for p in includes):
        raise ConfigError(f"{path}: 'include' must be a list of paths")

    hosts = {}
    for name, raw in hosts_raw.items():
        if name is None or str(name) == "":
            raise ConfigError(f"{path}: host names must not be empty")
        hosts[str(name)] = _parse_host(str(name), raw, path)
    return ConfigDocument(path=path, hosts=hosts, includes=includes)


def _load_hosts(path: str, chain: Tuple[Path, ...]) -> Dict[str, HostRecord]:
    resolved = expand_home(path)
    key = resolved.resolve()
    if key in chain:
        cycle = " -> ".join(str(p) for p in chain + (key,))
        raise ConfigError(f"Include cycle detected: {cycle}")

    document = read_document(resolved)
    logger.debug(f"Loaded {len(document.hosts)} host(s) from {resolved}")

    hosts = document.hosts
    for include in document.includes:
        hosts = merge_hosts(hosts, _load_hosts(include, chain + (key,)))
    return hosts


def load_config(path: str = DEFAULT_CONFIG_PATH) -> MergedConfig:
    return MergedConfig(hosts=_load_hosts(path, ()), source_path=expand_home(path))
