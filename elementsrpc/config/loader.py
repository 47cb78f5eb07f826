"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from elementsrpc.config.schema import RpcConfig

COOKIE_FILE_NAME = ".cookie"

# Networks whose data lives directly in the datadir rather than a subdirectory.
_ROOT_NETWORKS = {"", "main", "mainnet"}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".elementsrpc" / "config.json"


def get_node_conf_path() -> Path:
    """Get the default node configuration file path."""
    return Path.home() / ".elements" / "elements.conf"


def load_config(config_path: Path | None = None) -> RpcConfig:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config file must be a JSON object")
            return RpcConfig.model_validate(convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to use defaults."
            ) from e

    return RpcConfig()


def parse_node_conf(text: str, network: str | None = None) -> dict[str, str]:
    """
    Parse ``key=value`` lines of an elements.conf / bitcoin.conf file.

    Keys inside a ``[network]`` section only apply when that network is
    selected, and then take precedence over top-level keys.
    """
    global_conf: dict[str, str] = {}
    section_conf: dict[str, str] = {}
    section: str | None = None
    for raw_line in text.splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1].strip()
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key, value = key.strip(), value.strip()
        if section is None:
            global_conf[key] = value
        elif network is not None and section == network:
            section_conf[key] = value
    # "regtest.rpcport=..." style keys may also appear at top level
    if network is not None:
        prefix = f"{network}."
        for key in list(global_conf):
            if key.startswith(prefix):
                section_conf.setdefault(key[len(prefix):], global_conf.pop(key))
    merged = dict(global_conf)
    merged.update(section_conf)
    return merged


def read_cookie(datadir: Path, network: str | None = None) -> tuple[str, str] | None:
    """Read ``user:password`` from the node's auth cookie, if present."""
    cookie_dir = datadir
    if network and network not in _ROOT_NETWORKS:
        cookie_dir = datadir / network
    cookie_path = cookie_dir / COOKIE_FILE_NAME
    try:
        content = cookie_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    if ":" not in content:
        return None
    user, password = content.split(":", 1)
    return user, password


def load_node_conf(
    conf_path: Path | None = None,
    *,
    network: str | None = None,
    default_port: int | None = None,
) -> RpcConfig:
    """
    Build a config from a node configuration file.

    Reads ``rpcconnect``, ``rpcport``, ``rpcuser`` and ``rpcpassword``. When no
    password is configured the datadir's ``.cookie`` supplies credentials. A
    missing conf file is treated as empty.
    """
    path = conf_path or get_node_conf_path()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        text = ""
    conf = parse_node_conf(text, network=network)
    if network is None and conf.get("chain"):
        network = conf["chain"]
        conf = parse_node_conf(text, network=network)

    options: dict[str, Any] = {"host": conf.get("rpcconnect") or None}
    port = conf.get("rpcport")
    if port:
        try:
            options["port"] = int(port)
        except ValueError as e:
            raise ValueError(f"Invalid rpcport in {path}: {port!r}") from e
    elif default_port is not None:
        options["port"] = default_port

    if "rpcpassword" in conf:
        options["user"] = conf.get("rpcuser", "")
        options["password"] = conf["rpcpassword"]
    else:
        datadir = Path(conf["datadir"]).expanduser() if conf.get("datadir") else path.parent
        cookie = read_cookie(datadir, network)
        if cookie is None:
            raise ValueError(
                f"Cookie file unusable and rpcpassword not specified in the configuration file: {path}"
            )
        options["user"], options["password"] = cookie
    return RpcConfig.from_options(options)


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
