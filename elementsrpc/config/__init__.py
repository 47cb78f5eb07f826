"""Configuration module for elementsrpc."""

from elementsrpc.config.loader import get_config_path, load_config, load_node_conf
from elementsrpc.config.schema import RpcConfig

__all__ = ["RpcConfig", "load_config", "load_node_conf", "get_config_path"]
