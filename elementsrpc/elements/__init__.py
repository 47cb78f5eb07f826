"""Elements node facade."""

from elementsrpc.elements.catalogue import (
    CATALOGUE,
    GROUPS,
    RpcProcedure,
    find_procedure,
    procedures_in,
)
from elementsrpc.elements.client import Client
from elementsrpc.elements.params import RpcParam, bind_params

__all__ = [
    "CATALOGUE",
    "GROUPS",
    "Client",
    "RpcParam",
    "RpcProcedure",
    "bind_params",
    "find_procedure",
    "procedures_in",
]
