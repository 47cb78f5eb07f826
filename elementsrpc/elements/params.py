"""Declarative parameter schema for node procedures."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Sequence

from elementsrpc.utils.exceptions import InvalidArgumentError

STRING = "string"
NUMERIC = "numeric"
BOOLEAN = "boolean"
AMOUNT = "amount"
ARRAY = "array"
OBJECT = "object"
ANY = "any"

KINDS = (STRING, NUMERIC, BOOLEAN, AMOUNT, ARRAY, OBJECT, ANY)

_MISSING = object()


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def _is_numeric_string(value: Any) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        return False
    return parsed.is_finite()


_CHECKS = {
    STRING: lambda v: isinstance(v, str),
    NUMERIC: _is_number,
    BOOLEAN: lambda v: isinstance(v, bool),
    AMOUNT: lambda v: _is_number(v) or _is_numeric_string(v),
    ARRAY: lambda v: isinstance(v, (list, tuple)),
    OBJECT: lambda v: isinstance(v, Mapping),
    ANY: lambda v: True,
}

_KIND_LABELS = {
    STRING: "a string",
    NUMERIC: "a number",
    BOOLEAN: "a boolean",
    AMOUNT: "an amount (number or numeric string)",
    ARRAY: "an array",
    OBJECT: "an object",
    ANY: "a JSON value",
}


@dataclass(frozen=True)
class RpcParam:
    """One positional argument of a node procedure."""
    name: str
    kind: str = ANY
    required: bool = True

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown parameter kind: {self.kind}")

    def accepts(self, value: Any) -> bool:
        return _CHECKS[self.kind](value)

    def describe(self) -> str:
        suffix = "" if self.required else "?"
        return f"{self.name}{suffix}: {self.kind}"


def req(name: str, kind: str = ANY) -> RpcParam:
    return RpcParam(name, kind, True)


def opt(name: str, kind: str = ANY) -> RpcParam:
    return RpcParam(name, kind, False)


def _to_wire(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Mapping) and not isinstance(value, dict):
        return dict(value)
    return value


def bind_params(
    operation: str,
    params: Sequence[RpcParam],
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> list[Any] | None:
    """
    Bind call arguments to a parameter schema.

    Returns the ordered wire parameter list, or None when no parameter is
    supplied. Trailing unset or None arguments are omitted; an unset argument
    followed by a supplied one is sent as null.

    Raises:
        InvalidArgumentError: too many arguments, unknown or duplicate keyword,
            missing required argument, or a value of the wrong kind.
    """
    if len(args) > len(params):
        raise InvalidArgumentError(
            f"{operation}() takes at most {len(params)} argument(s) but {len(args)} were given",
            operation=operation,
        )

    values: list[Any] = [_MISSING] * len(params)
    for i, value in enumerate(args):
        values[i] = value

    index = {p.name: i for i, p in enumerate(params)}
    for key, value in kwargs.items():
        if key not in index:
            raise InvalidArgumentError(
                f"{operation}() got an unexpected keyword argument '{key}'",
                operation=operation,
                parameter=key,
            )
        i = index[key]
        if values[i] is not _MISSING:
            raise InvalidArgumentError(
                f"{operation}() got multiple values for argument '{key}'",
                operation=operation,
                parameter=key,
            )
        values[i] = value

    for param, value in zip(params, values):
        if value is _MISSING or value is None:
            if param.required:
                raise InvalidArgumentError(
                    f"{operation}() missing required argument '{param.name}'",
                    operation=operation,
                    parameter=param.name,
                )
            continue
        if not param.accepts(value):
            raise InvalidArgumentError(
                f"{operation}() argument '{param.name}' must be {_KIND_LABELS[param.kind]}, "
                f"got {type(value).__name__}",
                operation=operation,
                parameter=param.name,
            )

    while values and (values[-1] is _MISSING or values[-1] is None):
        values.pop()
    if not values:
        return None
    return [None if v is _MISSING else _to_wire(v) for v in values]
