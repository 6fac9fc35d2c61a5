"""Argument-shape validation applied by the dispatcher before the gateway runs."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from satstream_mcp.catalogue import EndpointDescriptor, ParamSpec
from satstream_mcp.errors import InvalidArgumentsError


def _check_string(spec: ParamSpec, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentsError(f"Parameter {spec.name} must be a string.")
    if not value:
        raise InvalidArgumentsError(f"Parameter {spec.name} must not be empty.")
    if spec.enum and value not in spec.enum:
        raise InvalidArgumentsError(
            f"Parameter {spec.name} must be one of: {', '.join(spec.enum)}."
        )
    return value


def _check_integer(spec: ParamSpec, value: Any) -> int:
    # bool is an int subclass but never a valid height/page/count.
    if isinstance(value, bool):
        raise InvalidArgumentsError(f"Parameter {spec.name} must be an integer.")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidArgumentsError(f"Parameter {spec.name} must be an integer.")
        value = int(value)
    if not isinstance(value, int):
        raise InvalidArgumentsError(f"Parameter {spec.name} must be an integer.")
    if spec.minimum is not None and value < spec.minimum:
        raise InvalidArgumentsError(f"Parameter {spec.name} must be >= {spec.minimum}.")
    return value


def check_value(spec: ParamSpec, value: Any) -> Any:
    if spec.type == "integer":
        return _check_integer(spec, value)
    return _check_string(spec, value)


def validate_arguments(
    descriptor: EndpointDescriptor, arguments: Optional[Mapping[str, Any]]
) -> Dict[str, Any]:
    """
    Check an argument bundle against a descriptor's declared parameters.

    Returns:
        A new dict holding only declared, non-null parameters with integral
        floats normalized to ``int``. Empty strings on optional parameters
        are dropped.

    Raises:
        InvalidArgumentsError: on unknown keys, missing required parameters or
        values of the wrong type.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentsError("Arguments must be an object.")

    declared = {spec.name for spec in descriptor.params}
    unexpected = sorted(str(key) for key in arguments if key not in declared)
    if unexpected:
        raise InvalidArgumentsError(f"Unexpected parameter(s): {', '.join(unexpected)}.")

    cleaned: Dict[str, Any] = {}
    for spec in descriptor.params:
        value = arguments.get(spec.name)
        if value is None:
            if spec.required:
                raise InvalidArgumentsError(f"Missing required parameter: {spec.name}.")
            continue
        if value == "" and not spec.required:
            # A blank optional filter means "not set".
            continue
        cleaned[spec.name] = check_value(spec, value)
    return cleaned


def coerce_query_arguments(descriptor: EndpointDescriptor, raw: Mapping[str, str]) -> Dict[str, Any]:
    """Convert query-string values to the declared parameter types."""
    types = {spec.name: spec.type for spec in descriptor.params}
    coerced: Dict[str, Any] = {}
    for key, value in raw.items():
        if types.get(key) == "integer" and value != "":
            try:
                coerced[key] = int(value)
            except ValueError:
                raise InvalidArgumentsError(f"Parameter {key} must be an integer.") from None
        else:
            coerced[key] = value
    return coerced
