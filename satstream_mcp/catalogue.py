"""
Declarative endpoint descriptors and the catalogue that holds them.

A descriptor names one read-only Satstream endpoint: its path template, the
parameters substituted into that template and the query parameters it
forwards. Templates are parsed into literal and placeholder segments when the
descriptor is built, so authoring mistakes surface at import time rather than
on a live call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple, Union
from urllib.parse import quote

from satstream_mcp.errors import (
    CatalogueError,
    DuplicateNameError,
    MissingPathParamError,
    UnknownToolError,
)

Scalar = Union[str, int, float]

PLACEHOLDER_REGEX = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")
PARAM_TYPES = ("string", "integer")


def format_value(value: Scalar) -> str:
    """Render a scalar argument as it is sent upstream (decimal, no separators)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True, slots=True)
class ParamSpec:
    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    enum: Optional[Tuple[str, ...]] = None
    minimum: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type not in PARAM_TYPES:
            raise CatalogueError(f"Unsupported parameter type {self.type!r} for {self.name!r}")

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.type == "string" and self.required:
            schema["minLength"] = 1
        return schema

    def summary(self) -> str:
        return f"{self.type} ({'required' if self.required else 'optional'})"


def path_param(name: str, type: str = "string", description: str = "") -> ParamSpec:
    """Path parameters are always required; integer ones are non-negative."""
    minimum = 0 if type == "integer" else None
    return ParamSpec(name, type, description, required=True, minimum=minimum)


def query_param(
    name: str,
    type: str = "string",
    description: str = "",
    *,
    required: bool = False,
    enum: Optional[Tuple[str, ...]] = None,
) -> ParamSpec:
    minimum = 0 if type == "integer" else None
    return ParamSpec(name, type, description, required=required, enum=enum, minimum=minimum)


# Some MCP clients refuse to call a tool whose schema has no properties, so
# argument-less tools accept this one. It is never sent upstream.
NO_ARGUMENTS = (ParamSpec("random_string", "string", "Dummy parameter for no-parameter tools"),)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


class Segment(NamedTuple):
    text: str
    is_placeholder: bool


@dataclass(frozen=True, slots=True)
class PathTemplate:
    """A URL path split into literal text and ``{name}`` placeholders."""

    raw: str
    segments: Tuple[Segment, ...]

    @classmethod
    def parse(cls, raw: str) -> "PathTemplate":
        if not raw.startswith("/"):
            raise CatalogueError(f"Path template must start with '/': {raw!r}")
        segments: List[Segment] = []
        seen: set[str] = set()
        position = 0
        for match in PLACEHOLDER_REGEX.finditer(raw):
            cls._append_literal(segments, raw, raw[position : match.start()])
            name = match.group(1)
            if name in seen:
                raise CatalogueError(f"Placeholder {{{name}}} appears more than once in {raw!r}")
            seen.add(name)
            segments.append(Segment(name, True))
            position = match.end()
        cls._append_literal(segments, raw, raw[position:])
        return cls(raw, tuple(segments))

    @staticmethod
    def _append_literal(segments: List[Segment], raw: str, literal: str) -> None:
        if "{" in literal or "}" in literal:
            raise CatalogueError(f"Malformed placeholder in path template {raw!r}")
        if literal:
            segments.append(Segment(literal, False))

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return tuple(segment.text for segment in self.segments if segment.is_placeholder)

    def render(self, values: Mapping[str, Any]) -> str:
        """Substitute each placeholder with its percent-encoded value."""
        parts: List[str] = []
        for segment in self.segments:
            if not segment.is_placeholder:
                parts.append(segment.text)
                continue
            value = values.get(segment.text)
            if _is_absent(value):
                raise MissingPathParamError(segment.text)
            parts.append(quote(format_value(value), safe=""))
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """Static description of one proxied GET endpoint."""

    name: str
    description: str
    path: str
    path_params: Tuple[ParamSpec, ...] = ()
    query_params: Tuple[ParamSpec, ...] = ()
    ignored_params: Tuple[ParamSpec, ...] = ()
    template: PathTemplate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        template = PathTemplate.parse(self.path)
        declared = [spec.name for spec in self.path_params]
        if len(set(declared)) != len(declared):
            raise CatalogueError(f"{self.name}: path parameter declared twice")
        if set(declared) != set(template.placeholders):
            raise CatalogueError(
                f"{self.name}: placeholders {sorted(template.placeholders)} "
                f"do not match declared path parameters {sorted(declared)}"
            )
        query_names = [spec.name for spec in self.query_params]
        if len(set(query_names)) != len(query_names):
            raise CatalogueError(f"{self.name}: query parameter declared twice")
        overlap = set(declared) & set(query_names)
        if overlap:
            raise CatalogueError(f"{self.name}: {sorted(overlap)} declared as both path and query parameter")
        ignored = [spec.name for spec in self.ignored_params]
        if set(ignored) & (set(declared) | set(query_names)):
            raise CatalogueError(f"{self.name}: ignored parameter shadows a forwarded one")
        object.__setattr__(self, "template", template)

    @property
    def path_param_names(self) -> frozenset[str]:
        return frozenset(spec.name for spec in self.path_params)

    @property
    def query_param_names(self) -> frozenset[str]:
        return frozenset(spec.name for spec in self.query_params)

    @property
    def params(self) -> Tuple[ParamSpec, ...]:
        """Every accepted parameter, including ones that are never forwarded."""
        return self.path_params + self.query_params + self.ignored_params

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {spec.name: spec.json_schema() for spec in self.params},
            "required": [spec.name for spec in self.params if spec.required],
            "additionalProperties": False,
        }

    def params_summary(self) -> Dict[str, str]:
        return {spec.name: spec.summary() for spec in self.params}

    def resolve_path(self, args: Mapping[str, Any]) -> str:
        return self.template.render(args)

    def build_query(self, args: Mapping[str, Any]) -> Dict[str, str]:
        """Collect declared query parameters, skipping absent or empty ones entirely."""
        query: Dict[str, str] = {}
        for spec in self.query_params:
            value = args.get(spec.name)
            if _is_absent(value):
                continue
            query[spec.name] = format_value(value)
        return query


class Catalogue:
    """Name-indexed collection of endpoint descriptors."""

    def __init__(self, descriptors: Iterable[EndpointDescriptor] = (), *, frozen: bool = False) -> None:
        self._descriptors: Dict[str, EndpointDescriptor] = {}
        self._frozen = False
        for descriptor in descriptors:
            self.register(descriptor)
        self._frozen = frozen

    @classmethod
    def from_descriptors(cls, *groups: Iterable[EndpointDescriptor]) -> "Catalogue":
        """Build a frozen catalogue from one or more descriptor groups in a single pass."""
        return cls((descriptor for group in groups for descriptor in group), frozen=True)

    def register(self, descriptor: EndpointDescriptor) -> None:
        if self._frozen:
            raise CatalogueError("Catalogue is frozen")
        if descriptor.name in self._descriptors:
            raise DuplicateNameError(f"Duplicate tool name: {descriptor.name}")
        self._descriptors[descriptor.name] = descriptor

    def lookup(self, name: str) -> EndpointDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> List[str]:
        return list(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __iter__(self) -> Iterator[EndpointDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)
