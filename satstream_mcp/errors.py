"""
Error kinds surfaced by the Satstream MCP server.

Only ``StartupConfigError`` and the catalogue authoring errors are raised to
the process. Everything that can happen during a single tool invocation is
carried back to the caller as an error result (see ``ProxyFailure``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SatstreamMcpError(Exception):
    """Base exception; ``code`` identifies the error kind in structured results."""

    code = "error"

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": True, "code": self.code, "message": self.message}


class CatalogueError(SatstreamMcpError):
    """Raised when a descriptor or its path template is malformed."""

    code = "catalogue_error"


class DuplicateNameError(CatalogueError):
    """Raised when two descriptors share a name."""

    code = "duplicate_name"


class UnknownToolError(SatstreamMcpError):
    """Raised when an invocation names a tool absent from the catalogue."""

    code = "unknown_tool"

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidArgumentsError(SatstreamMcpError):
    """Raised when an argument bundle does not match a tool's declared schema."""

    code = "invalid_arguments"


class MissingPathParamError(SatstreamMcpError):
    """Raised when a path placeholder has no value in the argument bundle."""

    code = "missing_path_param"

    def __init__(self, param: str) -> None:
        super().__init__(f"Missing path parameter: {param}")
        self.param = param

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["param"] = self.param
        return payload


class UpstreamHttpError(SatstreamMcpError):
    """The upstream answered with a non-success status; the body is kept as received."""

    code = "upstream_http_error"

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__(f"Upstream returned HTTP {status_code}", status_code=status_code)
        self.body = body

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["status"] = self.status_code
        payload["data"] = self.body
        return payload


class TransportError(SatstreamMcpError):
    """No response was obtained from the upstream (DNS, refused connection, timeout)."""

    code = "transport_error"


class StartupConfigError(SatstreamMcpError):
    """Raised when the API credential is unavailable at startup."""

    code = "startup_config_error"
