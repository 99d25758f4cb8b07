"""HTTP message models produced by the parser."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from ..errors import MissingHostHeader

HTTP_METHODS = ("GET", "PUT", "POST", "DELETE", "PATCH")

# body_start_line value when the message has no blank line
NO_BODY = -1


class RequestLine(NamedTuple):
    """Method and path taken from the first line of a request."""

    method: str
    path: str


@dataclass(frozen=True)
class ParsedMessage:
    """Headers and body of an HTTP request or response.

    Headers are copied into a read-only mapping, so neither the fields nor
    the header mapping can change after construction.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    body_start_line: int = NO_BODY

    def __post_init__(self):
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        if name in self.headers:
            return self.headers[name]
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    @property
    def has_body(self) -> bool:
        """Whether a blank line separating headers and body was found."""
        return self.body_start_line != NO_BODY


@dataclass(frozen=True)
class ParsedRequest(ParsedMessage):
    """Parsed HTTP request with its request line."""

    method: str = ""
    path: str = ""

    @property
    def host(self) -> str:
        """Host header value, checked as written then in any casing."""
        host = self.headers.get("Host") or self.headers.get("host")
        if not host:
            host = self.get_header("host") or ""
        return host

    def url_for(self, scheme: str = "https") -> str:
        """Full URL from the host header and path."""
        host = self.host
        if not host:
            raise MissingHostHeader(self.path)
        return f"{scheme}://{host}{self.path}"

    @property
    def url(self) -> str:
        """Full https URL of the request."""
        return self.url_for()
