"""Errors raised while turning raw HTTP text into a curl command."""


class Msg2CurlError(ValueError):
    """Base class for recoverable conversion failures."""


class MalformedRequestLine(Msg2CurlError):
    """The first line does not split into a method and a path."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid request line: {line!r}")


class RenderError(Msg2CurlError):
    """A parsed request could not be rendered as a command."""


class MissingHostHeader(RenderError):
    """No usable Host header to build the target URL from."""

    def __init__(self, path: str = ""):
        self.path = path
        super().__init__(f"No host header found for {path or 'request'}")
