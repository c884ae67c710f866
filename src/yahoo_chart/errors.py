"""Exceptions raised while loading chart data."""


class YahooChartError(Exception):
    """Base class for every failure surfaced by the chart client."""


class TransportError(YahooChartError):
    """The GET never produced a response (DNS, connection, timeout...)."""


class HTTPStatusError(YahooChartError):
    """The endpoint answered with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the endpoint.
        body: Response body text, kept verbatim for diagnostics.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Statuscode: {status_code} - Body: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(YahooChartError):
    """The payload is not valid JSON or does not match the chart shape."""
