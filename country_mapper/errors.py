class CountryMapperError(Exception):
    """Base class for errors raised while loading country data."""


class InvalidArgumentError(CountryMapperError, ValueError):
    """More than one data source was passed to load()."""


class TransportError(CountryMapperError):
    """The remote dataset could not be fetched."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(CountryMapperError):
    """The delimited text is malformed or a row is too short."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line
