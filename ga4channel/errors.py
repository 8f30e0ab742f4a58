"""Exceptions
"""


class DatasetLoadError(Exception):
    """The reference dataset could not be read or parsed."""

    def __init__(self, source, reason=None):
        self.source = source
        self.reason = reason
        message = f"Failed to load reference dataset from {source!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownChannel(ValueError):
    """The channel name is not one of the GA4 default channels."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown channel: {name!r}")


class BadUrlFormat(ValueError):
    """The URL is not an absolute http(s) URL."""

    def __init__(self, url):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class MissingUtmParameters(ValueError):
    def __init__(self, names):
        self.names = list(names)
        super().__init__(f"Missing UTM parameters: {', '.join(self.names)}")


class BadConfig(ValueError):
    pass
