"""
Error taxonomy for the research pipeline.

Only InvalidInputError ever reaches the caller. FetchError and ParseError
are raised by the fetcher and recovered by the stage that issued the call.
"""


class ResearchError(Exception):
    """Base class for all research pipeline errors"""


class InvalidInputError(ResearchError):
    """The submitted URL is missing or cannot be parsed"""


class FetchError(ResearchError):
    """Timeout, DNS failure, refused connection or any other transport failure"""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(ResearchError):
    """A response body did not have the expected shape"""
