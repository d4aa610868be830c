"""Errors raised by the Flickr client."""


class FlickrError(Exception):
    """Base class for every error a Flickr call can end with."""

    default_message = "Flickr request failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidURLError(FlickrError):
    """The request could not be dispatched."""

    default_message = "Invalid URL."


class InvalidServerResponseError(FlickrError):
    """The response did not have the expected shape."""

    default_message = "Invalid server response."

    def __init__(self, detail: str | None = None) -> None:
        message = self.default_message
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.detail = detail


class FlickrReportedError(FlickrError):
    """Flickr understood the request but declined it, e.g. a bad API key."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.flickr_message = message
        super().__init__(f"Code: {code}, {message}")
