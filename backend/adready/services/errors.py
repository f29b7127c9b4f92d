"""
Error taxonomy for URL analysis.

Terminal errors derive from AnalysisError and carry the HTTP status the API
answers with plus a remediation hint. RetrievalError subclasses stay inside
the retrieval layer and surface as the message of UnreachableHost.
"""
from typing import Optional


class AnalysisError(Exception):
    """Terminal failure that stops an analysis before any check runs."""
    status_code = 500
    default_details: Optional[str] = None

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else self.default_details


class InvalidUrl(AnalysisError):
    status_code = 400


class UnsupportedContentType(AnalysisError):
    status_code = 400


class EmptyOrMinimalContent(AnalysisError):
    status_code = 400


class UnreachableHost(AnalysisError):
    status_code = 500
    default_details = "Please check that the website is accessible and contains valid HTML content."


class MalformedDocument(AnalysisError):
    status_code = 500
    default_details = "The website may have malformed content."


class RetrievalError(Exception):
    """A single retrieval attempt failed."""


class RequestTimeout(RetrievalError):
    pass


class NetworkError(RetrievalError):
    pass


class TooManyRedirects(RetrievalError):
    pass
