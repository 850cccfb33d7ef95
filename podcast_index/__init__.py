"""
Podcast Index API client library.

This library provides an async client for the Podcast Index API, covering
search, podcast, episode, recent, value, category and stats endpoints, plus
a schema checker for validating live responses.
"""

from .auth import AuthHeaders, Credentials, sign
from .client import PodcastIndexClient
from .config import ClientConfig, load_config
from .errors import (
    EncodingError,
    ParseError,
    PodcastIndexAuthError,
    PodcastIndexError,
    SchemaNotFoundError,
    SigningError,
    TransportError,
    ValidationError,
)
from .observer import LoggingObserver, Observer
from .query import encode_query, to_array
from .transport import Transport
from .validation import (
    Probe,
    RecordedResponses,
    SchemaStore,
    SchemaValidator,
    ValidationReport,
    ValidationResult,
    check_structure,
)
from .version import API_VERSION, __version__

__all__ = [
    "PodcastIndexClient",
    "ClientConfig",
    "load_config",
    "Transport",
    "Credentials",
    "AuthHeaders",
    "sign",
    "encode_query",
    "to_array",
    "Observer",
    "LoggingObserver",
    "Probe",
    "RecordedResponses",
    "SchemaStore",
    "SchemaValidator",
    "ValidationReport",
    "ValidationResult",
    "check_structure",
    "PodcastIndexError",
    "PodcastIndexAuthError",
    "EncodingError",
    "SigningError",
    "TransportError",
    "ParseError",
    "ValidationError",
    "SchemaNotFoundError",
    "API_VERSION",
    "__version__",
]
