"""
Structural checks of live or recorded API responses.

Schemas live in ``schemas/v<version>.json`` and use a small subset of JSON
Schema: ``type`` (a kind or list of kinds), ``required``, ``properties``,
``items`` and local ``$ref`` into ``definitions``. Fields not named by a
schema are ignored so that additive API changes do not fail the check.

This is a maintenance tool. Nothing here runs on the request path of
``PodcastIndexClient``.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

from .errors import PodcastIndexError, SchemaNotFoundError, ValidationError
from .version import API_VERSION

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schemas"
REF_PREFIX = "#/definitions/"

# Result kinds
OK = "ok"
MISMATCH = "mismatch"
MISSING_SCHEMA = "missing-schema"
REQUEST_FAILED = "request-failed"
SCHEMA_ERROR = "schema-error"

KIND_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
    "integer": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
    "object": lambda v: isinstance(v, dict),
    "array": lambda v: isinstance(v, list),
    "null": lambda v: v is None,
}


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of checking one endpoint response."""

    endpoint: str
    passed: bool
    errors: List[FieldError] = field(default_factory=list)
    kind: str = OK


@dataclass
class Probe:
    """An endpoint name and the query options to call it with."""

    endpoint: str
    query: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationReport:
    version: str
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> List[ValidationResult]:
        return [r for r in self.results if not r.passed]

    def raise_for_failures(self) -> None:
        """Raise ValidationError if any probe failed."""
        failures = self.failures
        if failures:
            names = ", ".join(r.endpoint for r in failures)
            raise ValidationError(
                f"{len(failures)} of {len(self.results)} endpoints failed validation "
                f"against API {self.version}: {names}",
                endpoint=failures[0].endpoint,
            )


class ResponseSource(Protocol):
    async def fetch(self, endpoint: str, options: Optional[Dict[str, Any]] = None) -> Any: ...


def kind_of(value: Any) -> str:
    for kind in ("null", "boolean", "integer", "number", "string", "array", "object"):
        if KIND_CHECKS[kind](value):
            return kind
    return type(value).__name__


def _resolve(schema: Dict[str, Any], definitions: Dict[str, Any]) -> Dict[str, Any]:
    seen = set()
    while "$ref" in schema:
        ref = schema["$ref"]
        name = ref[len(REF_PREFIX):] if ref.startswith(REF_PREFIX) else None
        if name is None or name not in definitions or name in seen:
            raise ValidationError(f"Unresolvable schema reference {ref}")
        seen.add(name)
        schema = definitions[name]
    return schema


def _check(
    value: Any,
    schema: Dict[str, Any],
    definitions: Dict[str, Any],
    path: str,
    errors: List[FieldError],
) -> None:
    schema = _resolve(schema, definitions)

    kinds = schema.get("type")
    if kinds is not None:
        if isinstance(kinds, str):
            kinds = [kinds]
        for kind in kinds:
            if kind not in KIND_CHECKS:
                raise ValidationError(f"Unknown kind '{kind}' in schema at {path}")
        if not any(KIND_CHECKS[kind](value) for kind in kinds):
            errors.append(
                FieldError(path, f"expected {' or '.join(kinds)}, got {kind_of(value)}")
            )
            return

    if isinstance(value, dict):
        for name in schema.get("required", []):
            if name not in value:
                errors.append(FieldError(f"{path}.{name}", "missing required field"))
        for name, sub_schema in schema.get("properties", {}).items():
            if name in value:
                _check(value[name], sub_schema, definitions, f"{path}.{name}", errors)
    elif isinstance(value, list) and "items" in schema:
        for i, item in enumerate(value):
            _check(item, schema["items"], definitions, f"{path}[{i}]", errors)


def check_structure(
    value: Any,
    schema: Dict[str, Any],
    definitions: Optional[Dict[str, Any]] = None,
    path: str = "$",
) -> List[FieldError]:
    """Return every structural mismatch between ``value`` and ``schema``.

    Paths are rooted at ``$``, e.g. ``$.feeds[3].title``.
    """
    errors: List[FieldError] = []
    _check(value, schema, definitions or {}, path, errors)
    return errors


class SchemaStore:
    """Endpoint schemas for one API version."""

    def __init__(self, version: str = API_VERSION, schema_dir: Path = SCHEMA_DIR) -> None:
        path = schema_dir / f"v{version}.json"
        if not path.exists():
            raise SchemaNotFoundError(f"No schemas for API version {version} in {schema_dir}")

        with open(path, encoding="utf-8") as f:
            document = json.load(f)

        self.version = version
        self.definitions: Dict[str, Any] = document.get("definitions", {})
        self._endpoints: Dict[str, Any] = document.get("endpoints", {})

    @property
    def endpoints(self) -> List[str]:
        return sorted(self._endpoints)

    def has(self, endpoint: str) -> bool:
        return endpoint in self._endpoints

    def get(self, endpoint: str) -> Dict[str, Any]:
        try:
            return self._endpoints[endpoint]
        except KeyError:
            raise SchemaNotFoundError(
                f"No schema for endpoint '{endpoint}' in API version {self.version}",
                endpoint=endpoint,
            ) from None


class RecordedResponses:
    """Serves ``<directory>/<endpoint>.json`` files in place of live calls."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    async def fetch(self, endpoint: str, options: Optional[Dict[str, Any]] = None) -> Any:
        path = self.directory / f"{endpoint}.json"
        if not path.exists():
            raise ValidationError(f"No recorded response at {path}", endpoint=endpoint)
        with open(path, encoding="utf-8") as f:
            try:
                return json.load(f)
            except ValueError as e:
                raise ValidationError(
                    f"Recorded response {path} is not valid JSON: {e}", endpoint=endpoint
                ) from e


class SchemaValidator:
    """Runs probes through a response source and checks each result."""

    def __init__(self, source: ResponseSource, store: Optional[SchemaStore] = None) -> None:
        self.source = source
        self.store = store or SchemaStore()

    def _missing(self, endpoint: str) -> ValidationResult:
        message = f"no schema for '{endpoint}' in API version {self.store.version}"
        return ValidationResult(
            endpoint, False, [FieldError("$", message)], kind=MISSING_SCHEMA
        )

    def validate_response(self, endpoint: str, response: Any) -> ValidationResult:
        """Check an already fetched response."""
        if not self.store.has(endpoint):
            return self._missing(endpoint)
        try:
            errors = check_structure(response, self.store.get(endpoint), self.store.definitions)
        except ValidationError as e:
            return ValidationResult(
                endpoint, False, [FieldError("$", str(e))], kind=SCHEMA_ERROR
            )
        return ValidationResult(endpoint, not errors, errors, kind=MISMATCH if errors else OK)

    async def run_probe(self, probe: Probe) -> ValidationResult:
        if not self.store.has(probe.endpoint):
            return self._missing(probe.endpoint)

        try:
            response = await self.source.fetch(probe.endpoint, probe.query)
        except (PodcastIndexError, ValueError, OSError, asyncio.TimeoutError) as e:
            message = str(e) or type(e).__name__
            logger.warning(f"Probe {probe.endpoint} failed: {message}")
            return ValidationResult(
                probe.endpoint, False, [FieldError("$", message)], kind=REQUEST_FAILED
            )

        result = self.validate_response(probe.endpoint, response)
        if not result.passed:
            logger.warning(f"{probe.endpoint}: {len(result.errors)} schema mismatch(es)")
        return result

    async def validate(self, probes: Iterable[Probe], concurrent: bool = False) -> ValidationReport:
        """Run every probe and collect the results in probe order."""
        probes = list(probes)
        if concurrent:
            results = list(await asyncio.gather(*(self.run_probe(p) for p in probes)))
        else:
            results = [await self.run_probe(p) for p in probes]
        return ValidationReport(version=self.store.version, results=results)


# Podcasting 2.0, a long-lived feed that exercises most fields
_FEED_ID = 920666
_FEED_URL = "https://mp3s.nashownotes.com/pc20rss.xml"

DEFAULT_PROBES: List[Probe] = [
    Probe("search", {"q": "podcasting 2.0", "max": 5}),
    Probe("searchByTitle", {"q": "podcasting 2.0", "max": 5}),
    Probe("searchEpisodesByPerson", {"q": "adam curry", "max": 5}),
    Probe("searchMusic", {"q": "wavlake", "max": 5}),
    Probe("podcastByFeedId", {"id": _FEED_ID}),
    Probe("podcastByFeedUrl", {"url": _FEED_URL}),
    Probe("podcastByItunesId", {"id": 1584274529}),
    Probe("podcastByGuid", {"guid": "917393e3-1b1e-5cef-ace4-edaa54e1f810"}),
    Probe("podcastsByTag", {"podcast-value": True, "max": 5}),
    Probe("podcastsByMedium", {"medium": "music", "max": 5}),
    Probe("podcastsTrending", {"max": 5}),
    Probe("podcastsDead", {}),
    Probe("episodesByFeedId", {"id": _FEED_ID, "max": 5}),
    Probe("episodesByFeedUrl", {"url": _FEED_URL, "max": 5}),
    Probe("episodesByItunesId", {"id": 1584274529, "max": 5}),
    Probe("episodeById", {"id": 16795090}),
    Probe("episodeByGuid", {"guid": "PC2084", "feedurl": _FEED_URL}),
    Probe("episodesRandom", {"max": 5}),
    Probe("episodesLive", {"max": 5}),
    Probe("recentEpisodes", {"max": 5}),
    Probe("recentFeeds", {"max": 5}),
    Probe("recentNewFeeds", {"max": 5}),
    Probe("recentSoundbites", {"max": 5}),
    Probe("valueByFeedId", {"id": _FEED_ID}),
    Probe("valueByFeedUrl", {"url": _FEED_URL}),
    Probe("categories", {}),
    Probe("stats", {}),
]
