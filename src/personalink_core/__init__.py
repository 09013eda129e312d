from personalink_core.config import Settings, load_settings
from personalink_core.dedup import DedupResult, partition_candidates
from personalink_core.errors import (
    LinkIngestionError,
    LinkValidationError,
    PersistenceFailed,
    StorageUnavailable,
    UpstreamContractViolation,
)
from personalink_core.icons import classify_icon
from personalink_core.ingest import IngestReport, LinkIngestor
from personalink_core.models import ExistingLinkRef, IconTag, LinkCategory, LinkRecord, RawSuggestion
from personalink_core.normalize import normalize_suggestion
from personalink_core.pipeline import suggest_new_links
from personalink_core.storage import InMemoryLinkStore, LinkStore
from personalink_core.suggestions import LinkSuggestionClient, parse_suggestion_payload

__all__ = [
    "__version__",
    "DedupResult",
    "ExistingLinkRef",
    "IconTag",
    "IngestReport",
    "InMemoryLinkStore",
    "LinkCategory",
    "LinkIngestionError",
    "LinkIngestor",
    "LinkRecord",
    "LinkStore",
    "LinkSuggestionClient",
    "LinkValidationError",
    "PersistenceFailed",
    "RawSuggestion",
    "Settings",
    "StorageUnavailable",
    "UpstreamContractViolation",
    "classify_icon",
    "load_settings",
    "normalize_suggestion",
    "parse_suggestion_payload",
    "partition_candidates",
    "suggest_new_links",
]

__version__ = "0.1.0"
