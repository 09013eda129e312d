from __future__ import annotations


class LinkIngestionError(RuntimeError):
    pass


class LinkValidationError(LinkIngestionError, ValueError):
    pass


class UpstreamContractViolation(LinkIngestionError):
    pass


class StorageUnavailable(LinkIngestionError):
    pass


class PersistenceFailed(LinkIngestionError):
    pass
