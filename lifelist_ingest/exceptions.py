"""
Custom exception hierarchy for lifelist-ingest.

The parsing core never raises for malformed input: bad rows are dropped
and the pipeline carries on. These exceptions belong to the outer layer
(config handling and writing outputs), where a failure is fatal for the
run.
"""


class LifelistIngestError(Exception):
    """Base exception for all lifelist-ingest errors."""


class ConfigValidationError(LifelistIngestError):
    """Raised when lifelist.yaml fails validation.

    This can happen if:
    - The file exists but is empty.
    - Required fields are missing or have wrong types.
    """


class ExportError(LifelistIngestError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
