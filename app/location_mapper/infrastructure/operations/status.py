"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of calls into
the infrastructure layer so the pipeline can decide what is fatal and what
is absorbed.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Environment problem (missing or unreadable file, corrupt data)
        PERMANENT_ERROR: Non-retryable error (validation, misuse)
        NOT_FOUND: Resource not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
