"""Operation result types and status enums.

Standardized result types returned by the infrastructure layer.
"""

from location_mapper.infrastructure.operations.result import OperationResult
from location_mapper.infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
