"""Run context binding for structured logging.

Binds run-scoped context to logs so that every entry emitted while a
pipeline run is in progress carries the same run identifier.

Usage:
    from location_mapper.infrastructure.logging import bind_run_context

    with bind_run_context(input_path="threat_sources.json"):
        logger.info("run_started")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_run_context(
    run_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind run-scoped context to all logs within the context manager.

    Args:
        run_id: Unique run identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.
            None values are dropped.

    Yields:
        The run identifier bound for the block.

    Example:
        with bind_run_context(output_path="locations.csv") as run_id:
            summary = run_pipeline(...)
    """
    context: dict[str, Any] = {"run_id": run_id or str(uuid.uuid4())}
    context.update({k: v for k, v in extra_context.items() if v is not None})

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["run_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
