"""Batch assembly and submission."""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence

from .mutations import MutationBatch, MutationOperation

logger = logging.getLogger(__name__)


class MutationClient(Protocol):
    """The external document-mutation interface: applies one ordered batch."""

    def batch_update(self, operations: Sequence[MutationOperation]) -> Any:
        ...


@dataclass
class BatchResult:
    operations: MutationBatch = field(default_factory=list)
    submitted: bool = False
    elapsed: float = 0.0
    response: Any = None

    @property
    def operation_count(self) -> int:
        return len(self.operations)

    def counts(self) -> dict[str, int]:
        """Number of operations per kind."""
        return dict(Counter(op.kind for op in self.operations))


class BatchExecutor:
    """Concatenates the pipeline's operation groups and submits them in one call."""

    def __init__(self, client: MutationClient):
        self.client = client

    @staticmethod
    def assemble(*groups: Sequence[MutationOperation]) -> MutationBatch:
        """Concatenate operation groups in the order given.

        The pipeline passes deletions first, then progress, footer, section
        and outline operations.
        """
        batch: MutationBatch = []
        for group in groups:
            batch.extend(group)
        return batch

    def submit(self, batch: MutationBatch) -> BatchResult:
        """Send the whole batch as one request; an empty batch sends nothing.

        Failures raised by the client propagate unchanged. There is no retry
        and no rollback.
        """
        if not batch:
            logger.info("No operations to submit")
            return BatchResult(operations=[], submitted=False)

        logger.info(f"Submitting batch: {len(batch)} operations in 1 call")
        start = time.perf_counter()
        response = self.client.batch_update(batch)
        elapsed = time.perf_counter() - start
        logger.info(f"Batch completed in {elapsed * 1000:.0f}ms")

        return BatchResult(operations=batch, submitted=True, elapsed=elapsed, response=response)
