"""
Fan-out Writer - one freight per destination from a single submission.

For each destination, in submission order:
- insert one freight row carrying only that destination
- insert that freight's price-table rows (vehicle type x range)

The first store error stops the run and is re-raised unchanged. Rows already
committed stay in place unless compensation is enabled, in which case the
rows created by the failed run are deleted (newest first) before re-raising.
"""

from collections.abc import Mapping
from datetime import datetime
from time import time
from typing import Any, Optional, Union

import structlog
from pydantic import BaseModel, Field

from freight_board.core.config import ConfigManager, get_config
from freight_board.core.errors import EmptySubmissionError
from freight_board.data.models.freight import (
    CreatedFreight,
    Destination,
    FreightSubmission,
    PriceTableRow,
)
from freight_board.store.base import FreightStore


class FanOutResult(BaseModel):
    """Outcome of one create_freights run."""

    timestamp: datetime
    destinations_requested: int
    created: list[CreatedFreight] = Field(default_factory=list)
    price_rows_created: int = 0
    failed_destination_index: Optional[int] = None
    failed_step: Optional[str] = None  # "freight" or "price_rows"
    error: Optional[str] = None
    compensated: bool = False
    execution_time_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.error is None


class FanOutWriter:
    """
    Creates freights for multi-destination submissions.

    Runs strictly sequentially; each store round-trip completes before the
    next one starts.
    """

    def __init__(
        self,
        store: FreightStore,
        config_manager: Optional[ConfigManager] = None,
        logger: Optional[structlog.BoundLogger] = None,
        compensate_on_failure: Optional[bool] = None,
    ) -> None:
        """
        Initialize the writer.

        Args:
            store: Record store to write to
            config_manager: Optional config manager (defaults to global instance)
            logger: Optional structured logger
            compensate_on_failure: Delete rows of a failed run; defaults to
                the writer.compensate_on_failure setting
        """
        self.store = store
        self.config_manager = config_manager or get_config()
        self.logger = logger or structlog.get_logger(component="fanout_writer")

        if compensate_on_failure is None:
            compensate_on_failure = self.config_manager.get_writer_config().compensate_on_failure
        self.compensate_on_failure = compensate_on_failure

        # Run history (for diagnostics)
        self.history: list[FanOutResult] = []

    def create_freights(
        self, submission: Union[FreightSubmission, Mapping[str, Any]]
    ) -> list[CreatedFreight]:
        """
        Create one freight per destination of the submission.

        Args:
            submission: Submission model or a mapping validated into one

        Returns:
            Created freight summaries in submission order

        Raises:
            EmptySubmissionError: If the submission has no destinations
            Exception: The first store error, unchanged
        """
        if not isinstance(submission, FreightSubmission):
            submission = FreightSubmission.model_validate(submission)
        if not submission.destinos:
            raise EmptySubmissionError("Submission must include at least one destination")

        start_time = time()
        result = FanOutResult(
            timestamp=datetime.now(),
            destinations_requested=len(submission.destinos),
        )
        self.history.append(result)

        base_payload = submission.base_payload()
        # Freight ids committed by this run
        committed: list[str] = []

        self.logger.info(
            "fanout_started",
            destinations=len(submission.destinos),
            vehicle_tables=len(submission.vehicle_price_tables),
            origin=f"{submission.origem_cidade}, {submission.origem_estado}",
        )

        for index, destination in enumerate(submission.destinos):
            step = "freight"
            try:
                freight = self.store.insert_freight(
                    {**base_payload, "destinos": [destination.model_dump(exclude_none=True)]}
                )
                committed.append(str(freight["id"]))
                summary = self._summarize(freight, destination)
                result.created.append(summary)
                self.logger.info(
                    "freight_created",
                    freight_id=summary.id,
                    code=summary.codigo_agregamento,
                    destination=str(destination),
                    position=index + 1,
                )

                step = "price_rows"
                rows = self._price_rows(summary.id, submission)
                if rows:
                    self.store.insert_price_rows(rows)
                    result.price_rows_created += len(rows)
                    self.logger.info(
                        "price_rows_inserted", freight_id=summary.id, count=len(rows)
                    )

            except Exception as e:
                result.failed_destination_index = index
                result.failed_step = step
                result.error = str(e)
                result.execution_time_seconds = time() - start_time
                self.logger.error(
                    "freight_insert_failed" if step == "freight" else "price_rows_insert_failed",
                    destination=str(destination),
                    position=index + 1,
                    created=[c.id for c in result.created],
                    error=str(e),
                    error_type=type(e).__name__,
                )
                if self.compensate_on_failure and committed:
                    result.compensated = self._compensate(committed)
                raise

        result.execution_time_seconds = time() - start_time
        self.logger.info(
            "fanout_completed",
            created=len(result.created),
            price_rows=result.price_rows_created,
            execution_time=result.execution_time_seconds,
        )
        return list(result.created)

    def execute(self, *args: Any, **kwargs: Any) -> list[CreatedFreight]:
        """Execute a fan-out run (delegates to create_freights)."""
        return self.create_freights(*args, **kwargs)

    def _summarize(self, freight: Mapping[str, Any], destination: Destination) -> CreatedFreight:
        return CreatedFreight(
            id=str(freight["id"]),
            codigo_agregamento=freight.get("codigo_agregamento") or "N/A",
            destino_cidade=destination.city,
            destino_estado=destination.state,
        )

    def _price_rows(self, freight_id: str, submission: FreightSubmission) -> list[dict[str, Any]]:
        return [
            PriceTableRow(
                freight_id=freight_id,
                vehicle_type=table.vehicle_type,
                km_start=price_range.km_start,
                km_end=price_range.km_end,
                price=price_range.price,
            ).model_dump(mode="json")
            for table in submission.vehicle_price_tables
            for price_range in table.ranges
        ]

    def _compensate(self, committed: list[str]) -> bool:
        """
        Delete the rows committed by the failed run, newest first.

        Returns:
            True if every delete succeeded
        """
        clean = True
        for freight_id in reversed(committed):
            try:
                self.store.delete_price_rows(freight_id)
                self.store.delete_freight(freight_id)
            except Exception as e:
                clean = False
                self.logger.error("compensation_failed", freight_id=freight_id, error=str(e))
        self.logger.warning(
            "fanout_compensated", freights=committed, clean=clean
        )
        return clean

    def __repr__(self) -> str:
        """String representation of the writer."""
        return f"{self.__class__.__name__}(store={self.store.__class__.__name__})"
