"""
Freight lifecycle - status transitions and hard delete.

Status edits are last-write-wins; there is no version check.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Union

import structlog

from freight_board.core.errors import FreightNotFoundError, InvalidStatusTransition
from freight_board.data.models.freight import FreightStatus
from freight_board.store.base import FreightStore

logger = structlog.get_logger(component="freight_lifecycle")


def transition_status(
    store: FreightStore,
    freight_id: str,
    new_status: Union[FreightStatus, str],
    log: Optional[structlog.BoundLogger] = None,
) -> dict[str, Any]:
    """
    Move a freight to a new status.

    Args:
        store: Record store
        freight_id: Freight to update
        new_status: Target status (enum or stored value)
        log: Optional structured logger

    Returns:
        The updated freight row

    Raises:
        FreightNotFoundError: If the freight does not exist
        InvalidStatusTransition: If the lifecycle forbids the move
        ValueError: If new_status is not a known status
    """
    log = log or logger
    target = FreightStatus(new_status)

    freight = store.get_freight(freight_id)
    if freight is None:
        raise FreightNotFoundError(f"Freight not found: {freight_id}")

    current_raw = freight.get("status") or FreightStatus.PENDING.value
    try:
        current = FreightStatus(current_raw)
    except ValueError:
        raise InvalidStatusTransition(str(current_raw), target.value) from None

    if not current.can_transition_to(target):
        log.warning(
            "status_transition_rejected",
            freight_id=freight_id,
            current=current.value,
            requested=target.value,
        )
        raise InvalidStatusTransition(current.value, target.value)

    updated = store.update_freight(
        freight_id,
        {"status": target.value, "updated_at": datetime.now(timezone.utc).isoformat()},
    )
    log.info(
        "status_transitioned", freight_id=freight_id, previous=current.value, current=target.value
    )
    return updated


def delete_freight(
    store: FreightStore, freight_id: str, log: Optional[structlog.BoundLogger] = None
) -> None:
    """
    Hard-delete a freight row.

    Price-table rows are left untouched; there is no cascade.
    """
    log = log or logger
    if store.get_freight(freight_id) is None:
        raise FreightNotFoundError(f"Freight not found: {freight_id}")
    store.delete_freight(freight_id)
    log.info("freight_deleted", freight_id=freight_id)
