"""Forward-only status transition rules for care plans and GFPs."""

import logging
from enum import Enum

from ungdoms.core.exceptions import InvalidStatusTransitionError
from ungdoms.models.plans import CarePlanStatus, ImplementationPlanStatus

logger = logging.getLogger(__name__)

CARE_PLAN_STATUS_RANK: dict[Enum, int] = {
    CarePlanStatus.RECEIVED: 0,
    CarePlanStatus.STAFF_NOTIFIED: 1,
    CarePlanStatus.IN_PROGRESS: 2,
    CarePlanStatus.COMPLETED: 3,
}

# sent/overdue are alternates: overdue sits beside in_progress, sent before completed
IMPLEMENTATION_PLAN_STATUS_RANK: dict[Enum, int] = {
    ImplementationPlanStatus.PENDING: 0,
    ImplementationPlanStatus.IN_PROGRESS: 1,
    ImplementationPlanStatus.OVERDUE: 1,
    ImplementationPlanStatus.SENT: 2,
    ImplementationPlanStatus.COMPLETED: 3,
}


def check_transition(
    entity: str, ranks: dict[Enum, int], current: Enum, requested: Enum
) -> None:
    """
    Reject a status change that moves the workflow backwards.

    Staying on the same status, or moving between statuses of equal rank,
    is allowed.

    Args:
        entity: Entity name used in the error message
        ranks: Workflow position of each status
        current: Stored status
        requested: Status in the update

    Raises:
        InvalidStatusTransitionError: If ``requested`` ranks below ``current``
    """
    if ranks[requested] < ranks[current]:
        logger.warning(
            "Rejected backward status transition",
            extra={"entity": entity, "from": current.value, "to": requested.value},
        )
        raise InvalidStatusTransitionError(entity, current.value, requested.value)
