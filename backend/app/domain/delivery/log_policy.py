"""
Delivery log append policy.

Decides, from a delivery's current status alone, whether a new log
entry may be appended.
"""

from dataclasses import dataclass
from typing import Optional
from backend.app.models.delivery_enums import DeliveryStatus


ALREADY_DELIVERED = "this order has already been delivered"
CHANGE_STATUS_TO_SHIPPED = "change status to shipped"


@dataclass(frozen=True)
class LogAppendDecision:
    allowed: bool
    reason: Optional[str] = None


def can_append_log(status: DeliveryStatus) -> LogAppendDecision:
    """
    Gate log appends on delivery status.
    
    PENDING and SHIPPED accept new entries. DELIVERED is closed, and
    PROCESSING must first be moved to SHIPPED.
    """
    if status == DeliveryStatus.DELIVERED:
        return LogAppendDecision(allowed=False, reason=ALREADY_DELIVERED)
    if status == DeliveryStatus.PROCESSING:
        return LogAppendDecision(allowed=False, reason=CHANGE_STATUS_TO_SHIPPED)
    return LogAppendDecision(allowed=True)
