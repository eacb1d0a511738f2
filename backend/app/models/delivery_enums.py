"""
Delivery Status Enumeration.
"""

import enum


class DeliveryStatus(str, enum.Enum):
    """
    Delivery status enumeration.
    
    Status flow:
        PENDING → PROCESSING → SHIPPED → DELIVERED
    """
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
