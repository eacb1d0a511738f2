"""
User roles enumeration.

Defines the role types for the delivery tracking system.
"""

import enum


class UserRole(str, enum.Enum):
    """
    User role enumeration.
    
    Roles:
        CUSTOMER: Owns deliveries and may only view their own (default role)
        SALE: Staff role that manages deliveries and may view any of them
    """
    CUSTOMER = "customer"
    SALE = "sale"
