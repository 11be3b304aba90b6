"""
Domain Enums

Enumeration types used across authentication flows.
"""

from enum import Enum


class LoginState(str, Enum):
    """Position of a caller in the two-phase login"""

    primary_pending = "primary_pending"
    mfa_pending = "mfa_pending"
    issued = "issued"
