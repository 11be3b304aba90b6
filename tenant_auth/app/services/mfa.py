"""
MFA Challenge Coordinator

Second-factor gate between primary credential check and token issuance.

State machine:
    primary_pending --(login, MFA user)--> mfa_pending --(verify)--> issued
There is no way back to primary_pending; an abandoned challenge simply
lets its pending-MFA token expire.
"""

import re
from abc import ABC, abstractmethod

from tenant_auth.domain.entities import LoginState, User

MFA_CODE_PATTERN = re.compile(r"^\d{6}$")


class MFAVerifier(ABC):
    """Second-factor algorithm. Replace to plug in real one-time codes."""

    @abstractmethod
    def verify(self, user: User, code: str) -> bool:
        pass


class FormatOnlyMFAVerifier(MFAVerifier):
    """Accepts any code that passed the six digit format check"""

    def verify(self, user: User, code: str) -> bool:
        return True


class MFAChallengeCoordinator:
    def __init__(self, verifier: MFAVerifier = None):
        self.verifier = verifier or FormatOnlyMFAVerifier()

    @staticmethod
    def requires_mfa(user: User) -> bool:
        return bool(user.mfa_enabled and user.mfa_secret)

    def state_after_primary(self, user: User) -> LoginState:
        """State reached once primary credentials have been verified"""
        if self.requires_mfa(user):
            return LoginState.mfa_pending
        return LoginState.issued

    def check_code(self, user: User, code: str) -> bool:
        if not isinstance(code, str) or not MFA_CODE_PATTERN.match(code):
            return False
        return self.verifier.verify(user, code)
