"""
Easiware integration piece: customer-support actions and webhook triggers.
"""

from easiware_piece.auth import easiware_auth, validate_auth
from easiware_piece.piece import easiware

__all__ = [
    "easiware",
    "easiware_auth",
    "validate_auth",
]
