"""
The Easiware piece as loaded by the automation host.
"""

from easiware_piece.actions import actions
from easiware_piece.auth import easiware_auth
from easiware_piece.core.config import settings
from easiware_piece.framework import Piece
from easiware_piece.triggers import triggers


easiware = Piece(
    display_name=settings.PROJECT_NAME,
    description=settings.PIECE_DESCRIPTION,
    auth=easiware_auth,
    actions=actions,
    triggers=triggers,
    categories=["CUSTOMER_SUPPORT"],
    authors=["stefapi"],
    logo_url="https://app-staging.easiware.com/images/easiware-heart.svg",
    minimum_supported_release="0.36.1",
)
