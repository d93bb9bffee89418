"""
Easiware actions, grouped by resource.
"""

from .contact import contact_actions
from .custom_api_call import custom_api_call
from .misc import misc_actions
from .ticket import search_tickets, ticket_actions

# Order shown to the host. search_tickets is kept out in favour of find_tickets_body.
actions = [
    *contact_actions,
    *misc_actions,
    *ticket_actions,
    custom_api_call,
]

__all__ = [
    "actions",
    "contact_actions",
    "custom_api_call",
    "misc_actions",
    "search_tickets",
    "ticket_actions",
]
