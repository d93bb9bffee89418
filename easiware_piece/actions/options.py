"""
Enumerations shared by several actions and triggers, as value -> label.
"""

CIVILITY_OPTIONS = {
    "Mr": "Mr",
    "Mrs": "Mrs",
}

TICKET_STATUS_OPTIONS = {
    "new": "New",
    "in_progress": "In progress",
    "waiting": "Waiting",
    "closed": "Closed",
}

TICKET_PRIORITY_OPTIONS = {
    "low": "Low",
    "medium": "Medium",
    "high": "High",
}

TICKET_SOURCE_OPTIONS = {
    "chat": "Chat",
    "email": "Email",
    "phone": "Phone",
    "webform": "Webform",
}

USER_ROLE_OPTIONS = {
    "owner": "Owner",
    "admin": "Admin",
    "agent": "Agent",
}

BOOLEAN_STRING_OPTIONS = {
    "false": "False (default)",
    "true": "True",
}

TICKET_EVENT_TYPES = [
    "create",
    "note",
    "subject",
    "status",
    "category",
    "priority",
    "agent",
    "currentChannel",
    "contact",
    "message",
    "solicitation",
    "delete",
    "restore",
]
