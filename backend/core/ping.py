"""Health-check reply for the calculator API."""

PING_MESSAGE = "pong"


def get_ping_message() -> str:
    return PING_MESSAGE
