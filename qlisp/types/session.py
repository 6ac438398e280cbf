from enum import Enum


class SessionControl(Enum):
    """What the caller of a top-level evaluation should do next."""

    CONTINUE = "continue"
    TERMINATE = "terminate"
