"""
Runtime settings read from the environment.

Environment Variables:
    TODOTRACK_SESSION: Session log path - default: ~/.todotrack/session.jsonl
    TODOTRACK_TOOL_NAME: Tool identity used for records - default: todo
    TODOTRACK_LOG_LEVEL: Log level - default: WARNING
    TODOTRACK_LOG_FORMAT: json or text - default: text
"""

import os
from dataclasses import dataclass

from .replay.runner import DEFAULT_TOOL_NAME

DEFAULT_SESSION_PATH = os.path.join("~", ".todotrack", "session.jsonl")


@dataclass(frozen=True)
class Settings:
    session_path: str = DEFAULT_SESSION_PATH
    tool_name: str = DEFAULT_TOOL_NAME
    log_level: str = "WARNING"
    log_format: str = "text"

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            session_path=os.path.expanduser(os.getenv("TODOTRACK_SESSION") or DEFAULT_SESSION_PATH),
            tool_name=os.getenv("TODOTRACK_TOOL_NAME") or DEFAULT_TOOL_NAME,
            log_level=(os.getenv("TODOTRACK_LOG_LEVEL") or "WARNING").upper(),
            log_format=(os.getenv("TODOTRACK_LOG_FORMAT") or "text").lower(),
        )
