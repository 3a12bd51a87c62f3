"""
Shared CLI setup: settings, logging, session log and attached tracker.
"""

from typing import Optional, Tuple

from tracker.config import Settings
from tracker.log import FileSessionLog
from tracker.logging_config import setup_logging
from tracker.session import TodoTracker


def load_settings() -> Settings:
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_format)
    return settings


def open_session(session_path: Optional[str] = None) -> Tuple[Settings, FileSessionLog, TodoTracker]:
    """
    Open the session log and attach a tracker to its active branch.

    Every CLI invocation is a fresh attach, so state is always rebuilt here.
    """
    settings = load_settings()
    log = FileSessionLog(session_path or settings.session_path)
    tracker = TodoTracker(tool_name=settings.tool_name)
    tracker.attach(log)
    return settings, log, tracker
