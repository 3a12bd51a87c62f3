"""
Todo Tracker Engine

Branch-aware, event-sourced todo list state machine. State is rebuilt from the
active branch of an externally owned session log.
"""

__version__ = "0.1.0"
