"""
todotrack CLI - branch-aware todo tracking

Commands:
- todotrack todo <action> - Run one tracker action against the session log
- todotrack todos - Show the current list, grouped
- todotrack session tree/branch/switch/fork/note - Session history operations
"""

__version__ = "0.1.0"
