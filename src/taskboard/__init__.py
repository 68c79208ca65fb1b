"""taskboard - three-column task tracker (To Do / In Progress / Completed)."""

__version__ = "1.0.0"
