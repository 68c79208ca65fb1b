# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for machine-specific values.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory for logs and state (default: .local/taskboard).",
    "TASKBOARD_TASKS_PATH": "Saved tasks file (default: <data_dir>/tasks.json).",
    # Persistence
    "TASKBOARD_AUTOLOAD": "Load the tasks file on startup if it exists (true/false, default false).",
    "TASKBOARD_AUTOSAVE": "Save after every change and on exit (true/false, default false).",
    # Optional commands
    "TASKBOARD_SORT_ENABLED": "Expose /sort (true/false, default true).",
    "TASKBOARD_CLEAR_COMPLETED_ENABLED": "Expose /clear (true/false, default true).",
}
