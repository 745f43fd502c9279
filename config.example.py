# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every value has a default, so nothing here is required to run locally.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: INFO). The file log is always DEBUG.",
    # Storage documents (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory, also holds taskboard.log (default: .local/taskboard).",
    "TASKBOARD_TASKS_PATH": "Task document path (default: <data_dir>/tasks.json).",
    "TASKBOARD_CATEGORIES_PATH": "Category document path (default: <data_dir>/categories.json).",
    "TASKBOARD_HOLIDAYS_PATH": "Holiday map path (default: <data_dir>/holidays.json).",
    "TASKBOARD_STATIC_DIR": "Static UI directory served at / when it exists (default: static).",
    # HTTP server
    "TASKBOARD_HOST": "Bind address for `taskboard serve` (default: 127.0.0.1).",
    "TASKBOARD_PORT": "Port for `taskboard serve` (default: 3000).",
    "TASKBOARD_CORS_ORIGINS": "Comma/space separated allowed origins (default: *).",
    # Console over HTTP
    "TASKBOARD_API_BASE_URL": "Server URL for the console; empty means local documents.",
    "TASKBOARD_API_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
    "TASKBOARD_API_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 10).",
    # Calendar / views
    "TASKBOARD_UTC_OFFSET_HOURS": "Fixed offset used for every calendar-day decision (default: 9).",
    "TASKBOARD_PAGE_SIZE": "All-tasks page size; values <= 0 fall back to 5 (default: 5).",
    "TASKBOARD_ENDING_SOON_DAYS": "Ending-soon window in days (default: 7).",
}
