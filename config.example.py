# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Front-end
    "TASKLIST_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Local data
    "TASKLIST_DATA_DIR": "Directory for the database and log file (default: .local/tasklist).",
    "TASKLIST_TASKS_DB_PATH": "SQLite file (default: <data_dir>/tasks.sqlite3).",
    # Store
    "TASKLIST_DB_TIMEOUT": "SQLite busy timeout in seconds (default: 30).",
}
