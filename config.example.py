# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_TO_FILE": "Write DEBUG logs to TASKLIST_LOG_FILE (true/false, default: true).",
    # Connectors
    "TASKLIST_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_TASKS_FILE": "Backing task file (default: <data_dir>/tasks.txt).",
    "TASKLIST_LOG_FILE": "Log file (default: <data_dir>/tasklist.log).",
}
