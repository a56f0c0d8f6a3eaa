# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    # Task Store
    "TODO_BASE_URL": "Task Store base URL (default: https://todo-fast-app.onrender.com).",
    "TODO_REQUEST_TIMEOUT_SECONDS": "Per-request timeout; 0 or unset disables it (default: 0).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for todo.log (default: .local/todo).",
}
