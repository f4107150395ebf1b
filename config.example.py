# config.example.py

"""
Documentation-only module (safe to commit).

Settings are loaded from environment variables (optionally via a local .env file).
The summary configuration itself (source/target files, sections, flags) is edited
with the CLI commands and stored as JSON at TASK_STATUS_CONFIG_PATH.
"""

ENV_VARS = {
    # App / logging
    "TASK_STATUS_APP_NAME": "App display name (default: task-status).",
    "TASK_STATUS_LOG_LEVEL": "Log file level (default: INFO).",
    # Paths
    "TASK_STATUS_VAULT_DIR": "Folder holding the markdown documents (default: current directory).",
    "TASK_STATUS_DATA_DIR": "Local data directory for logs/config (default: .local/task-status).",
    "TASK_STATUS_CONFIG_PATH": "Summary config JSON path (default: <data_dir>/config.json).",
    # Host integration
    "TASK_STATUS_CLIPBOARD_COMMAND": (
        "Fallback copy command reading stdin, used when pyperclip has no backend "
        "(e.g. 'wl-copy' or 'xclip -selection clipboard')."
    ),
    "TASK_STATUS_OPEN_COMMAND": "Command used to open the summary file (default: platform opener).",
}
