# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKWIDGET_APP_NAME": "App display name (default: task-widget).",
    "TASKWIDGET_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKWIDGET_DATA_DIR": "Directory for task-widget.log (default: .local/task-widget).",
    # Export / refresh
    "TASKWIDGET_COMMAND": "Export command line (default: task +READY -PARENT export).",
    "TASKWIDGET_REFRESH_SECONDS": "Refresh interval for --watch (default: 10).",
    # Presentation
    "TASKWIDGET_STYLESHEET": (
        "Stylesheet href linked from the widget (default: taskwarrior.widget/style.css; empty => none)."
    ),
    "TASKWIDGET_MAX_ENTRIES": "Maximum rows shown; rows fade out over this many steps (default: 20).",
    "TASKWIDGET_ORDERING": "Row ordering: due (due date, then urgency) or urgency (default: due).",
    "TASKWIDGET_TIMEZONE": "IANA timezone used to cut due dates to days (default: system local).",
    "TASKWIDGET_OUTPUT_PATH": "Write the document to this file instead of stdout.",
    # Colours, as "r,g,b"
    "TASKWIDGET_OVERDUE_COLOUR": "Overdue rows (default: 255,100,100 red).",
    "TASKWIDGET_TODAY_COLOUR": "Rows due today (default: 255,200,0 amber).",
    "TASKWIDGET_FUTURE_COLOUR": "Rows due later or undated (default: 255,255,255).",
    "TASKWIDGET_TAGS_COLOUR": "Tag text (default: 50,225,50 green).",
}
