"""
Taskwarrior desktop widget.

Components:
- widget/: payload parsing, due offsets, ordering, colouring, markup, refresh loop
- core/: ports (Protocols) and the wired WidgetState
- cli/: composition root and the task-widget entrypoint
"""

__version__ = "0.3.0"
