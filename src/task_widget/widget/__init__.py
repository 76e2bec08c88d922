"""
Widget subsystem.

Components:
- widget_models.py: data structures (RawTask, DisplayTask, FormatterConfig, colours)
- due_dates.py: compact timestamp parsing and due offsets
- ordering.py: pluggable ordering strategies
- formatter.py: TaskListFormatter (normalize -> order -> truncate -> annotate)
- markup.py: HTML emission
- render.py: the stateless render entry point
- task_source.py / sinks.py / refresh_loop.py: host-side glue
"""
