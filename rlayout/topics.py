"""
Event Topics for rlayout

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Every topic is always published with the same keyword arguments, since
Pypubsub fixes a topic's message data specification on first use.
"""

# Output (monitor) events
OUTPUT_CREATED = "output.created"
"""Published when the runtime announces a new output. Params: output (name)"""

OUTPUT_REMOVED = "output.removed"
"""Published when an output disappears. Params: output (name)"""

# Layout events
LAYOUT_GENERATED = "layout.generated"
"""Published after a layout demand succeeds. Params: output, layout_name, view_count"""

LAYOUT_FAILED = "layout.failed"
"""Published when a layout demand raises. Params: output, error"""

# User command events
COMMAND_EXECUTED = "command.executed"
"""Published after a user command is applied. Params: output, command"""

COMMAND_FAILED = "command.failed"
"""Published when a user command is rejected. Params: output, command, error"""

# Layout state notifications
SCROLL_CHANGED = "scroll.changed"
"""Published when a carousel's scroll offset changes. Params: output, scroll_offset"""
