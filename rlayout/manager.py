"""
Layout Manager

Owns one layout generator per output and bridges layout demands and user
commands from the protocol runtime onto the event bus.
"""

from __future__ import annotations
import dataclasses
import time
from typing import Dict, Optional

from pubsub import pub

from . import topics
from .config import LayoutsConfig
from .layouts import CarouselLayout, Layout, LayoutError, create_layout
from .protocol import GeneratedLayout


class LayoutManager:
    """
    Manages layout generators for multiple outputs.

    Every output gets its own generator with its own copy of the layout
    configuration, so state such as the carousel scroll offset is never
    shared between outputs.

    This component subscribes to OUTPUT_CREATED and OUTPUT_REMOVED.
    It publishes LAYOUT_GENERATED, LAYOUT_FAILED, COMMAND_EXECUTED,
    COMMAND_FAILED and SCROLL_CHANGED events.
    """

    def __init__(self, namespace: str, config: Optional[LayoutsConfig] = None):
        self.config = config or LayoutsConfig()
        self.namespace = namespace
        # Fail early on an unknown namespace
        self.config.for_namespace(namespace)

        self.layouts: Dict[str, Layout] = {}  # output name -> generator

        # Setup debug event logging if enabled
        if self.config.debug:
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to output lifecycle events."""
        pub.subscribe(self._on_output_created, topics.OUTPUT_CREATED)
        pub.subscribe(self._on_output_removed, topics.OUTPUT_REMOVED)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def _on_output_created(self, output: str):
        """Handle OUTPUT_CREATED event."""
        self.add_output(output)

    def _on_output_removed(self, output: str):
        """Handle OUTPUT_REMOVED event."""
        self.remove_output(output)

    def add_output(self, output: str) -> Layout:
        """Create the generator for an output, if it has none yet."""
        if output not in self.layouts:
            engine_config = dataclasses.replace(
                self.config.for_namespace(self.namespace)
            )
            self.layouts[output] = create_layout(
                self.namespace, engine_config, debug=self.config.debug
            )
        return self.layouts[output]

    def remove_output(self, output: str):
        """Drop an output and its layout state."""
        self.layouts.pop(output, None)

    def layout_for(self, output: str) -> Optional[Layout]:
        """Get the generator for an output."""
        return self.layouts.get(output)

    def layout_demand(
        self,
        output: str,
        view_count: int,
        usable_width: int,
        usable_height: int,
        tags: int = 0,
    ) -> GeneratedLayout:
        """
        Generate a layout for an output.

        Unknown outputs are added on their first demand.

        Raises:
            LayoutError: if the generator cannot lay out the area
        """
        layout = self.add_output(output)
        try:
            result = layout.generate_layout(
                view_count, usable_width, usable_height, tags, output
            )
        except LayoutError as e:
            print(f"LayoutManager: Layout for {output} failed: {e}")
            pub.sendMessage(topics.LAYOUT_FAILED, output=output, error=e)
            raise

        pub.sendMessage(
            topics.LAYOUT_GENERATED,
            output=output,
            layout_name=result.layout_name,
            view_count=view_count,
        )
        return result

    def user_command(
        self, output: str, command: str, tags: Optional[int] = None
    ) -> bool:
        """
        Run a user command against an output's generator.

        Errors are reported on the bus, never raised.

        Returns:
            True if the command was applied
        """
        layout = self.add_output(output)
        scroll_before = (
            layout.config.scroll_offset if isinstance(layout, CarouselLayout) else None
        )

        try:
            layout.user_cmd(command, tags, output)
        except LayoutError as e:
            pub.sendMessage(
                topics.COMMAND_FAILED, output=output, command=command, error=e
            )
            return False

        pub.sendMessage(topics.COMMAND_EXECUTED, output=output, command=command)
        if (
            scroll_before is not None
            and layout.config.scroll_offset != scroll_before
        ):
            pub.sendMessage(
                topics.SCROLL_CHANGED,
                output=output,
                scroll_offset=layout.config.scroll_offset,
            )
        return True
