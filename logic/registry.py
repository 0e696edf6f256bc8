"""Registry of output plugins keyed by name."""

from typing import Dict, List, Optional

from logic.base import OutputPlugin
from logic.plugin import ManuscriptOutputPlugin


class PluginRegistry:
    """Holds the output plugins a host can offer.

    Plugins are registered directly instead of being discovered by
    reflection; lookups are by the plugin's `name`.
    """

    def __init__(self):
        self._plugins: Dict[str, OutputPlugin] = {}

    def register(self, plugin: OutputPlugin) -> None:
        if not isinstance(plugin, OutputPlugin):
            raise TypeError(f"{type(plugin).__name__} does not implement OutputPlugin")
        if plugin.name in self._plugins:
            raise ValueError(f"Output plugin '{plugin.name}' is already registered")
        self._plugins[plugin.name] = plugin

    def get(self, name: str) -> Optional[OutputPlugin]:
        return self._plugins.get(name)

    def list_available(self) -> List[str]:
        return sorted(self._plugins)


def create_default_registry() -> PluginRegistry:
    registry = PluginRegistry()
    registry.register(ManuscriptOutputPlugin())
    return registry
