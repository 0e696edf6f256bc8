"""Base protocol for screenshot output plugins."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from logic.image_utils import ImageSource
from model.models import OutputConfig, SendResult


@runtime_checkable
class OutputPlugin(Protocol):
    """Interface a screenshot host uses to drive an output.

    The host owns persistence and the window hierarchy. A plugin creates and
    edits its configuration through dialogs, converts it to and from a flat
    string mapping for storage, and sends images.

    `owner` is the host window dialogs should be parented to (a Tk widget
    for the bundled host, or None).
    """

    @property
    def name(self) -> str:
        """Unique identifier, also used as the default output name."""
        ...

    @property
    def description(self) -> str:
        ...

    @property
    def editable(self) -> bool:
        ...

    def create_output(self, owner: Any) -> Optional[OutputConfig]:
        """Return a new configuration, or None if the user canceled."""
        ...

    def edit_output(self, owner: Any, output: OutputConfig) -> Optional[OutputConfig]:
        """Return the edited configuration, or None if the user canceled."""
        ...

    def serialize_output(self, output: OutputConfig) -> Dict[str, str]:
        ...

    def deserialize_output(self, values: Dict[str, str]) -> OutputConfig:
        ...

    async def send(self, owner: Any, output: OutputConfig, image: ImageSource) -> SendResult:
        """Send `image` to the output. Must not raise; failures are results."""
        ...
