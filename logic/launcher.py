import os
import sys
import webbrowser
from pathlib import Path
from typing import Union


def open_in_browser(path: Union[str, os.PathLike]) -> None:
    """Open a local file with the OS default handler (normally the web browser)."""
    path = Path(path).resolve()
    if not path.exists():
        raise RuntimeError(f"Send file does not exist: {path}")

    if sys.platform == "win32":
        os.startfile(str(path))
    elif not webbrowser.open(path.as_uri()):
        raise RuntimeError(f"No browser available to open {path}")

    print(f"[Manuscript] Opened {path}")
