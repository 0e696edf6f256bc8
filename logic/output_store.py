import json
import os
from typing import Callable, Dict, List, Tuple

from model.models import OutputConfig

OutputValues = Dict[str, str]


class OutputStore:
    """JSON file holding the serialized outputs of the bundled host.

    Entries that fail to deserialize are kept aside and written back on the
    next save. A file that cannot be parsed at all is never overwritten.
    """

    def __init__(self, path: str):
        self.path = path
        self._unreadable: List[OutputValues] = []
        self._locked = False

    def load(self) -> List[OutputValues]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Outputs file '{self.path}' is not valid JSON: {e}") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise ValueError(f"Outputs file '{self.path}' must contain a list of outputs.")
        return [{str(k): str(v) for k, v in item.items()} for item in data]

    def load_outputs(
        self, deserialize: Callable[[OutputValues], OutputConfig]
    ) -> Tuple[List[OutputConfig], List[str]]:
        """
        Deserialize every stored entry, skipping the broken ones.

        Returns the outputs plus one error line per skipped entry. If the file
        itself is unreadable, ValueError propagates and saving is blocked.
        """
        self._unreadable = []
        try:
            values_list = self.load()
        except ValueError:
            self._locked = True
            raise
        self._locked = False

        outputs: List[OutputConfig] = []
        errors: List[str] = []
        for values in values_list:
            try:
                outputs.append(deserialize(values))
            except ValueError as e:
                self._unreadable.append(values)
                errors.append(f"{values.get('Name', '?')}: {e}")
        return outputs, errors

    def save(self, outputs: List[OutputValues]) -> None:
        if self._locked:
            raise RuntimeError(f"Outputs file '{self.path}' could not be read; refusing to overwrite it.")

        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(list(outputs) + self._unreadable, f, indent=2)
        print(f"[Manuscript] Saved {len(outputs)} output(s) to {self.path}")
