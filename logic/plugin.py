from typing import Any, Callable, Dict, Optional, Tuple

from logic.image_utils import ImageSource
from logic.launcher import open_in_browser
from logic.settings import Settings
from logic.submission import clean_send_files, write_send_file
from model.models import OutputConfig, SendMode, SendRequest, SendResult

# (owner, output) -> (name, url) or None when canceled
EditDialog = Callable[[Any, OutputConfig], Optional[Tuple[str, str]]]
# (owner, url, case_id) -> (mode, case_id) or None when canceled
SendDialog = Callable[[Any, str, int], Optional[Tuple[SendMode, int]]]


def _tk_edit_dialog(owner, output):
    from ui.edit_dialog import ask_output_settings
    return ask_output_settings(owner, output)


def _tk_send_dialog(owner, url, case_id):
    from ui.send_dialog import ask_send_options
    return ask_send_options(owner, url, case_id)


class ManuscriptOutputPlugin:
    """Attaches screenshots to Manuscript cases through a browser-submitted form."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        edit_dialog: Optional[EditDialog] = None,
        send_dialog: Optional[SendDialog] = None,
        launcher: Optional[Callable[[Any], None]] = None,
    ):
        self.settings = settings or Settings.from_env()
        self._edit_dialog = edit_dialog or _tk_edit_dialog
        self._send_dialog = send_dialog or _tk_send_dialog
        self._launch = launcher or open_in_browser

    @property
    def name(self) -> str:
        return "Manuscript"

    @property
    def description(self) -> str:
        return "Attach screenshots to Manuscript cases."

    @property
    def editable(self) -> bool:
        return True

    # ---------- Configuration ----------
    def create_output(self, owner: Any) -> Optional[OutputConfig]:
        output = OutputConfig(self.name, self.settings.default_url, 1)
        return self.edit_output(owner, output)

    def edit_output(self, owner: Any, output: OutputConfig) -> Optional[OutputConfig]:
        edited = self._edit_dialog(owner, output)
        if edited is None:
            return None
        name, url = edited
        return OutputConfig(name, url, output.last_case_id)

    def serialize_output(self, output: OutputConfig) -> Dict[str, str]:
        return {
            "Name": output.name,
            "Url": output.url,
            "LastCaseID": str(output.last_case_id),
        }

    def deserialize_output(self, values: Dict[str, str]) -> OutputConfig:
        raw_case_id = values.get("LastCaseID", "1")
        try:
            last_case_id = int(raw_case_id)
        except (TypeError, ValueError) as e:
            raise ValueError(f"LastCaseID must be an integer, got {raw_case_id!r}") from e
        return OutputConfig(
            name=values.get("Name", self.name),
            url=values.get("Url", ""),
            last_case_id=last_case_id,
        )

    # ---------- Sending ----------
    def clean_send_files(self) -> int:
        return clean_send_files(self.settings.temp_dir, self.settings.send_file_max_age)

    async def send(self, owner: Any, output: OutputConfig, image: ImageSource) -> SendResult:
        try:
            options = self._send_dialog(owner, output.url, output.last_case_id)
            if options is None:
                return SendResult.canceled()
            mode, case_id = options

            request = SendRequest(url=output.url, case_id=case_id, mode=mode)
            if self.settings.unique_send_file:
                self.clean_send_files()
            path = write_send_file(
                request,
                image,
                directory=self.settings.temp_dir,
                unique=self.settings.unique_send_file,
            )
            self._launch(path)

            if mode.is_case_bound:
                return SendResult.success(OutputConfig(output.name, output.url, case_id))
            return SendResult.success()

        except Exception as e:
            print(f"[Manuscript] Send to {output.url} failed: {e}")
            return SendResult.failed(str(e))
