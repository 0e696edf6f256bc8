from html.parser import HTMLParser

import pytest
from PIL import Image

from logic.plugin import ManuscriptOutputPlugin
from logic.settings import Settings


class HiddenInputParser(HTMLParser):
    """Collects the form action and hidden inputs of a rendered send page."""

    def __init__(self):
        super().__init__()
        self.action = None
        self.method = None
        self.fields = []

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == "form":
            self.action = attrs.get("action")
            self.method = attrs.get("method")
        elif tag == "input" and attrs.get("type") == "hidden":
            self.fields.append((attrs["name"], attrs["value"]))


def parse_send_page(document):
    parser = HiddenInputParser()
    parser.feed(document)
    return parser


@pytest.fixture
def image():
    return Image.new("RGB", (16, 16), (14, 165, 233))


class FakeSendDialog:
    def __init__(self, answer):
        self.answer = answer
        self.calls = []

    def __call__(self, owner, url, case_id):
        self.calls.append((owner, url, case_id))
        return self.answer


class FakeLauncher:
    def __init__(self, error=None):
        self.error = error
        self.opened = []

    def __call__(self, path):
        if self.error:
            raise self.error
        self.opened.append(path)


@pytest.fixture
def make_plugin(tmp_path):
    def _make(send_answer=None, edit_answer=None, launcher=None, unique=True):
        settings = Settings(temp_dir=str(tmp_path), unique_send_file=unique,
                            outputs_file=str(tmp_path / "outputs.json"),
                            default_url="https://example.manuscript.com/")
        return ManuscriptOutputPlugin(
            settings=settings,
            edit_dialog=lambda owner, output: edit_answer,
            send_dialog=FakeSendDialog(send_answer),
            launcher=launcher or FakeLauncher(),
        )
    return _make
