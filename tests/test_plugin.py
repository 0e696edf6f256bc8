import asyncio
import os
import time

import pytest

from conftest import FakeLauncher, parse_send_page
from logic.base import OutputPlugin
from model.models import OutputConfig, Result, SendMode


def _send(plugin, output, image):
    return asyncio.run(plugin.send(None, output, image))


class TestMetadata:

    def test_identity(self, make_plugin):
        plugin = make_plugin()
        assert plugin.name == "Manuscript"
        assert plugin.description == "Attach screenshots to Manuscript cases."
        assert plugin.editable is True

    def test_implements_output_plugin(self, make_plugin):
        assert isinstance(make_plugin(), OutputPlugin)


class TestConfiguration:

    def test_create_output_uses_dialog_answer(self, make_plugin):
        plugin = make_plugin(edit_answer=("Support", "https://support.example.com/"))
        assert plugin.create_output(None) == OutputConfig("Support", "https://support.example.com/", 1)

    def test_create_output_canceled(self, make_plugin):
        assert make_plugin(edit_answer=None).create_output(None) is None

    def test_create_output_prefills_defaults(self, make_plugin):
        seen = []
        plugin = make_plugin()
        plugin._edit_dialog = lambda owner, output: seen.append(output)
        plugin.create_output(None)
        assert seen == [OutputConfig("Manuscript", "https://example.manuscript.com/", 1)]

    def test_edit_output_keeps_last_case_id(self, make_plugin):
        plugin = make_plugin(edit_answer=("Renamed", "https://new.example.com/"))
        edited = plugin.edit_output(None, OutputConfig("Old", "https://old.example.com/", 77))
        assert edited == OutputConfig("Renamed", "https://new.example.com/", 77)

    def test_serialize(self, make_plugin):
        values = make_plugin().serialize_output(OutputConfig("Support", "https://s.example/", 12))
        assert values == {"Name": "Support", "Url": "https://s.example/", "LastCaseID": "12"}

    @pytest.mark.parametrize("output", [
        OutputConfig("Support", "https://s.example/", 12),
        OutputConfig("Empty url", "", 1),
    ])
    def test_round_trip(self, make_plugin, output):
        plugin = make_plugin()
        assert plugin.deserialize_output(plugin.serialize_output(output)) == output

    def test_deserialize_defaults(self, make_plugin):
        assert make_plugin().deserialize_output({}) == OutputConfig("Manuscript", "", 1)

    def test_deserialize_missing_case_id(self, make_plugin):
        output = make_plugin().deserialize_output({"Name": "A", "Url": "https://a.example/"})
        assert output.last_case_id == 1

    def test_deserialize_rejects_bad_case_id(self, make_plugin):
        with pytest.raises(ValueError, match="LastCaseID"):
            make_plugin().deserialize_output({"LastCaseID": "abc"})


class TestSend:

    OUTPUT = OutputConfig("Support", "https://fb.example.com/", 10)

    def test_dialog_is_prefilled(self, make_plugin, image):
        plugin = make_plugin(send_answer=None)
        _send(plugin, self.OUTPUT, image)
        assert plugin._send_dialog.calls == [(None, "https://fb.example.com/", 10)]

    def test_canceled_writes_nothing(self, make_plugin, image, tmp_path):
        launcher = FakeLauncher()
        plugin = make_plugin(send_answer=None, launcher=launcher)

        result = _send(plugin, self.OUTPUT, image)

        assert result.result == Result.CANCELED
        assert result.output is None
        assert list(tmp_path.glob("*.html")) == []
        assert launcher.opened == []

    @pytest.mark.parametrize("mode", [SendMode.ATTACH_TO_CASE, SendMode.REPLY_TO_CASE])
    def test_case_bound_mode_returns_updated_output(self, make_plugin, image, mode):
        launcher = FakeLauncher()
        plugin = make_plugin(send_answer=(mode, 42), launcher=launcher)

        result = _send(plugin, self.OUTPUT, image)

        assert result.result == Result.SUCCESS
        assert result.output == OutputConfig("Support", "https://fb.example.com/", 42)
        assert len(launcher.opened) == 1
        page = parse_send_page(launcher.opened[0].read_text(encoding="utf-8"))
        assert page.action == "https://fb.example.com/"
        assert dict(page.fields)["ixBug"] == "42"

    @pytest.mark.parametrize("mode", [SendMode.NEW_CASE, SendMode.NEW_EMAIL])
    def test_other_modes_return_no_output(self, make_plugin, image, mode):
        launcher = FakeLauncher()
        plugin = make_plugin(send_answer=(mode, 42), launcher=launcher)

        result = _send(plugin, self.OUTPUT, image)

        assert result.result == Result.SUCCESS
        assert result.output is None
        fields = dict(parse_send_page(launcher.opened[0].read_text(encoding="utf-8")).fields)
        assert "ixBug" not in fields

    def test_fixed_file_name_when_not_unique(self, make_plugin, image, tmp_path):
        launcher = FakeLauncher()
        plugin = make_plugin(send_answer=(SendMode.NEW_CASE, 1), launcher=launcher, unique=False)
        _send(plugin, self.OUTPUT, image)
        assert launcher.opened == [tmp_path / "SendToManuscript.html"]

    def test_launch_failure_is_reported(self, make_plugin, image):
        plugin = make_plugin(send_answer=(SendMode.NEW_CASE, 1),
                             launcher=FakeLauncher(error=OSError("no handler for .html")))

        result = _send(plugin, self.OUTPUT, image)

        assert result.result == Result.FAILED
        assert result.message == "no handler for .html"
        assert result.output is None

    def test_encoding_failure_is_reported(self, make_plugin):
        plugin = make_plugin(send_answer=(SendMode.ATTACH_TO_CASE, 3))
        result = _send(plugin, self.OUTPUT, b"not an image")
        assert result.result == Result.FAILED
        assert result.message

    def test_dialog_failure_is_reported(self, make_plugin, image):
        plugin = make_plugin()

        def broken_dialog(owner, url, case_id):
            raise RuntimeError("no display")

        plugin._send_dialog = broken_dialog
        result = _send(plugin, self.OUTPUT, image)
        assert result.result == Result.FAILED
        assert result.message == "no display"

    def test_send_sweeps_old_send_files(self, make_plugin, image, tmp_path):
        stale = tmp_path / "SendToManuscript-stale.html"
        stale.write_text("<html></html>", encoding="utf-8")
        old = time.time() - 2 * 24 * 60 * 60
        os.utime(stale, (old, old))

        launcher = FakeLauncher()
        plugin = make_plugin(send_answer=(SendMode.NEW_CASE, 1), launcher=launcher)
        for _ in range(3):
            assert _send(plugin, self.OUTPUT, image).result == Result.SUCCESS

        assert not stale.exists()
        assert sorted(tmp_path.glob("SendToManuscript-*.html")) == sorted(launcher.opened)
