"""
Builds the self-submitting HTML page that carries a screenshot to Manuscript.

The image travels as base64 PNG split over several hidden fields
(`base64png1`..`base64pngN`, count in `cImageFragments`) so no single form
field grows past what browsers and servers accept. Manuscript reassembles the
fragments in index order.
"""

import html
import os
import tempfile
import time
from pathlib import Path
from typing import List, Optional, Tuple

from logic.image_utils import ImageSource, image_to_base64_png, split_fragments
from model.models import SendMode, SendRequest

FRAGMENT_SIZE = 100000
SEND_FILE_NAME = "SendToManuscript.html"
PAGE_TITLE = "Sending Screenshot to Manuscript..."

SEND_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{TITLE}</title>
<style>
  body { font-family: "Segoe UI", Arial, sans-serif; background: #0b1220; color: #e5e7eb; }
  .card { max-width: 520px; margin: 80px auto; padding: 24px; background: #0f172a; }
  button { background: #0ea5e9; color: #0b1220; border: 0; padding: 8px 14px; }
</style>
</head>
<body onload="document.forms['sendForm'].submit();">
<div class="card">
<p>{TITLE}</p>
<form name="sendForm" action="{URL}" method="post" accept-charset="UTF-8" enctype="application/x-www-form-urlencoded">
{FORM_DATA}
<noscript><button type="submit">Send</button></noscript>
</form>
</div>
</body>
</html>"""

# mode -> (fEmail, fNewCase)
_MODE_FLAGS = {
    SendMode.NEW_CASE: ("0", "1"),
    SendMode.NEW_EMAIL: ("1", "1"),
    SendMode.ATTACH_TO_CASE: ("0", "0"),
    SendMode.REPLY_TO_CASE: ("1", "0"),
}

Field = Tuple[str, str]


def build_dest(mode: SendMode, case_id: int) -> str:
    f_email, f_new_case = _MODE_FLAGS[mode]
    dest = f"pg=pgSubmitScreenshot&fNewCase={f_new_case}&fEmail={f_email}"
    if mode.is_case_bound:
        dest += f"&ixBug={case_id}"
    return dest


def build_form_fields(mode: SendMode, case_id: int, base64_png: str,
                      fragment_size: int = FRAGMENT_SIZE) -> List[Field]:
    """
    Return the hidden form fields, in document order.

    `ixBug` is only emitted for case-bound modes; `case_id` is ignored otherwise.
    """
    f_email, f_new_case = _MODE_FLAGS[mode]
    fields: List[Field] = [("fEmail", f_email), ("fNewCase", f_new_case)]
    if mode.is_case_bound:
        fields.append(("ixBug", str(case_id)))

    fragments = split_fragments(base64_png, fragment_size)
    fields.append(("cImageFragments", str(len(fragments))))
    for index, fragment in enumerate(fragments, start=1):
        fields.append((f"base64png{index}", fragment))

    fields.append(("dest", build_dest(mode, case_id)))
    return fields


def render_form_data(fields: List[Field]) -> str:
    return "\n".join(
        f'<input type="hidden" name="{html.escape(name)}" value="{html.escape(value)}">'
        for name, value in fields
    )


def render_document(url: str, form_data: str, template: str = SEND_TEMPLATE) -> str:
    # plain replace: the template's CSS braces must survive
    return (
        template
        .replace("{TITLE}", html.escape(PAGE_TITLE))
        .replace("{URL}", html.escape(url))
        .replace("{FORM_DATA}", form_data)
    )


def build(url: str, image: ImageSource, mode: SendMode, case_id: int) -> str:
    base64_png = image_to_base64_png(image)
    fields = build_form_fields(mode, case_id, base64_png)
    return render_document(url, render_form_data(fields))


def write_send_file(request: SendRequest, image: ImageSource,
                    directory: Optional[str] = None, unique: bool = True) -> Path:
    """
    Render the send page for `request` and write it to disk.

    With `unique` every call gets its own file; otherwise the shared
    SendToManuscript.html is overwritten, so concurrent sends would race.
    """
    content = build(request.url, image, request.mode, request.case_id)
    directory = directory or tempfile.gettempdir()

    if unique:
        fd, name = tempfile.mkstemp(prefix="SendToManuscript-", suffix=".html", dir=directory)
        os.close(fd)
        path = Path(name)
    else:
        path = Path(directory) / SEND_FILE_NAME

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
        f.write("\n")

    print(f"[Manuscript] Wrote send file {path} ({request.mode.value})")
    return path


def clean_send_files(directory: Optional[str] = None, max_age_seconds: int = 24 * 60 * 60) -> int:
    """
    Delete per-send files older than `max_age_seconds` from `directory`.

    Only SendToManuscript-*.html files are touched; the fixed legacy file is
    left alone. Returns the number of files removed.
    """
    directory = directory or tempfile.gettempdir()
    now = time.time()
    removed = 0
    for path in Path(directory).glob("SendToManuscript-*.html"):
        if not path.is_file() or now - path.stat().st_mtime <= max_age_seconds:
            continue
        try:
            path.unlink()
            removed += 1
        except OSError as e:
            print(f"[Manuscript] Failed to delete send file {path}: {e}")
    if removed:
        print(f"[Manuscript] Deleted {removed} old send file(s) from {directory}")
    return removed
