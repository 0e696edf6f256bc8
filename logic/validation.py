from model.models import SendMode


def is_url(s: str) -> bool:
    return s.startswith("http://") or s.startswith("https://")


def parse_case_id(mode: SendMode, raw: str, initial: int) -> int:
    """
    Parse the case id typed in the send dialog.

    Case-bound modes need a positive integer and raise ValueError otherwise.
    Other modes ignore the field and fall back to `initial` if it is unusable.
    """
    text = (raw or "").strip()
    try:
        case_id = int(text)
    except ValueError:
        case_id = None

    if not mode.is_case_bound:
        return case_id if case_id is not None and case_id > 0 else initial

    if case_id is None or case_id <= 0:
        raise ValueError("Case ID must be a positive number.")
    return case_id
