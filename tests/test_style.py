import pytest

tk = pytest.importorskip("tkinter")

from ui.style import BG, CARD_BG, MUTED, apply_app_style, apply_dialog_style


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    window.withdraw()
    yield window
    window.destroy()


def test_app_style_defines_frame_styles(root):
    style = apply_app_style(root)
    assert style.lookup("App.TFrame", "background") == BG
    assert style.lookup("Card.TFrame", "background") == CARD_BG
    assert style.lookup("Danger.TButton", "background") == "#ef4444"
    assert style.lookup("Ghost.TButton", "background") == BG


def test_dialog_style_uses_card_surface(root):
    style = apply_dialog_style(root)
    assert style.lookup("Dialog.TFrame", "background") == CARD_BG
    assert style.lookup("Ghost.TButton", "background") == CARD_BG
    assert style.lookup("Ghost.TButton", "foreground") == MUTED
