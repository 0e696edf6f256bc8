from tkinter import ttk

PRIMARY  = "#0ea5e9"
BG       = "#0b1220"
CARD_BG  = "#0f172a"
FG       = "#e5e7eb"
MUTED    = "#94a3b8"
FIELD_BG = "#111827"
BORDER   = "#1f2937"
DANGER   = "#ef4444"
ROW_EVEN = BG
ROW_ODD  = "#0e1627"

# style name -> (background, foreground, active background)
_BUTTONS = {
    "Accent.TButton": (PRIMARY, BG, "#22d3ee"),
    "Danger.TButton": (DANGER, BG, "#f87171"),
}


def _base_style(widget, surface: str) -> ttk.Style:
    """Entries and buttons on a `surface` background; shared by every screen."""
    style = ttk.Style(widget)
    try:
        style.theme_use("clam")
    except Exception:
        pass

    style.configure("TEntry", fieldbackground=FIELD_BG, foreground=FG,
                    insertcolor=FG, bordercolor=BORDER, padding=6)
    style.map("TEntry",
              fieldbackground=[("disabled", BORDER), ("!disabled", FIELD_BG)],
              bordercolor=[("focus", PRIMARY), ("!focus", BORDER)])

    for name, (bg, fg, active) in _BUTTONS.items():
        style.configure(name, background=bg, foreground=fg, padding=(14, 8), borderwidth=0)
        style.map(name, background=[("active", active), ("!active", bg)])

    style.configure("Ghost.TButton", background=surface, foreground=MUTED,
                    padding=(12, 8), borderwidth=0)
    style.map("Ghost.TButton", background=[("active", FIELD_BG)],
              foreground=[("active", FG), ("!active", MUTED)])
    return style


def apply_dialog_style(widget) -> ttk.Style:
    style = _base_style(widget, CARD_BG)
    style.configure("Dialog.TFrame", background=CARD_BG)
    style.configure("DialogTitle.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 14, "bold"))
    style.configure("DialogMuted.TLabel", background=CARD_BG, foreground=MUTED)
    style.configure("DialogLabel.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 10, "bold"))
    style.configure("Dialog.TRadiobutton", background=CARD_BG, foreground=FG)
    style.map("Dialog.TRadiobutton", background=[("active", CARD_BG)])
    return style


def apply_app_style(widget) -> ttk.Style:
    """Main window: toolbar on BG, outputs table on a card."""
    style = _base_style(widget, BG)
    for name in ("App.TFrame", "Toolbar.TFrame"):
        style.configure(name, background=BG)
    style.configure("Card.TFrame", background=CARD_BG)
    style.configure("H1.TLabel", background=BG, foreground=FG, font=("Segoe UI", 18, "bold"))
    style.configure("Muted.TLabel", background=BG, foreground=MUTED)
    style.configure("Treeview", background=CARD_BG, fieldbackground=CARD_BG,
                    foreground=FG, bordercolor=BORDER, rowheight=28)
    style.configure("Treeview.Heading", background=BG, foreground=FG,
                    bordercolor=BORDER, font=("Segoe UI", 10, "bold"))
    return style


def center_on_parent(dialog, parent):
    try:
        dialog.update_idletasks()
        x = parent.winfo_rootx() + (parent.winfo_width() - dialog.winfo_width()) // 2
        y = parent.winfo_rooty() + (parent.winfo_height() - dialog.winfo_height()) // 2
        dialog.geometry(f"+{x}+{y}")
    except Exception:
        pass
