import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional, Tuple

from logic.validation import parse_case_id
from model.models import SendMode
from ui.style import BG, apply_dialog_style, center_on_parent

MODE_LABELS = [
    (SendMode.NEW_CASE, "New case"),
    (SendMode.ATTACH_TO_CASE, "Attach to case"),
    (SendMode.NEW_EMAIL, "New e-mail"),
    (SendMode.REPLY_TO_CASE, "Reply to case"),
]


class SendDialog(tk.Toplevel):
    """Asks what to do with the screenshot; the case id only applies to case-bound modes."""
    def __init__(self, parent, url: str, case_id: int):
        super().__init__(parent)
        self.title("Send to Manuscript")
        self.result: Optional[Tuple[SendMode, int]] = None
        self._initial_case_id = case_id
        self.transient(parent)
        self.grab_set()

        apply_dialog_style(self)
        self.configure(bg=BG)

        outer = ttk.Frame(self, style="Dialog.TFrame", padding=16)
        outer.pack(fill="both", expand=True)

        ttk.Label(outer, text="Send to Manuscript", style="DialogTitle.TLabel").pack(anchor="w")
        ttk.Label(outer, text=url, style="DialogMuted.TLabel").pack(anchor="w", pady=(0, 8))

        form = ttk.Frame(outer, style="Dialog.TFrame")
        form.pack(fill="x")
        form.grid_columnconfigure(0, weight=1)

        self.mode_var = tk.StringVar(value=SendMode.NEW_CASE.value)
        for row, (mode, label) in enumerate(MODE_LABELS):
            ttk.Radiobutton(form, text=label, value=mode.value, variable=self.mode_var,
                            style="Dialog.TRadiobutton", command=self._on_mode_change)\
                .grid(row=row, column=0, sticky="w", pady=2)

        ttk.Label(form, text="Case ID", style="DialogLabel.TLabel")\
            .grid(row=len(MODE_LABELS), column=0, sticky="w", pady=(12, 2))
        self.case_id_var = tk.StringVar(value=str(case_id))
        self.case_id_entry = ttk.Entry(form, textvariable=self.case_id_var)
        self.case_id_entry.grid(row=len(MODE_LABELS) + 1, column=0, sticky="ew")

        actions = ttk.Frame(outer, style="Dialog.TFrame")
        actions.pack(fill="x", pady=(12, 0))
        ttk.Button(actions, text="Cancel", style="Ghost.TButton", command=self._cancel).pack(side="right", padx=6)
        ttk.Button(actions, text="Send", style="Accent.TButton", command=self._send).pack(side="right")

        self.bind("<Escape>", lambda e: self._cancel())
        self.bind("<Return>", lambda e: self._send())
        self.protocol("WM_DELETE_WINDOW", self._cancel)

        self._on_mode_change()
        center_on_parent(self, parent)
        self.minsize(380, 300)

    @property
    def mode(self) -> SendMode:
        return SendMode(self.mode_var.get())

    def _on_mode_change(self):
        if self.mode.is_case_bound:
            self.case_id_entry.state(["!disabled"])
            self.case_id_entry.focus_set()
        else:
            self.case_id_entry.state(["disabled"])

    def _cancel(self):
        self.result = None
        self.destroy()

    def _send(self):
        mode = self.mode
        try:
            case_id = parse_case_id(mode, self.case_id_var.get(), self._initial_case_id)
        except ValueError as e:
            messagebox.showerror("Validation", str(e), parent=self)
            self.case_id_entry.focus_set()
            return

        self.result = (mode, case_id)
        self.destroy()


def ask_send_options(owner, url: str, case_id: int) -> Optional[Tuple[SendMode, int]]:
    dialog = SendDialog(owner, url, case_id)
    dialog.wait_window()
    return dialog.result
