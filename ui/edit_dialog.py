import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional, Tuple

from logic.validation import is_url
from model.models import OutputConfig
from ui.style import BG, apply_dialog_style, center_on_parent


class EditDialog(tk.Toplevel):
    """Name + Manuscript URL editor for one output."""
    def __init__(self, parent, output: OutputConfig):
        super().__init__(parent)
        self.title("Manuscript")
        self.result: Optional[Tuple[str, str]] = None
        self.transient(parent)
        self.grab_set()

        apply_dialog_style(self)
        self.configure(bg=BG)

        # ---------- Layout ----------
        outer = ttk.Frame(self, style="Dialog.TFrame", padding=16)
        outer.pack(fill="both", expand=True)

        ttk.Label(outer, text="Manuscript output", style="DialogTitle.TLabel").pack(anchor="w", pady=(0, 8))
        form = ttk.Frame(outer, style="Dialog.TFrame")
        form.pack(fill="x")

        # Name
        ttk.Label(form, text="Name", style="DialogLabel.TLabel").grid(row=0, column=0, sticky="w", pady=(2, 2))
        self.name_var = tk.StringVar(value=output.name)
        name_entry = ttk.Entry(form, textvariable=self.name_var)
        name_entry.grid(row=1, column=0, sticky="ew")
        form.grid_columnconfigure(0, weight=1)

        # Url
        ttk.Label(form, text="Url", style="DialogLabel.TLabel").grid(row=2, column=0, sticky="w", pady=(12, 2))
        self.url_var = tk.StringVar(value=output.url)
        ttk.Entry(form, textvariable=self.url_var).grid(row=3, column=0, sticky="ew")
        ttk.Label(form, text="e.g. https://example.manuscript.com/", style="DialogMuted.TLabel")\
            .grid(row=4, column=0, sticky="w", pady=(4, 0))

        # Actions
        actions = ttk.Frame(outer, style="Dialog.TFrame")
        actions.pack(fill="x", pady=(12, 0))
        ttk.Button(actions, text="Cancel", style="Ghost.TButton", command=self._cancel).pack(side="right", padx=6)
        ttk.Button(actions, text="OK", style="Accent.TButton", command=self._save).pack(side="right")

        # ---------- Behavior ----------
        self.bind("<Escape>", lambda e: self._cancel())
        self.bind("<Return>", lambda e: self._save())
        self.protocol("WM_DELETE_WINDOW", self._cancel)

        self.after(50, lambda: name_entry.focus_set())
        center_on_parent(self, parent)
        self.minsize(440, 220)

    def _cancel(self):
        self.result = None
        self.destroy()

    def _save(self):
        name = (self.name_var.get() or "").strip()
        if not name:
            messagebox.showerror("Validation", "Name required.", parent=self)
            return
        url = (self.url_var.get() or "").strip()
        if not is_url(url):
            messagebox.showerror("Validation", "Url must start with http:// or https://.", parent=self)
            return

        self.result = (name, url)
        self.destroy()


def ask_output_settings(owner, output: OutputConfig) -> Optional[Tuple[str, str]]:
    dialog = EditDialog(owner, output)
    dialog.wait_window()
    return dialog.result
