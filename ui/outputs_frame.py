import asyncio
import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from model.models import Result
from ui.style import ROW_EVEN, ROW_ODD, apply_app_style


class OutputsFrame(tk.Frame):
    """Configured outputs with a toolbar to add, edit, delete and send a screenshot."""
    def __init__(self, parent, controller):
        super().__init__(parent)
        self.controller = controller

        apply_app_style(self)

        # ---------- Root ----------
        root = ttk.Frame(self, style="App.TFrame")
        root.pack(fill="both", expand=True)

        topbar = ttk.Frame(root, style="Toolbar.TFrame", padding=(16, 12))
        topbar.pack(fill="x")
        ttk.Label(topbar, text="Outputs", style="H1.TLabel").pack(side="left")
        self.status_label = ttk.Label(topbar, text="", style="Muted.TLabel")
        self.status_label.pack(side="right")

        controls = ttk.Frame(root, style="Toolbar.TFrame", padding=(16, 0))
        controls.pack(fill="x")
        self.btn_add  = ttk.Button(controls, text="Add Output", style="Ghost.TButton", command=self.add_output)
        self.btn_edit = ttk.Button(controls, text="Edit",       style="Ghost.TButton", command=self.edit_output)
        self.btn_del  = ttk.Button(controls, text="Delete",     style="Danger.TButton", command=self.delete_output)
        self.btn_send = ttk.Button(controls, text="Send Image…", style="Accent.TButton", command=self.send_image)
        for b in (self.btn_add, self.btn_edit, self.btn_del, self.btn_send):
            b.pack(side="left", padx=6)

        card = ttk.Frame(root, style="Card.TFrame", padding=12)
        card.pack(fill="both", expand=True, padx=16, pady=12)

        columns = ("name", "url", "case")
        self.tree = ttk.Treeview(card, columns=columns, show="headings", selectmode="browse")
        headers = {"name": "Name", "url": "Url", "case": "Last case"}
        widths = {"name": 200, "url": 420, "case": 100}
        for col in columns:
            self.tree.heading(col, text=headers[col])
            self.tree.column(col, stretch=True, width=widths[col])

        self.tree.tag_configure("evenrow", background=ROW_EVEN)
        self.tree.tag_configure("oddrow", background=ROW_ODD)

        yscroll = ttk.Scrollbar(card, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=yscroll.set)
        self.tree.pack(side="left", fill="both", expand=True)
        yscroll.pack(side="right", fill="y")

        self.tree.bind("<Double-1>", lambda e: self.send_image())
        self.tree.bind("<Delete>",   lambda e: self.delete_output())
        self.bind_all("<Control-n>", lambda e: self.add_output())
        self.bind_all("<Control-e>", lambda e: self.edit_output())

        self.refresh_table()

    # ---------- helpers ----------
    @property
    def plugin(self):
        return self.controller.plugin

    def refresh_table(self):
        for row in self.tree.get_children():
            self.tree.delete(row)
        for i, output in enumerate(self.controller.outputs):
            tag = "evenrow" if i % 2 == 0 else "oddrow"
            self.tree.insert("", "end", iid=str(i),
                             values=(output.name, output.url, output.last_case_id),
                             tags=(tag,))

    def _selected_index(self):
        sel = self.tree.selection()
        if not sel:
            messagebox.showwarning("Warning", "Select an output first")
            return None
        return int(sel[0])

    # ---------- actions ----------
    def add_output(self):
        output = self.plugin.create_output(self)
        if output:
            self.controller.outputs.append(output)
            self.controller.save_outputs()
            self.refresh_table()

    def edit_output(self):
        index = self._selected_index()
        if index is None:
            return
        output = self.plugin.edit_output(self, self.controller.outputs[index])
        if output:
            self.controller.outputs[index] = output
            self.controller.save_outputs()
            self.refresh_table()

    def delete_output(self):
        index = self._selected_index()
        if index is None:
            return
        output = self.controller.outputs[index]
        if messagebox.askyesno("Confirm delete", f"Delete output {output.name}?"):
            del self.controller.outputs[index]
            self.controller.save_outputs()
            self.refresh_table()

    def send_image(self):
        index = self._selected_index()
        if index is None:
            return
        path = filedialog.askopenfilename(
            parent=self, title="Select screenshot",
            filetypes=[("Images", "*.png;*.jpg;*.jpeg;*.bmp;*.gif"), ("All files", "*.*")]
        )
        if not path:
            return

        result = asyncio.run(self.plugin.send(self, self.controller.outputs[index], path))

        if result.result == Result.SUCCESS:
            if result.output:
                self.controller.outputs[index] = result.output
                self.controller.save_outputs()
                self.refresh_table()
            self.status_label.config(text="Screenshot handed to the browser.")
        elif result.result == Result.FAILED:
            messagebox.showerror("Send failed", result.message or "Unknown error")
            self.status_label.config(text="Send failed.")
        else:
            self.status_label.config(text="Send canceled.")
