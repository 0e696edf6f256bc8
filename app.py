import tkinter as tk
from tkinter import messagebox

from logic.output_store import OutputStore
from logic.registry import create_default_registry
from ui.outputs_frame import OutputsFrame

OUTPUT_PLUGIN = "Manuscript"


class App(tk.Tk):
    def __init__(self, plugin_name: str = OUTPUT_PLUGIN):
        super().__init__()
        self.title("Send to Manuscript")
        self.geometry("860x480")

        registry = create_default_registry()
        if plugin_name not in registry.list_available():
            raise RuntimeError(
                f"Output plugin '{plugin_name}' is not registered; "
                f"available: {', '.join(registry.list_available())}"
            )
        self.plugin = registry.get(plugin_name)
        self._store = OutputStore(self.plugin.settings.outputs_file)

        # App state
        self.outputs = self.load_outputs()

        container = tk.Frame(self)
        container.pack(fill="both", expand=True)
        container.grid_rowconfigure(0, weight=1)
        container.grid_columnconfigure(0, weight=1)

        frame = OutputsFrame(parent=container, controller=self)
        frame.grid(row=0, column=0, sticky="nsew")

    def load_outputs(self):
        try:
            outputs, errors = self._store.load_outputs(self.plugin.deserialize_output)
        except ValueError as e:
            messagebox.showerror("Outputs", f"{e}\n\nChanges will not be saved until the file is fixed.")
            return []
        if errors:
            messagebox.showwarning("Outputs", "Skipped outputs that could not be loaded:\n" + "\n".join(errors))
        return outputs

    def save_outputs(self):
        try:
            self._store.save([self.plugin.serialize_output(o) for o in self.outputs])
        except (OSError, RuntimeError) as e:
            messagebox.showerror("Outputs", str(e))


if __name__ == "__main__":
    app = App()
    app.plugin.clean_send_files()
    app.mainloop()
