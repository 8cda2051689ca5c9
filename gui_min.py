from __future__ import annotations

import threading
import tkinter as tk
from tkinter import filedialog, messagebox

from src.jobcontroller.api import BatchInProgressError, JobControllerError, create_controller
from src.logsetup.api import configure_logging
from src.settings.api import load_settings
from src.writer.api import WriterError


class MinimalBatchGUI(tk.Tk):
    """
    Minimalistische GUI:
    - User wählt mehrere Excel-Dateien aus (.xlsx/.xls)
    - "Verarbeiten" gruppiert alle Dateien in einem Lauf nach Assay
    - CSV pro Assay speichern (einzeln oder alle)
    """

    def __init__(self) -> None:
        super().__init__()

        self.title("GeneUP CSV Generator")
        self.geometry("900x520")

        settings = load_settings()
        configure_logging(settings.log_level, settings.log_file)

        self.jc = create_controller(settings.csv_quoting)
        self._is_running = False

        self._build_ui()

    def _build_ui(self) -> None:
        top = tk.Frame(self)
        top.pack(fill="x", padx=10, pady=10)

        btn_pick = tk.Button(top, text="Excel-Dateien auswählen…", command=self.on_pick_files)
        btn_pick.pack(side="left")

        btn_clear = tk.Button(top, text="Liste leeren", command=self.on_clear_list)
        btn_clear.pack(side="left", padx=(8, 0))

        self.btn_run = tk.Button(top, text="Verarbeiten", command=self.on_run)
        self.btn_run.pack(side="left", padx=(8, 0))

        self.lbl_status = tk.Label(top, text="Bereit.")
        self.lbl_status.pack(side="right")

        middle = tk.Frame(self)
        middle.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        left = tk.Frame(middle)
        left.pack(side="left", fill="both", expand=True)

        tk.Label(left, text="Ausgewählte Dateien:").pack(anchor="w")
        self.listbox = tk.Listbox(left, height=8)
        self.listbox.pack(fill="both", expand=True)

        tk.Label(left, text="Assays:").pack(anchor="w", pady=(8, 0))
        self.lst_assays = tk.Listbox(left, height=6)
        self.lst_assays.pack(fill="both", expand=True)

        btns = tk.Frame(left)
        btns.pack(fill="x", pady=(6, 0))
        tk.Button(btns, text="Assay-CSV speichern…", command=self.on_save_selected).pack(side="left")
        tk.Button(btns, text="Alle CSVs speichern…", command=self.on_save_all).pack(side="left", padx=(8, 0))

        right = tk.Frame(middle)
        right.pack(side="left", fill="both", expand=True, padx=(10, 0))

        tk.Label(right, text="Log:").pack(anchor="w")
        self.txt_log = tk.Text(right, height=12, wrap="word")
        self.txt_log.pack(fill="both", expand=True)

    def on_pick_files(self) -> None:
        if self._is_running:
            return

        files = filedialog.askopenfilenames(
            title="Excel-Dateien auswählen",
            filetypes=[("Excel Dateien", "*.xlsx *.xls")],
        )
        if not files:
            return

        added = self.jc.stage_files(files)
        self._refresh_listbox()
        self._log(f"{len(added)} Datei(en) hinzugefügt. Gesamt: {len(self.jc.staged_files)}")

    def on_clear_list(self) -> None:
        if self._is_running:
            return

        self.jc.clear_files()
        self._refresh_listbox()
        self._log("Liste geleert.")

    def on_run(self) -> None:
        if self._is_running:
            return

        if not self.jc.staged_files:
            messagebox.showinfo("Info", "Bitte zuerst Excel-Dateien auswählen.")
            return

        # In separatem Thread ausführen, damit GUI nicht einfriert
        self._is_running = True
        self.btn_run.config(state="disabled")
        self.lbl_status.config(text="Läuft…")

        t = threading.Thread(target=self._run_batch, daemon=True)
        t.start()

    def _run_batch(self) -> None:
        self._log("=== Verarbeitung gestartet ===")
        try:
            result = self.jc.process()
            for assay, count in result.sample_counts().items():
                self._log(f"  {assay}: {count} Proben")
            self._log(f"  übersprungene Zeilen: {len(result.skipped)}")
            for failure in result.failed_files:
                self._log(f"  FEHLER {failure.source_file}: {failure.error}")
        except BatchInProgressError:
            self._log("  -> läuft bereits")
        except JobControllerError as e:
            self._log(f"  -> {e}")
        except Exception as e:
            self._log(f"  -> EXCEPTION: {e}")
        finally:
            self._log("=== Verarbeitung beendet ===")

            # GUI wieder freigeben
            self._is_running = False
            self._set_status("Fertig.")
            self.after(0, self._refresh_assays)
            self.after(0, lambda: self.btn_run.config(state="normal"))

    def on_save_selected(self) -> None:
        sel = self.lst_assays.curselection()
        if not sel:
            messagebox.showinfo("Info", "Bitte zuerst einen Assay auswählen.")
            return
        assay = self._assay_codes()[sel[0]]
        out_dir = filedialog.askdirectory(title="Zielordner wählen")
        if not out_dir:
            return
        try:
            w = self.jc.export_assay(assay, out_dir)
            self._log(f"write: {w.csv_path} | {w.sample_count} Proben")
        except (JobControllerError, WriterError) as e:
            messagebox.showerror("Fehler", str(e))

    def on_save_all(self) -> None:
        if self.jc.result is None or not self.jc.result.buckets:
            messagebox.showinfo("Info", "Keine Daten verarbeitet.")
            return
        out_dir = filedialog.askdirectory(title="Zielordner wählen")
        if not out_dir:
            return
        try:
            for w in self.jc.export_all(out_dir):
                self._log(f"write: {w.csv_path} | {w.sample_count} Proben")
        except (JobControllerError, WriterError) as e:
            messagebox.showerror("Fehler", str(e))

    def _assay_codes(self) -> list[str]:
        if self.jc.result is None:
            return []
        return list(self.jc.result.buckets.keys())

    def _refresh_listbox(self) -> None:
        self.listbox.delete(0, tk.END)
        for f in self.jc.staged_files:
            self.listbox.insert(tk.END, f)

    def _refresh_assays(self) -> None:
        self.lst_assays.delete(0, tk.END)
        if self.jc.result is None:
            return
        for assay, count in self.jc.result.sample_counts().items():
            self.lst_assays.insert(tk.END, f"{assay} ({count} Proben)")

    def _log(self, msg: str) -> None:
        def _append() -> None:
            self.txt_log.insert(tk.END, msg + "\n")
            self.txt_log.see(tk.END)

        self.after(0, _append)

    def _set_status(self, msg: str) -> None:
        self.after(0, lambda: self.lbl_status.config(text=msg))


if __name__ == "__main__":
    app = MinimalBatchGUI()
    app.mainloop()
