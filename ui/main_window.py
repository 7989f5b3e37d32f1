import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from tkinterdnd2 import DND_FILES, TkinterDnD

import config
from controllers.csv_controller import CSVController
from ui.file_list_view import FileListView
from ui.table_view import TableView
from ui.theme import ThemeManager

logger = logging.getLogger(__name__)

SAVE_CSV_LABEL = "💾 Descargar CSV combinado"


def save_csv_label(combined):
    if combined is None:
        return SAVE_CSV_LABEL
    return f"{SAVE_CSV_LABEL} ({combined.row_count} filas)"


def dropped_paths(interp, data):
    # tkinterdnd2 entrega una lista Tcl: las rutas con espacios vienen entre llaves
    return [p for p in interp.splitlist(data) if p]


class MainWindow:
    def __init__(self):
        self.controller = CSVController()

        self.window = TkinterDnD.Tk()
        self.window.title(config.WINDOW_TITLE)
        self.window.geometry(config.WINDOW_GEOMETRY)
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)
        self.theme = ThemeManager(self.window)

        # --- BARRA SUPERIOR ---
        self.toolbar = ttk.Frame(self.window, relief=tk.RAISED, borderwidth=1)
        self.toolbar.pack(side="top", fill="x")
        ttk.Button(self.toolbar, text="📂 Agregar CSV", command=self.add_files_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="🗑️ Vaciar lista", command=self.clear_action).pack(side="left", padx=5, pady=5)
        ttk.Separator(self.toolbar, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        ttk.Label(self.toolbar, text=f"Combine hasta {config.MAX_FILES} archivos CSV en uno solo",
                  font=("Arial", 9, "italic")).pack(side="left", pady=5)
        self.btn_theme = ttk.Button(self.toolbar, text=self.theme.icon, width=3, command=self.toggle_theme)
        self.btn_theme.pack(side="right", padx=5, pady=5)

        # --- ALERTA DE ERRORES POR ARCHIVO ---
        self.lbl_alert = ttk.Label(self.window, text="", style="Error.TLabel", anchor="w", justify="left")
        self.lbl_alert.pack(side="top", fill="x", padx=10, pady=(5, 0))

        # --- ARCHIVOS ---
        self.file_list = FileListView(self.window, on_remove=self.remove_file_action)
        self.file_list.pack(side="top", fill="both", expand=False, padx=10, pady=10)

        actions = ttk.Frame(self.window)
        actions.pack(side="top", fill="x", padx=10)
        ttk.Button(actions, text="🔗 Combinar archivos CSV",
                   command=lambda: self.run_task("Combinando archivos", self.combine_action)).pack(side="left", fill="x", expand=True)
        self.btn_save_csv = ttk.Button(actions, text=SAVE_CSV_LABEL, command=self.save_csv_action, state="disabled")
        self.btn_save_csv.pack(side="left", padx=(10, 0))
        self.btn_save_excel = ttk.Button(actions, text="📊 Exportar Excel", command=self.save_excel_action, state="disabled")
        self.btn_save_excel.pack(side="left", padx=(10, 0))

        # --- VISTA PREVIA ---
        preview = ttk.LabelFrame(self.window, text="Vista previa de datos combinados")
        preview.pack(side="top", fill="both", expand=True, padx=10, pady=10)
        self.table_preview = TableView(preview)
        self.table_preview.pack(fill="both", expand=True, padx=5, pady=5)

        # --- BARRA DE ESTADO ---
        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Listo", anchor="w")
        self.lbl_status.pack(side="left", fill="x")
        self.progress = ttk.Progressbar(self.status_frame, mode='determinate', length=200, maximum=100)

        self._setup_dnd()

    def run_task(self, description, func):
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.progress.pack(side="right", padx=10)
        self.progress["value"] = 0
        self.window.update()
        try:
            func()
            self.lbl_status.config(text="✅ Listo")
        except Exception as e:
            logger.exception("Falló la tarea: %s", description)
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(e))
        finally:
            self.progress.pack_forget()
            self.window.config(cursor="")
            self._refresh()

    def _on_progress(self, done, total):
        self.progress["value"] = (done / total * 100) if total else 0
        self.lbl_status.config(text=f"⏳ Procesando archivos... {done}/{total}")
        self.window.update_idletasks()

    # =========================================================================
    #  ACCIONES
    # =========================================================================
    def _setup_dnd(self):
        # Soltar archivos en cualquier parte de la ventana los agrega a la sesión
        def drop(event):
            self.add_paths(dropped_paths(self.window.tk, event.data))

        self.window.drop_target_register(DND_FILES)
        self.window.dnd_bind("<<Drop>>", drop)

    def add_files_action(self):
        paths = filedialog.askopenfilenames(filetypes=[("CSV", "*.csv"), ("Todos los archivos", "*.*")])
        self.add_paths(paths)

    def add_paths(self, paths):
        if not paths: return
        paths = list(paths)
        self.lbl_alert.config(text="")

        def _do_add():
            result = self.controller.add_files(paths, progress_callback=self._on_progress)
            if result.errors:
                self.lbl_alert.config(text="\n".join(f"⚠️ {m}" for m in result.messages))
        self.run_task("Procesando archivos", _do_add)

    def remove_file_action(self, file_id):
        self.controller.remove_file(file_id)
        self._refresh()

    def clear_action(self):
        if not self.controller.file_count: return
        if messagebox.askyesno("Vaciar lista", "¿Quitar todos los archivos cargados?"):
            self.controller.clear()
            self.lbl_alert.config(text="")
            self._refresh()

    def combine_action(self):
        self.controller.combine()

    def save_csv_action(self):
        if not self.controller.can_export(): return
        path = filedialog.asksaveasfilename(initialfile=config.OUTPUT_FILENAME, defaultextension=".csv",
                                            filetypes=[("CSV", "*.csv")])
        if not path: return
        self.run_task("Guardando CSV", lambda: self.controller.export_csv(path))

    def save_excel_action(self):
        if not self.controller.can_export(): return
        path = filedialog.asksaveasfilename(initialfile=config.EXCEL_FILENAME, defaultextension=".xlsx",
                                            filetypes=[("Excel", "*.xlsx")])
        if not path: return
        self.run_task("Generando Excel", lambda: self.controller.export_excel(path))

    def toggle_theme(self):
        self.theme.cycle()
        self.btn_theme.config(text=self.theme.icon)
        self.lbl_status.config(text=self.theme.tooltip)

    def _refresh(self):
        self.file_list.update_files(self.controller.files, self.controller.total_rows)
        state = "normal" if self.controller.can_export() else "disabled"
        self.btn_save_csv.config(state=state)
        self.btn_save_excel.config(state=state)
        combined = self.controller.combined
        if combined is None:
            self.table_preview.update_table([], [])
            self.btn_save_csv.config(text=save_csv_label(None))
            return
        columns, rows = self.controller.get_preview()
        self.table_preview.update_table(columns, rows, total_rows=combined.row_count)
        self.btn_save_csv.config(text=save_csv_label(combined))

    def on_closing(self):
        # Los datos solo viven en memoria: avisar antes de perderlos
        if self.controller.file_count and not messagebox.askokcancel("Salir", "¿Seguro que quieres salir? Se perderán los archivos cargados."):
            return
        self.window.destroy()

    def run(self):
        self._refresh()
        self.window.mainloop()
