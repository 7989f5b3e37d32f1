from tkinter import ttk

class FileListView(ttk.Frame):
    """
    Lista de archivos cargados (nombre, filas, columnas).
    on_remove recibe (file_id: str) del archivo seleccionado.
    """

    def __init__(self, parent, on_remove=None, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_remove = on_remove

        header = ttk.Frame(self)
        header.pack(fill="x", pady=(0, 5))
        self.title_label = ttk.Label(header, text="Archivos cargados (0)", font=("Arial", 11, "bold"))
        self.title_label.pack(side="left")
        self.total_label = ttk.Label(header, text="0 filas en total", style="Muted.TLabel")
        self.total_label.pack(side="left", padx=10)
        self.remove_btn = ttk.Button(header, text="✖ Quitar seleccionado", command=self._handle_remove)
        self.remove_btn.pack(side="right")

        tree_frame = ttk.Frame(self)
        tree_frame.pack(fill="both", expand=True)
        self._tree = ttk.Treeview(tree_frame, columns=("name", "rows", "cols"), show="headings", height=8)
        self._tree.heading("name", text="Archivo")
        self._tree.heading("rows", text="Filas")
        self._tree.heading("cols", text="Columnas")
        self._tree.column("name", anchor="w", width=420)
        self._tree.column("rows", anchor="e", width=90)
        self._tree.column("cols", anchor="e", width=90)
        self._tree.pack(side="left", fill="both", expand=True)
        scroll = ttk.Scrollbar(tree_frame, orient="vertical", command=self._tree.yview)
        scroll.pack(side="right", fill="y")
        self._tree.configure(yscrollcommand=scroll.set)
        self._tree.bind("<Delete>", lambda e: self._handle_remove())

    def update_files(self, files, total_rows):
        for r in self._tree.get_children(): self._tree.delete(r)
        for f in files:
            self._tree.insert("", "end", iid=f.id, values=(f"📄 {f.name}", f.row_count, f.column_count))
        self.title_label.config(text=f"Archivos cargados ({len(files)})")
        self.total_label.config(text=f"{total_rows} filas en total")

    def _handle_remove(self):
        selected = self._tree.selection()
        if not selected or not self.on_remove: return
        for file_id in selected:
            self.on_remove(file_id)
