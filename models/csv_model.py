import uuid
from typing import Dict, Iterator, List


class CSVData:
    """
    Representa un CSV en memoria:
      - columns: lista de strings (orden de primera aparición)
      - rows: lista de listas, cada fila alineada por posición con columns
    Una fila se puede ver como diccionario con row_dict() / records().
    """
    def __init__(self, columns=None, rows=None):
        self.columns = columns or []
        self.rows = rows or []

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def is_empty(self) -> bool:
        return not self.columns and not self.rows

    def row_dict(self, index: int) -> Dict[str, str]:
        row = self.rows[index]
        return {col: row[i] for i, col in enumerate(self.columns)}

    def records(self) -> Iterator[Dict[str, str]]:
        for i in range(len(self.rows)):
            yield self.row_dict(i)

    def head(self, limit: int) -> List[List[str]]:
        return [list(r) for r in self.rows[:max(limit, 0)]]

    def __eq__(self, other):
        if not isinstance(other, CSVData):
            return NotImplemented
        return self.columns == other.columns and self.rows == other.rows

    def __repr__(self):
        return f"CSVData(columns={self.columns!r}, rows={len(self.rows)})"


class UploadedFile:
    """
    Archivo registrado en la sesión. El id aleatorio solo sirve para que la
    interfaz pueda quitarlo de la lista.
    """
    def __init__(self, name: str, path: str, data: CSVData, file_id: str = None):
        self.id = file_id or uuid.uuid4().hex[:9]
        self.name = name
        self.path = path
        self.data = data

    @property
    def row_count(self) -> int:
        return self.data.row_count

    @property
    def column_count(self) -> int:
        return self.data.column_count

    def __repr__(self):
        return f"UploadedFile(name={self.name!r}, rows={self.row_count}, columns={self.column_count})"
