import logging
from typing import Dict, List, Sequence

from models.csv_model import CSVData

logger = logging.getLogger(__name__)


def union_columns(tables: Sequence[CSVData]) -> List[str]:
    # Orden de primera aparición: tabla por tabla, columna por columna
    seen = set()
    columns = []
    for table in tables:
        for col in table.columns:
            if col not in seen:
                seen.add(col)
                columns.append(col)
    return columns


def combine(tables: Sequence[CSVData]) -> CSVData:
    """
    Une varias tablas en una sola.
    Las columnas son la unión de todas; a cada fila le faltan las columnas de
    las otras tablas, que se rellenan con "". No se pierde ni reordena ninguna fila.
    """
    if not tables:
        return CSVData()

    columns = union_columns(tables)
    rows = []
    for table in tables:
        # Posición de cada columna de la tabla origen
        index: Dict[str, int] = {col: i for i, col in enumerate(table.columns)}
        for row in table.rows:
            new_row = []
            for col in columns:
                i = index.get(col)
                new_row.append(row[i] if i is not None and i < len(row) else "")
            rows.append(new_row)

    logger.debug("Combinadas %d tablas: %d columnas, %d filas", len(tables), len(columns), len(rows))
    return CSVData(columns=columns, rows=rows)
