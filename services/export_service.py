import logging

import pandas as pd

import config
from models.csv_model import CSVData

logger = logging.getLogger(__name__)

_NEEDS_QUOTES = (',', '"', '\n')


def escape_value(value) -> str:
    """Entre comillas solo si contiene coma, comilla o salto de línea; las comillas internas se duplican."""
    text = "" if value is None else str(value)
    if any(ch in text for ch in _NEEDS_QUOTES):
        return '"' + text.replace('"', '""') + '"'
    return text


def serialize(dataset: CSVData) -> str:
    # El encabezado nunca va entre comillas
    lines = [",".join(dataset.columns)]
    for row in dataset.rows:
        values = [row[i] if i < len(row) else "" for i in range(len(dataset.columns))]
        line = ",".join(escape_value(v) for v in values)
        # Una línea en blanco se descarta al leer: se escribe el valor entre comillas
        if len(values) == 1 and not line.strip():
            line = '"' + line + '"'
        lines.append(line)
    return "\n".join(lines)


def write_csv(dataset: CSVData, path: str) -> str:
    content = serialize(dataset)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.info("CSV combinado guardado en %s (%d filas)", path, dataset.row_count)
    return path


def to_dataframe(dataset: CSVData) -> pd.DataFrame:
    return pd.DataFrame(dataset.rows, columns=dataset.columns, dtype=str)


def write_excel(dataset: CSVData, path: str) -> str:
    """
    Exporta el conjunto combinado a una hoja de Excel.
    Todas las celdas se escriben como texto; el ancho de cada columna se
    ajusta al valor más largo.
    """
    df = to_dataframe(dataset)
    with pd.ExcelWriter(path, engine='openpyxl') as writer:
        df.to_excel(writer, sheet_name=config.EXCEL_SHEET_NAME, index=False)
        sheet = writer.sheets[config.EXCEL_SHEET_NAME]
        for column in sheet.columns:
            cells = [cell for cell in column]
            max_length = max(len(str(c.value)) if c.value is not None else 0 for c in cells)
            sheet.column_dimensions[cells[0].column_letter].width = max_length + 2
    logger.info("Excel combinado guardado en %s (%d filas)", path, dataset.row_count)
    return path
