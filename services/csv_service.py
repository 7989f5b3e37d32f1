import logging
import os
from typing import List

import config
from models.csv_model import CSVData

logger = logging.getLogger(__name__)


class CSVServiceError(Exception):
    pass


class InvalidExtensionError(CSVServiceError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"El archivo {file_name} no es un archivo CSV")


class ReadFailureError(CSVServiceError):
    def __init__(self, file_name: str, cause: Exception):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Error procesando {file_name}: {cause}")


class FileCountExceededError(CSVServiceError):
    def __init__(self, current: int, incoming: int, limit: int):
        self.current = current
        self.incoming = incoming
        self.limit = limit
        super().__init__(
            f"Máximo {limit} archivos permitidos "
            f"(registrados: {current}, nuevos: {incoming})"
        )


def split_fields(line: str) -> List[str]:
    """
    Divide una línea en campos.
    Las comillas solo alternan el modo 'dentro de comillas' y no se copian;
    una comilla sin cerrar deja el resto de la línea en un solo campo.
    """
    fields = []
    buf = []
    in_quotes = False
    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == ',' and not in_quotes:
            fields.append(''.join(buf).strip())
            buf = []
        else:
            buf.append(ch)
    fields.append(''.join(buf).strip())
    return fields


def parse(document: str) -> CSVData:
    """
    Convierte el texto de un CSV en CSVData.
    - Se descartan las líneas vacías o de solo espacios.
    - La primera línea es el encabezado.
    - Filas cortas se rellenan con "", las largas se recortan al encabezado.
    Nunca lanza excepción por comillas mal formadas.
    """
    lines = [line for line in document.split('\n') if line.strip()]
    if not lines:
        return CSVData()

    header = split_fields(lines[0])
    expected_cols = len(header)

    # Encabezados repetidos: se conserva la primera posición y el último valor
    last_pos = {}
    for i, col in enumerate(header):
        last_pos[col] = i
    columns = list(last_pos.keys())
    positions = [last_pos[col] for col in columns]

    rows = []
    for line in lines[1:]:
        row = split_fields(line)
        if len(row) < expected_cols:
            row = row + [""] * (expected_cols - len(row))
        rows.append([row[i] for i in positions])

    logger.debug("CSV analizado: %d columnas, %d filas", len(columns), len(rows))
    return CSVData(columns=columns, rows=rows)


def has_csv_extension(file_name: str) -> bool:
    return file_name.lower().endswith('.csv')


class CSVService:
    """
    Lectura de archivos CSV desde disco.
    - Prueba varias codificaciones (UTF-8, Latin-1, ...).
    - Delega el análisis del texto en parse().
    """

    @staticmethod
    def read_text(path: str) -> str:
        name = os.path.basename(path)
        last_error = None
        for enc in config.READ_ENCODINGS:
            try:
                with open(path, "r", encoding=enc, newline="") as f:
                    text = f.read()
            except UnicodeDecodeError as e:
                last_error = e
                continue
            except OSError as e:
                raise ReadFailureError(name, e) from e
            # latin-1 acepta cualquier byte: un NUL indica contenido binario
            if "\x00" in text:
                raise ReadFailureError(name, ValueError("el contenido no es texto (bytes nulos)"))
            logger.debug("%s leído con codificación %s", name, enc)
            return text
        raise ReadFailureError(name, last_error)

    @staticmethod
    def read_csv(path: str) -> CSVData:
        name = os.path.basename(path)
        if not has_csv_extension(name):
            raise InvalidExtensionError(name)
        return parse(CSVService.read_text(path))
