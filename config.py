"""
Constantes de configuración del Combinador de CSV.
Todo vive en memoria durante la sesión; no se leen variables de entorno.
"""
import logging

# Límite de archivos registrados por sesión
MAX_FILES = 100

# Artefacto de salida
OUTPUT_FILENAME = "combined-data.csv"
OUTPUT_CONTENT_TYPE = "text/csv"
EXCEL_FILENAME = "combined-data.xlsx"
EXCEL_SHEET_NAME = "Datos Combinados"

# Filas mostradas en la vista previa
PREVIEW_ROWS = 5

# Codificaciones probadas en orden al leer un archivo
READ_ENCODINGS = ['utf-8-sig', 'utf-8', 'latin-1', 'cp1252']

# Temas: claro -> oscuro -> sistema -> claro ...
THEMES = ['light', 'dark', 'system']
DEFAULT_THEME = 'system'

WINDOW_TITLE = "CSV Combinator - Combinar Archivos"
WINDOW_GEOMETRY = "1100x800"

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
