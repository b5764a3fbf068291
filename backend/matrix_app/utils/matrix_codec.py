import re

from .exceptions import FormatError
from .sparse_matrix import SparseMatrix

ROWS_PATTERN = re.compile(r'^rows=(\d+)$', re.ASCII)
COLS_PATTERN = re.compile(r'^cols=(\d+)$', re.ASCII)
ELEMENT_PATTERN = re.compile(r'^\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(-?\d+)\s*\)$', re.ASCII)

DEFAULT_SOURCE = '<input>'

def _parse_dimension(line, pattern, line_number, source, expected):
    match = pattern.match(line.strip())
    if not match:
        raise FormatError(
            f"Invalid dimension format at line {line_number} in {source}. Expected '{expected}'",
            line_number=line_number,
            source=source
        )
    return int(match.group(1))

def parse_matrix(text, source=None):
    """
    Convierte el formato de texto en una matriz dispersa.

    Formato esperado:
        rows=<filas>
        cols=<columnas>
        (<fila>, <col>, <valor>)
        ...

    Las líneas vacías se ignoran. Una coordenada repetida conserva el valor
    de su última aparición.

    Args:
        text (str): Contenido del archivo
        source (str): Nombre del archivo u origen, usado en los mensajes de error

    Returns:
        SparseMatrix: Matriz leída

    Raises:
        FormatError: Si las dimensiones o algún elemento son inválidos
    """
    source = source or DEFAULT_SOURCE
    lines = text.split('\n')

    if len(lines) < 2:
        raise FormatError(
            f"{source} does not contain enough lines for matrix dimensions",
            line_number=len(lines),
            source=source
        )

    total_rows = _parse_dimension(lines[0], ROWS_PATTERN, 1, source, 'rows=X')
    total_cols = _parse_dimension(lines[1], COLS_PATTERN, 2, source, 'cols=Y')

    matrix = SparseMatrix(total_rows, total_cols)

    for line_number, raw_line in enumerate(lines[2:], start=3):
        line = raw_line.strip()
        if not line:
            continue

        match = ELEMENT_PATTERN.match(line)
        if not match:
            raise FormatError(
                f"Invalid format at line {line_number} in {source}: {line}",
                line_number=line_number,
                source=source
            )

        row, col, value = (int(group) for group in match.groups())
        matrix.set_value(row, col, value)

    return matrix

def serialize_matrix(matrix):
    """
    Convierte la matriz dispersa al formato de texto.

    Los elementos se emiten en el orden de inserción del diccionario.

    Args:
        matrix (SparseMatrix): Matriz a convertir

    Returns:
        str: Texto sin salto de línea final
    """
    lines = [f"rows={matrix.rows}", f"cols={matrix.cols}"]
    for (row, col), value in matrix.items():
        lines.append(f"({row}, {col}, {value})")
    return "\n".join(lines).strip()
