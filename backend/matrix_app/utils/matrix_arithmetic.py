from .exceptions import DimensionMismatch
from .sparse_matrix import SparseMatrix

def _check_same_dimensions(matrix_a, matrix_b, operation):
    if matrix_a.rows != matrix_b.rows or matrix_a.cols != matrix_b.cols:
        raise DimensionMismatch(
            f"Matrices must have the same dimensions for {operation}.",
            operation=operation
        )

def _combine(matrix_a, matrix_b, sign):
    result = SparseMatrix(matrix_a.rows, matrix_a.cols)

    # Copia todos los elementos de la primera matriz
    for (r, c), value in matrix_a.items():
        result.set_value(r, c, value)

    # Acumula sobre el resultado para que las coordenadas comunes se sumen
    for (r, c), value in matrix_b.items():
        current_value = result.get_value(r, c)
        result.set_value(r, c, current_value + sign * value)

    return result

def add_matrices(matrix_a, matrix_b):
    """
    Suma dos matrices dispersas.

    Args:
        matrix_a (SparseMatrix): Primer operando
        matrix_b (SparseMatrix): Segundo operando

    Returns:
        SparseMatrix: Nueva matriz con el resultado

    Raises:
        DimensionMismatch: Si las dimensiones no coinciden
    """
    _check_same_dimensions(matrix_a, matrix_b, 'addition')
    return _combine(matrix_a, matrix_b, 1)

def subtract_matrices(matrix_a, matrix_b):
    """
    Resta la segunda matriz de la primera.

    Raises:
        DimensionMismatch: Si las dimensiones no coinciden
    """
    _check_same_dimensions(matrix_a, matrix_b, 'subtraction')
    return _combine(matrix_a, matrix_b, -1)

def multiply_matrices(matrix_a, matrix_b):
    """
    Multiplica la primera matriz por la segunda.

    Sólo los elementos almacenados en la primera matriz aportan términos, por
    lo que el costo es proporcional a nnz(a) * columnas(b).

    Args:
        matrix_a (SparseMatrix): Matriz de la izquierda
        matrix_b (SparseMatrix): Matriz de la derecha

    Returns:
        SparseMatrix: Nueva matriz de dimensiones (filas(a), columnas(b))

    Raises:
        DimensionMismatch: Si columnas(a) != filas(b)
    """
    if matrix_a.cols != matrix_b.rows:
        raise DimensionMismatch(
            "Number of columns of first matrix must equal number of rows of second matrix.",
            operation='multiplication'
        )

    result = SparseMatrix(matrix_a.rows, matrix_b.cols)

    for (row, col), value in matrix_a.items():
        for k in range(matrix_b.cols):
            other_value = matrix_b.get_value(col, k)
            if other_value == 0:
                continue
            current_value = result.get_value(row, k)
            result.set_value(row, k, current_value + value * other_value)

    return result
