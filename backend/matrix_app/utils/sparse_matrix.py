class SparseMatrix:
    """
    Implementación de Matriz Dispersa de enteros usando un diccionario
    (fila, col) -> valor. Las posiciones ausentes valen 0.

    Las dimensiones declaradas son cotas inferiores: escribir fuera de ellas
    las hace crecer, nunca se reducen.
    """

    def __init__(self, rows, cols):
        """
        Inicializa una matriz dispersa vacía con las dimensiones dadas.

        Args:
            rows (int): Número de filas
            cols (int): Número de columnas
        """
        if rows < 0 or cols < 0:
            raise ValueError("Las dimensiones de la matriz no pueden ser negativas")
        self.rows = rows
        self.cols = cols
        self.elements = {}  # (fila, col) -> valor, en orden de inserción

    def set_value(self, row, col, value):
        """
        Establece un valor en la posición especificada.

        Los ceros explícitos se almacenan igual que cualquier otro valor.

        Args:
            row (int): Índice de fila (base 0)
            col (int): Índice de columna (base 0)
            value (int): Valor a establecer
        """
        if row < 0 or col < 0:
            raise ValueError(f"Índices negativos no permitidos: ({row}, {col})")
        if row >= self.rows:
            self.rows = row + 1
        if col >= self.cols:
            self.cols = col + 1
        self.elements[(row, col)] = value

    def get_value(self, row, col):
        """
        Obtiene el valor en la posición especificada.

        Args:
            row (int): Índice de fila (base 0)
            col (int): Índice de columna (base 0)

        Returns:
            int: Valor en la posición (fila, col), 0 si no está almacenado
        """
        return self.elements.get((row, col), 0)

    def items(self):
        """Itera los elementos almacenados como ((fila, col), valor)."""
        return self.elements.items()

    def get_elements(self):
        """
        Obtiene una copia de todos los elementos almacenados.

        Returns:
            dict: Diccionario con claves (fila, col) y sus valores
        """
        return self.elements.copy()

    @property
    def nnz(self):
        return len(self.elements)

    def get_density(self):
        """
        Calcula la densidad de la matriz (porcentaje de elementos almacenados).

        Returns:
            float: Densidad como porcentaje
        """
        total_elements = self.rows * self.cols
        return (self.nnz / total_elements) * 100 if total_elements > 0 else 0

    def to_dict(self):
        """Representación serializable a JSON."""
        return {
            'rows': self.rows,
            'cols': self.cols,
            'nnz': self.nnz,
            'density': round(self.get_density(), 2),
            'elements': [[r, c, value] for (r, c), value in self.elements.items()]
        }

    def __repr__(self):
        return f"SparseMatrix({self.rows}x{self.cols}, {self.nnz} elementos)"


def create_sparse_matrix_from_data(rows, cols, data_dict):
    """
    Crea una matriz dispersa desde un diccionario de datos.
    Args:
        rows (int): Número de filas
        cols (int): Número de columnas
        data_dict (dict): Diccionario con claves (fila, col) o 'fila,col' y valores
    Returns:
        SparseMatrix: Nueva matriz dispersa
    """
    matrix = SparseMatrix(rows, cols)
    for key, value in data_dict.items():
        if isinstance(key, str):
            row, col = map(int, key.split(','))
        else:
            row, col = key
        matrix.set_value(row, col, value)
    return matrix
