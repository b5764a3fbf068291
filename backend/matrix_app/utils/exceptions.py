class MatrixError(ValueError):
    """Error base para todas las fallas de las matrices dispersas."""

class FormatError(MatrixError):
    """
    Línea de dimensiones o de elemento con formato inválido.

    Attributes:
        line_number (int): Número de línea (base 1) donde ocurrió el error
        source (str): Identificador del archivo u origen del texto
    """

    def __init__(self, message, line_number=None, source=None):
        super().__init__(message)
        self.line_number = line_number
        self.source = source

class DimensionMismatch(MatrixError):
    """Las dimensiones de los operandos no son compatibles con la operación."""

    def __init__(self, message, operation=None):
        super().__init__(message)
        self.operation = operation

class InvalidOperationSelector(MatrixError):
    """La opción de operación solicitada no existe."""

    def __init__(self, choice):
        super().__init__(f"Invalid option: {choice}")
        self.choice = choice

class MatrixFileNotFound(FileNotFoundError):
    """No se encontró el archivo de la matriz."""

    def __init__(self, path):
        super().__init__(f"File not found: {path}")
        self.path = path
