from collections import namedtuple

from matrix_app.utils.exceptions import InvalidOperationSelector
from matrix_app.utils.matrix_arithmetic import add_matrices, subtract_matrices, multiply_matrices

MatrixOperation = namedtuple('MatrixOperation', ['key', 'name', 'method'])

MATRIX_OPERATIONS = {
    'a': MatrixOperation('a', 'addition', add_matrices),
    'b': MatrixOperation('b', 'subtraction', subtract_matrices),
    'c': MatrixOperation('c', 'multiplication', multiply_matrices),
}

OPERATION_ALIASES = {
    'add': 'a',
    'subtract': 'b',
    'multiply': 'c',
}

class MatrixService:
    """Servicio para operaciones entre matrices dispersas"""

    def get_menu(self):
        """Obtiene las opciones disponibles como (clave, nombre)"""
        return [(operation.key, operation.name) for operation in MATRIX_OPERATIONS.values()]

    def resolve_operation(self, choice):
        """
        Obtiene la operación correspondiente a la opción elegida.

        Acepta la letra del menú o el nombre corto (add, subtract, multiply).

        Raises:
            InvalidOperationSelector: Si la opción no existe
        """
        key = (choice or '').strip().lower()
        key = OPERATION_ALIASES.get(key, key)
        operation = MATRIX_OPERATIONS.get(key)
        if not operation:
            raise InvalidOperationSelector(choice)
        return operation

    def perform_operation(self, choice, matrix_a, matrix_b):
        """Aplica la operación elegida y devuelve (operación, resultado)"""
        operation = self.resolve_operation(choice)
        return operation, operation.method(matrix_a, matrix_b)

