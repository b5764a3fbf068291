#!/usr/bin/env python3
"""
Programa interactivo para operar matrices dispersas guardadas en archivos.
Pide dos archivos, la operación y el archivo donde guardar el resultado.
"""

import sys

from matrix_app.models.matrix_storage import load_matrix_from_file, save_matrix_to_file
from matrix_app.services.matrix_service import MatrixService
from matrix_app.utils.exceptions import MatrixError

def perform_matrix_operations(input_func=input):
    """
    Ejecuta una interacción completa. Devuelve 0 si terminó bien, 1 si hubo error.

    Cualquier error de formato, dimensiones, archivo u opción se informa al
    usuario y termina la interacción sin escribir el archivo de salida.
    """
    matrix_service = MatrixService()

    try:
        print("Menu :")
        for key, name in matrix_service.get_menu():
            print(f"{key}: {name}")

        first_path = input_func("Enter the file path for the first matrix: ").strip()
        matrix_a = load_matrix_from_file(first_path)

        second_path = input_func("Enter the file path for the second matrix: ").strip()
        matrix_b = load_matrix_from_file(second_path)

        choice = input_func("Choose an option (a, b, or c): ")
        operation, result = matrix_service.perform_operation(choice, matrix_a, matrix_b)
        print(f"Output of {operation.name}........\n")

        output_path = input_func("Enter the file path to save the result: ").strip()
        save_matrix_to_file(result, output_path)
        print(f"Result saved to {output_path} ({result.rows}x{result.cols}, {result.nnz} elements)")
        return 0

    except (MatrixError, OSError) as e:
        print("Error:", str(e))
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nError: input cancelled")
        return 1

def main():
    return perform_matrix_operations()

if __name__ == '__main__':
    sys.exit(main())
