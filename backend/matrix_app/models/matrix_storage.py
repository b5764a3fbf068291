import os

from ..utils.exceptions import FormatError, MatrixFileNotFound
from ..utils.matrix_codec import parse_matrix, serialize_matrix

def load_matrix_from_file(matrix_file_path):
    """
    Lee una matriz dispersa desde un archivo de texto.

    Raises:
        MatrixFileNotFound: Si el archivo no existe
        FormatError: Si el contenido es inválido
    """
    try:
        with open(matrix_file_path, 'r', encoding='utf-8') as f:
            file_content = f.read()
    except FileNotFoundError:
        raise MatrixFileNotFound(matrix_file_path) from None
    except UnicodeDecodeError:
        raise FormatError(
            f"{matrix_file_path} is not a valid UTF-8 text file",
            source=str(matrix_file_path)
        ) from None

    return parse_matrix(file_content, source=str(matrix_file_path))

def save_matrix_to_file(matrix, file_path):
    """Escribe la matriz serializada en el archivo indicado."""
    content = serialize_matrix(matrix)
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(content)
    return file_path

class MatrixStorage:
    """
    Storage class for matrices saved by the API.
    Results are written as text files inside a single storage directory.
    """

    def __init__(self, storage_dir='results'):
        self.storage_dir = storage_dir

    def _path_for(self, name):
        return os.path.join(self.storage_dir, name)

    def save(self, matrix, name):
        """Save a matrix under the given file name, creating the directory if needed"""
        os.makedirs(self.storage_dir, exist_ok=True)
        return save_matrix_to_file(matrix, self._path_for(name))

    def load(self, name):
        """Load a previously saved matrix"""
        return load_matrix_from_file(self._path_for(name))

    def list_matrices(self):
        """List stored matrix file names"""
        if not os.path.isdir(self.storage_dir):
            return []
        return sorted(
            entry for entry in os.listdir(self.storage_dir)
            if os.path.isfile(self._path_for(entry))
        )
