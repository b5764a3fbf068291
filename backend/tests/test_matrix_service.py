import pytest
from matrix_app.services.matrix_service import MatrixService
from matrix_app.utils.exceptions import InvalidOperationSelector
from matrix_app.utils.sparse_matrix import create_sparse_matrix_from_data

@pytest.fixture
def service():
    return MatrixService()

def test_menu(service):
    assert service.get_menu() == [('a', 'addition'), ('b', 'subtraction'), ('c', 'multiplication')]

@pytest.mark.parametrize('choice,name', [
    ('a', 'addition'),
    ('b', 'subtraction'),
    ('c', 'multiplication'),
    (' C ', 'multiplication'),
    ('add', 'addition'),
    ('subtract', 'subtraction'),
    ('multiply', 'multiplication'),
])
def test_resolve_operation(service, choice, name):
    assert service.resolve_operation(choice).name == name

@pytest.mark.parametrize('choice', ['d', '', None, 'divide'])
def test_resolve_invalid_operation(service, choice):
    with pytest.raises(InvalidOperationSelector):
        service.resolve_operation(choice)

def test_perform_operation(service):
    a = create_sparse_matrix_from_data(1, 2, {(0, 0): 2, (0, 1): 1})
    b = create_sparse_matrix_from_data(2, 1, {(0, 0): 3, (1, 0): 4})

    operation, result = service.perform_operation('c', a, b)

    assert operation.name == 'multiplication'
    assert result.get_value(0, 0) == 10

