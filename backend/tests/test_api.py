import io
import json
import os

import pytest
from matrix_app import create_app

@pytest.fixture
def app(tmp_path):
    """Create application for testing"""
    app = create_app('testing')
    app.config['TESTING'] = True
    app.config['MATRIX_STORAGE_DIR'] = str(tmp_path / 'results')

    return app

@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()

@pytest.fixture
def sample_matrices():
    """Sample 2x2 matrices for testing"""
    return {
        'matrix_a': "rows=2\ncols=2\n(0, 0, 5)\n(1, 1, 3)",
        'matrix_b': "rows=2\ncols=2\n(0, 0, 1)\n(0, 1, 2)"
    }

def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')

def test_index_endpoint(client):
    """Test root endpoint"""
    response = client.get('/')
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['message'] == 'Sparse Matrix API'
    assert data['status'] == 'running'

def test_health_check(client):
    """Test health check endpoint"""
    response = client.get('/health')
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['status'] == 'healthy'

def test_api_info(client):
    """Test API info endpoint"""
    response = client.get('/api-info')
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['name'] == 'Sparse Matrix API'
    assert 'operate' in data['endpoints']

def test_parse_matrix(client):
    """Test parsing a matrix through the API"""
    response = post_json(client, '/api/v1/matrices/parse', {'text': "rows=2\ncols=2\n(0,0,5)\n(1,1,3)"})
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['success'] is True
    assert data['data']['rows'] == 2
    assert data['data']['nnz'] == 2
    assert data['data']['elements'] == [[0, 0, 5], [1, 1, 3]]

def test_parse_matrix_invalid_format(client):
    response = post_json(client, '/api/v1/matrices/parse', {'text': "rows=2", 'source': 'upload.txt'})
    data = json.loads(response.data)

    assert response.status_code == 400
    assert data['success'] is False
    assert 'upload.txt' in data['error']

def test_parse_matrix_missing_field(client):
    response = post_json(client, '/api/v1/matrices/parse', {})
    data = json.loads(response.data)

    assert response.status_code == 400
    assert 'text' in data['error']

def test_parse_matrix_no_body(client):
    response = client.post('/api/v1/matrices/parse')

    assert response.status_code == 400

def test_operate_addition(client, sample_matrices):
    """Test adding two matrices"""
    payload = dict(sample_matrices, operation='a')
    response = post_json(client, '/api/v1/matrices/operate', payload)
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['data']['operation'] == 'addition'
    assert data['data']['result'] == "rows=2\ncols=2\n(0, 0, 6)\n(1, 1, 3)\n(0, 1, 2)"
    assert data['data']['matrix_info']['nnz'] == 3

def test_operate_multiplication_by_name(client, sample_matrices):
    payload = dict(sample_matrices, operation='multiply')
    response = post_json(client, '/api/v1/matrices/operate', payload)
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['data']['operation'] == 'multiplication'
    # [[5,0],[0,3]] x [[1,2],[0,0]]
    assert data['data']['matrix_info']['elements'] == [[0, 0, 5], [0, 1, 10]]

def test_operate_dimension_mismatch(client, sample_matrices):
    payload = dict(sample_matrices, matrix_b="rows=2\ncols=3", operation='b')
    response = post_json(client, '/api/v1/matrices/operate', payload)
    data = json.loads(response.data)

    assert response.status_code == 400
    assert data['success'] is False
    assert 'subtraction' in data['error']

def test_operate_invalid_operation(client, sample_matrices):
    payload = dict(sample_matrices, operation='x')
    response = post_json(client, '/api/v1/matrices/operate', payload)
    data = json.loads(response.data)

    assert response.status_code == 400
    assert data['error'] == 'Invalid option: x'

def test_operate_saves_result(client, sample_matrices):
    payload = dict(sample_matrices, operation='c', output_name='product.txt')
    response = post_json(client, '/api/v1/matrices/operate', payload)
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['data']['saved_as'] == 'product.txt'

    listing = json.loads(client.get('/api/v1/matrices/results').data)
    assert listing['data'] == ['product.txt']

    stored = client.get('/api/v1/matrices/results/product.txt')
    assert stored.status_code == 200
    assert stored.data.decode('utf-8') == "rows=2\ncols=2\n(0, 0, 5)\n(0, 1, 10)"

def test_get_result_not_found(client):
    response = client.get('/api/v1/matrices/results/missing.txt')
    data = json.loads(response.data)

    assert response.status_code == 404
    assert data['error'] == 'Matrix not found'

def test_upload_matrices(client, sample_matrices):
    """Test operating on uploaded matrix files"""
    response = client.post('/api/v1/matrices/upload', data={
        'file_a': (io.BytesIO(sample_matrices['matrix_a'].encode('utf-8')), 'a.txt'),
        'file_b': (io.BytesIO(sample_matrices['matrix_b'].encode('utf-8')), 'b.txt'),
        'operation': 'b'
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    assert response.mimetype == 'text/plain'
    assert 'subtraction_result.txt' in response.headers['Content-Disposition']
    assert response.data.decode('utf-8') == "rows=2\ncols=2\n(0, 0, 4)\n(1, 1, 3)\n(0, 1, -2)"

def test_upload_missing_file(client, sample_matrices):
    response = client.post('/api/v1/matrices/upload', data={
        'file_a': (io.BytesIO(sample_matrices['matrix_a'].encode('utf-8')), 'a.txt'),
        'operation': 'a'
    }, content_type='multipart/form-data')
    data = json.loads(response.data)

    assert response.status_code == 400
    assert data['error'] == 'No file provided for file_b'

def test_upload_invalid_file_reports_line(client, sample_matrices):
    response = client.post('/api/v1/matrices/upload', data={
        'file_a': (io.BytesIO(sample_matrices['matrix_a'].encode('utf-8')), 'a.txt'),
        'file_b': (io.BytesIO(b"rows=2\ncols=2\n(0, 0, x)"), 'b.txt'),
        'operation': 'a'
    }, content_type='multipart/form-data')
    data = json.loads(response.data)

    assert response.status_code == 400
    assert data['error'] == 'Invalid format at line 3 in b.txt: (0, 0, x)'

def test_render_matrix(client, monkeypatch):
    """Test SVG rendering without calling the Graphviz binary"""
    rendered = []

    def fake_render(matrix, title=None):
        rendered.append(matrix)
        return b'<svg></svg>'

    monkeypatch.setattr('matrix_app.routes.api.render_matrix_svg', fake_render)
    response = post_json(client, '/api/v1/matrices/render', {'text': "rows=2\ncols=2\n(1, 1, 4)"})

    assert response.status_code == 200
    assert response.mimetype == 'image/svg+xml'
    assert response.data == b'<svg></svg>'
    assert rendered[0].get_value(1, 1) == 4

def test_render_matrix_without_graphviz(client, monkeypatch):
    import graphviz

    def missing_binary(matrix, title=None):
        raise graphviz.ExecutableNotFound(['dot'])

    monkeypatch.setattr('matrix_app.routes.api.render_matrix_svg', missing_binary)
    response = post_json(client, '/api/v1/matrices/render', {'text': "rows=1\ncols=1"})
    data = json.loads(response.data)

    assert response.status_code == 500
    assert data['error'] == 'Graphviz is not installed on the server'

def test_upload_non_utf8_file(client, sample_matrices):
    response = client.post('/api/v1/matrices/upload', data={
        'file_a': (io.BytesIO(sample_matrices['matrix_a'].encode('utf-8')), 'a.txt'),
        'file_b': (io.BytesIO(b"rows=2\ncols=2\n(0, 0, \xff)"), 'b.txt'),
        'operation': 'a'
    }, content_type='multipart/form-data')
    data = json.loads(response.data)

    assert response.status_code == 400
    assert data['error'] == 'Matrix files must be UTF-8 text'

def test_list_and_get_stored_results(client, app):
    """Test reading results already present in the storage directory"""
    results_dir = app.config['MATRIX_STORAGE_DIR']
    os.makedirs(results_dir)
    with open(os.path.join(results_dir, 'sum.txt'), 'w', encoding='utf-8') as f:
        f.write("rows=3\ncols=3\n(2, 2, 9)")

    listing = client.get('/api/v1/matrices/results')
    data = json.loads(listing.data)

    assert listing.status_code == 200
    assert data['success'] is True
    assert data['data'] == ['sum.txt']

    stored = client.get('/api/v1/matrices/results/sum.txt')
    assert stored.status_code == 200
    assert stored.mimetype == 'text/plain'
    assert stored.data.decode('utf-8') == "rows=3\ncols=3\n(2, 2, 9)"

def test_get_stored_result_not_utf8(client, app):
    results_dir = app.config['MATRIX_STORAGE_DIR']
    os.makedirs(results_dir)
    with open(os.path.join(results_dir, 'broken.txt'), 'wb') as f:
        f.write(b"rows=1\ncols=1\n(0, 0, \xff)")

    response = client.get('/api/v1/matrices/results/broken.txt')
    data = json.loads(response.data)

    assert response.status_code == 400
    assert 'not a valid UTF-8 text file' in data['error']
