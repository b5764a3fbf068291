from flask import Blueprint, request, jsonify, Response, current_app
from marshmallow import Schema, fields, validate, ValidationError
from werkzeug.utils import secure_filename
import graphviz

from matrix_app.models.matrix_storage import MatrixStorage
from matrix_app.services.matrix_service import MatrixService
from matrix_app.utils.exceptions import MatrixError, MatrixFileNotFound
from matrix_app.utils.helpers import generate_response, sanitize_input
from matrix_app.utils.matrix_codec import parse_matrix, serialize_matrix
from matrix_app.utils.matrix_graph import render_matrix_svg

api_bp = Blueprint('api', __name__)
matrix_service = MatrixService()

class ParseRequestSchema(Schema):
    text = fields.Str(required=True)
    source = fields.Str(load_default=None)

class OperationRequestSchema(Schema):
    matrix_a = fields.Str(required=True)
    matrix_b = fields.Str(required=True)
    operation = fields.Str(required=True, validate=validate.Length(min=1))
    output_name = fields.Str(load_default=None)

parse_schema = ParseRequestSchema()
operation_schema = OperationRequestSchema()

def get_storage():
    return MatrixStorage(current_app.config['MATRIX_STORAGE_DIR'])

def error_response(message, status):
    return jsonify(generate_response(success=False, error=message)), status

def load_json(schema):
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError('No data provided')
    return schema.load(data)

@api_bp.route('/matrices/parse', methods=['POST'])
def parse_matrix_text():
    """Parse a matrix in text format and return its elements"""
    try:
        data = load_json(parse_schema)
        matrix = parse_matrix(data['text'], source=data['source'])
        return jsonify(generate_response(data=matrix.to_dict())), 200

    except ValidationError as e:
        return error_response(e.messages, 400)
    except MatrixError as e:
        current_app.logger.warning('Parse failed: %s', e)
        return error_response(str(e), 400)

@api_bp.route('/matrices/operate', methods=['POST'])
def operate_matrices():
    """Add, subtract or multiply two matrices given in text format"""
    try:
        data = load_json(operation_schema)
        current_app.logger.debug('Operation %r requested', data['operation'])

        matrix_a = parse_matrix(data['matrix_a'], source='matrix_a')
        matrix_b = parse_matrix(data['matrix_b'], source='matrix_b')
        operation, result = matrix_service.perform_operation(data['operation'], matrix_a, matrix_b)

        response_data = {
            'operation': operation.name,
            'result': serialize_matrix(result),
            'matrix_info': result.to_dict()
        }

        if data['output_name']:
            filename = secure_filename(sanitize_input(data['output_name']))
            if not filename:
                return error_response('Invalid output name', 400)
            get_storage().save(result, filename)
            response_data['saved_as'] = filename

        return jsonify(generate_response(
            data=response_data,
            message=f'Output of {operation.name}'
        )), 200

    except ValidationError as e:
        return error_response(e.messages, 400)
    except MatrixError as e:
        current_app.logger.warning('Operation failed: %s', e)
        return error_response(str(e), 400)
    except OSError as e:
        current_app.logger.exception('Error saving result')
        return error_response(f'Error saving result: {str(e)}', 500)

@api_bp.route('/matrices/upload', methods=['POST'])
def upload_matrices():
    """Upload two matrix files and download the result of the operation"""
    for field in ('file_a', 'file_b'):
        if field not in request.files:
            return error_response(f'No file provided for {field}', 400)
        if request.files[field].filename == '':
            return error_response(f'No file selected for {field}', 400)

    file_a = request.files['file_a']
    file_b = request.files['file_b']

    try:
        matrix_a = parse_matrix(file_a.read().decode('utf-8'), source=secure_filename(file_a.filename))
        matrix_b = parse_matrix(file_b.read().decode('utf-8'), source=secure_filename(file_b.filename))
        operation, result = matrix_service.perform_operation(request.form.get('operation'), matrix_a, matrix_b)

        return Response(
            serialize_matrix(result),
            mimetype='text/plain',
            headers={'Content-Disposition': f'attachment; filename={operation.name}_result.txt'}
        )

    except UnicodeDecodeError:
        return error_response('Matrix files must be UTF-8 text', 400)
    except MatrixError as e:
        current_app.logger.warning('Upload operation failed: %s', e)
        return error_response(str(e), 400)

@api_bp.route('/matrices/render', methods=['POST'])
def render_matrix():
    """Render a matrix as a Graphviz SVG"""
    try:
        data = load_json(parse_schema)
        matrix = parse_matrix(data['text'], source=data['source'])
        svg = render_matrix_svg(matrix)
        return Response(svg, mimetype='image/svg+xml')

    except ValidationError as e:
        return error_response(e.messages, 400)
    except MatrixError as e:
        return error_response(str(e), 400)
    except graphviz.ExecutableNotFound:
        current_app.logger.exception('Graphviz executables not found')
        return error_response('Graphviz is not installed on the server', 500)

@api_bp.route('/matrices/results', methods=['GET'])
def list_results():
    """List saved result matrices"""
    names = get_storage().list_matrices()
    return jsonify(generate_response(data=names)), 200

@api_bp.route('/matrices/results/<name>', methods=['GET'])
def get_result(name):
    """Download a saved result matrix"""
    filename = secure_filename(name)
    if not filename:
        return error_response('Matrix not found', 404)
    try:
        matrix = get_storage().load(filename)
    except MatrixFileNotFound:
        return error_response('Matrix not found', 404)
    except MatrixError as e:
        return error_response(str(e), 400)

    return Response(serialize_matrix(matrix), mimetype='text/plain')
