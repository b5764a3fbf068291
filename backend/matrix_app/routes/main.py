from flask import Blueprint, jsonify

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    """Root endpoint"""
    return jsonify({
        'message': 'Sparse Matrix API',
        'version': '1.0.0',
        'status': 'running'
    })

@main_bp.route('/health')
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'message': 'API is running successfully'
    })

@main_bp.route('/api-info')
def api_info():
    """API information endpoint"""
    return jsonify({
        'name': 'Sparse Matrix API',
        'version': '1.0.0',
        'description': 'Addition, subtraction and multiplication of sparse integer matrices',
        'endpoints': {
            'main': '/',
            'health': '/health',
            'api_info': '/api-info',
            'parse': '/api/v1/matrices/parse',
            'operate': '/api/v1/matrices/operate',
            'upload': '/api/v1/matrices/upload',
            'render': '/api/v1/matrices/render',
            'results': '/api/v1/matrices/results'
        }
    })
