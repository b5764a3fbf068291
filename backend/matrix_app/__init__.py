from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import os

# Load environment variables
load_dotenv()

def create_app(config_name='development'):
    """Application factory pattern"""
    from matrix_app.config import config_by_name

    app = Flask(__name__)

    # Configuration
    app.config.from_object(config_by_name.get(config_name, config_by_name['development']))
    if not app.config.get('MATRIX_STORAGE_DIR'):
        app.config['MATRIX_STORAGE_DIR'] = os.path.join(app.instance_path, 'results')
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Enable CORS
    CORS(app)

    # Register blueprints
    from matrix_app.routes.main import main_bp
    from matrix_app.routes.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    return app
