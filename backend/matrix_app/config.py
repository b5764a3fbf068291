import os

class Config:
    """Base configuration, values come from the environment (.env supported)"""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    MATRIX_STORAGE_DIR = os.environ.get('MATRIX_STORAGE_DIR')
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 2 * 1024 * 1024))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    TESTING = False
    DEBUG = False

class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')

class TestingConfig(Config):
    TESTING = True

class ProductionConfig(Config):
    pass

config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}
