import os


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""

    # Token signing - no fallback, create_app refuses to start without it
    JWT_SECRET = os.environ.get('JWT_SECRET')
    ADMIN_COOKIE_NAME = 'admin-token'
    SESSION_TOKEN_LIFETIME = 3600  # seconds
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Admin Settings
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    REQUIRE_ADMIN_FOR_WRITES = _env_flag('REQUIRE_ADMIN_FOR_WRITES', False)

    # Content Storage Settings
    DATA_FILE = os.environ.get('DATA_FILE', 'data.json')
    SECTION_CACHE_TTL = int(os.environ.get('SECTION_CACHE_TTL', 5 * 60))
    KV_REST_API_URL = os.environ.get('KV_REST_API_URL')
    KV_REST_API_TOKEN = os.environ.get('KV_REST_API_TOKEN')
    KV_DATA_KEY = os.environ.get('KV_DATA_KEY', 'portfolio-data')
    KV_TIMEOUT = float(os.environ.get('KV_TIMEOUT', '5'))

    # Upload Settings
    MAX_CONTENT_LENGTH = 60 * 1024 * 1024  # 60MB, above the 50MB video limit
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', 'static/uploads')
    MAX_IMAGE_SIZE = 5 * 1024 * 1024
    MAX_VIDEO_SIZE = 50 * 1024 * 1024
    ALLOWED_IMAGE_TYPES = {'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp'}
    ALLOWED_VIDEO_TYPES = {'video/mp4', 'video/webm', 'video/ogg', 'video/quicktime'}

    # JSON Settings
    JSON_AS_ASCII = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    REQUIRE_ADMIN_FOR_WRITES = _env_flag('REQUIRE_ADMIN_FOR_WRITES', True)


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    JWT_SECRET = 'test-secret-key-for-testing-only'
    ADMIN_EMAIL = 'admin@example.com'
    ADMIN_PASSWORD = 'correct-horse'
    # Tests point these at a temporary directory
    DATA_FILE = 'data.test.json'
    UPLOAD_FOLDER = 'static/uploads-test'
    KV_REST_API_URL = None
    KV_REST_API_TOKEN = None
    REQUIRE_ADMIN_FOR_WRITES = False


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, or based on FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
