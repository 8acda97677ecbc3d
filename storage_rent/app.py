"""
Storage Rent Application
Flask app serving monthly rent schedules for storage units
"""

from flask import Flask
from flask_cors import CORS
import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Import configuration
from storage_rent.config import Config, config

# Import blueprints
from storage_rent.rent_backend import rent_bp


def setup_logging(log_dir: Path, log_to_file: bool = True):
    """Setup application logging"""
    log_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # create_app may run more than once per process (tests)
    if root_logger.handlers:
        return root_logger

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)

        # File handler with rotation
        log_file = log_dir / 'storage_rent.log'
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)

    # Werkzeug logs every request at INFO
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    return root_logger


def create_app(config_name=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    config_name = config_name or os.environ.get('FLASK_ENV', 'default')
    app.config.from_object(config.get(config_name, config['default']))
    app.json.sort_keys = app.config.get('JSON_SORT_KEYS', False)

    # Setup logging
    logger = setup_logging(Path(app.config['LOG_DIR']), app.config.get('LOG_TO_FILE', True))
    logger.info("🚀 Initializing Storage Rent Application...")

    # Initialize CORS
    cors_origins = app.config.get('CORS_ORIGINS', ['*'])
    if isinstance(cors_origins, str):
        cors_origins = cors_origins.split(',')

    CORS(app,
         resources={r"/*": {"origins": cors_origins, "methods": ["GET", "POST", "OPTIONS"], "allow_headers": ["Content-Type"]}})

    # Register blueprints
    app.register_blueprint(rent_bp)
    logger.info("✅ Blueprints registered")

    logger.info("✅ Application created successfully")
    return app


if __name__ == '__main__':
    app = create_app()
    logger = logging.getLogger(__name__)

    logger.info("══════════════════════════════════════════════════════════════")
    logger.info("   🏬 Storage Rent Service - Starting Server")
    logger.info("══════════════════════════════════════════════════════════════")
    logger.info(f"📍 Running Server PORT:{Config.API_PORT}")
    logger.info("   - POST /storage-rent - Monthly rent schedule")
    logger.info("   - GET  /health - Liveness probe")
    logger.info("══════════════════════════════════════════════════════════════")

    app.run(
        debug=app.config['DEBUG'],
        host=Config.API_HOST,
        port=Config.API_PORT
    )
