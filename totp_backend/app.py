"""
FLASK APP MAIN ENTRY POINT - TOTP BACKEND SERVER
==================================================

Builds the Flask app, enables CORS, and registers the API routes.

SETTINGS (environment variables)
- TOTP_API_HOST   listening interface, default 0.0.0.0
- TOTP_API_PORT   listening port, default 5000
- TOTP_API_DEBUG  "1"/"true" to enable Flask debug mode
"""
import logging
import os

from flask import Flask
from flask_cors import CORS

from totp_backend.routes import otp_bp

DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 5000


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def load_config() -> dict:
    """Read server settings from the environment."""
    return {
        'HOST': os.getenv('TOTP_API_HOST', DEFAULT_HOST),
        'PORT': int(os.getenv('TOTP_API_PORT', DEFAULT_PORT)),
        'DEBUG': _env_flag('TOTP_API_DEBUG'),
    }


def create_app(config: dict = None) -> Flask:
    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)

    # Allow a frontend on another origin to call the API
    CORS(app, origins="*")

    app.register_blueprint(otp_bp)
    return app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app = create_app()
    app.run(debug=app.config['DEBUG'], host=app.config['HOST'], port=app.config['PORT'])


if __name__ == '__main__':
    main()
