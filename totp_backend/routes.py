"""
TOTP BACKEND API ROUTES - FLASK BLUEPRINT

REST endpoints wrapping totp_core. The server stores nothing: the key is
sent with every request and dropped once the code is computed.

EXAMPLES:
curl http://localhost:5000/
curl -X POST http://localhost:5000/api/totp -H "Content-Type: application/json" -d '{"key": "mysecret"}'
curl -X POST http://localhost:5000/api/totp -H "Content-Type: application/json" -d '{"key": "mysecret", "digits": 6, "resolution": 60, "timestamp": 59}'
"""

import logging
import time

from flask import Blueprint, jsonify, request

from totp_core import __version__
from totp_core.otp_core import (
    DEFAULT_DIGITS,
    DEFAULT_T0,
    DEFAULT_TIME_STEP,
    HASH_NAME,
    MAX_DIGITS,
    MIN_DIGITS,
    OTPError,
    generate,
    seconds_remaining,
    time_counter,
)

logger = logging.getLogger(__name__)

otp_bp = Blueprint('otp', __name__)


@otp_bp.route('/', methods=['GET'])
def index():
    """Service description and defaults."""
    return jsonify({
        "service": "totp",
        "version": __version__,
        "algorithm": f"HMAC-{HASH_NAME.upper()}",
        "counter_encoding": "decimal-text",
        "defaults": {
            "resolution": DEFAULT_TIME_STEP,
            "offset": DEFAULT_T0,
            "digits": DEFAULT_DIGITS,
        },
        "digits_range": [MIN_DIGITS, MAX_DIGITS],
        "endpoints": ["POST /api/totp"],
    })


@otp_bp.route('/api/totp', methods=['POST'])
def generate_totp():
    """
    GENERATE A TOTP CODE

    Body (JSON):
      key        (required) shared secret, string
      resolution (optional) time step in seconds, default 30
      offset     (optional) epoch offset in seconds, default 0
      digits     (optional) output length, default 8
      timestamp  (optional) epoch seconds, default server clock
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'key' not in data:
        return jsonify({"error": "key is required"}), 400

    key = data['key']
    if not isinstance(key, str):
        return jsonify({"error": "key must be a string"}), 400

    resolution = data.get('resolution', DEFAULT_TIME_STEP)
    offset = data.get('offset', DEFAULT_T0)
    digits = data.get('digits', DEFAULT_DIGITS)
    now = data.get('timestamp')
    if now is None:
        now = int(time.time())

    try:
        code = generate(now, offset, resolution, key, digits)
        counter = time_counter(now, offset, resolution)
        remaining = seconds_remaining(now, offset, resolution)
    except OTPError as e:
        # never log the key
        logger.warning("Rejected TOTP request: %s", e)
        return jsonify({"error": str(e)}), 400

    logger.info("Generated %d-digit code for counter %d", digits, counter)
    return jsonify({
        "code": code,
        "digits": digits,
        "counter": counter,
        "valid_for": remaining,
    })
