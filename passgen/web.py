import logging

from flask import Flask, jsonify, request

from passgen.config import load_config
from passgen.errors import ConfigError, RngUnavailable
from passgen.generator import generate
from passgen.policy import resolve
from passgen.rng import SystemRandomSource

logger = logging.getLogger(__name__)


def _flag(data, key):
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def create_app(rng=None):
    app = Flask(__name__)
    cfg = load_config()

    @app.route('/')
    def home():
        return jsonify({
            "message": "passgen API is running"
        })

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({'error': 'request body must be a JSON object'}), 400
        try:
            policy = resolve(
                data.get('length', cfg["length"]),
                named_policy=data.get('type', cfg.get("type")),
                numbers=_flag(data, 'numbers'),
                symbols=_flag(data, 'symbols'),
                capitalized=_flag(data, 'capitalized'),
                max_length=cfg["max_length"],
            )
            # each request owns its source unless one was injected
            source = rng if rng is not None else SystemRandomSource()
            password = generate(policy, source)
        except ConfigError as e:
            return jsonify({'error': str(e)}), 400
        except RngUnavailable as e:
            logger.error("entropy source unavailable: %s", e)
            return jsonify({'error': str(e)}), 503
        return jsonify({'password': password, 'policy': policy.name, 'length': policy.length})

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
