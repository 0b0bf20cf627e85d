import logging

from flask import Flask, jsonify, request

from .errors import InvalidArgument
from .evaluator import evaluate, measure
from .generator import CHARACTER_CLASSES, GenerationConfig, check_flag, generate
from .score import tier_of

log = logging.getLogger(__name__)

app = Flask(__name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgument("request body must be a JSON object")
    return data


@app.errorhandler(InvalidArgument)
def invalid_argument(e):
    return jsonify({"error": str(e)}), 400


@app.route('/')
def home():
    return jsonify({
        "message": "keysmith API is running"
    })


@app.route('/classes', methods=['GET'])
def classes_route():
    return jsonify({
        'classes': [{'name': c.name, 'chars': c.chars, 'size': len(c)} for c in CHARACTER_CLASSES]
    })


@app.route('/generate', methods=['POST'])
def generate_route():
    data = _json_body()
    config = GenerationConfig(
        length=data.get('length', 12),
        include_uppercase=check_flag('upper', data.get('upper', True)),
        include_lowercase=check_flag('lower', data.get('lower', True)),
        include_numbers=check_flag('digits', data.get('digits', True)),
        include_symbols=check_flag('symbols', data.get('symbols', False)),
    )
    password = generate(config)
    tier = tier_of(measure(password))
    log.debug("generated password, tier %s", tier.name)
    return jsonify({
        'password': password,
        'score': tier.score,
        'tier': tier.name,
        'label': tier.label,
        'color': tier.color,
    })


@app.route('/score', methods=['POST'])
def score_route():
    data = _json_body()
    password = data.get('password', '')
    if not isinstance(password, str):
        raise InvalidArgument("password must be a string")
    return jsonify(evaluate(password))


if __name__ == "__main__":
    app.run(debug=True)
