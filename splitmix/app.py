# splitmix/app.py
# Flask oracle exposing /get_output, /validate and /split
# Output format follows config.OUTPUT_MODE = 'word' | 'int' | 'double'

import logging
import threading

from flask import Flask, jsonify, request

from . import config
from .default import new_smgen
from .smgen import MASK64, next_double, next_int, next_word64, split_smgen

logger = logging.getLogger('oracle')


class Oracle:
    """A generator stream shared by all requests; each draw advances it once."""

    def __init__(self, gen):
        self._gen = gen
        self._lock = threading.Lock()

    def draw(self, step):
        with self._lock:
            out, self._gen = step(self._gen)
        return out

    def split(self):
        with self._lock:
            self._gen, child = split_smgen(self._gen)
        return child


def mask_output(x, bits=None, select=None):
    bits = config.OUTPUT_BITS if bits is None else bits
    select = config.OUTPUT_SELECT if select is None else select
    if bits >= 64:
        return x & MASK64
    if select == 'high':
        return (x >> (64 - bits)) & ((1 << bits) - 1)
    else:
        return x & ((1 << bits) - 1)


def hex_output(x, bits=None):
    bits = config.OUTPUT_BITS if bits is None else bits
    return format(x, '0{}x'.format((min(bits, 64) + 3) // 4))


def create_app(gen=None):
    if gen is None:
        gen = new_smgen()
    oracle = Oracle(gen)
    app = Flask(__name__)
    app.config['ORACLE'] = oracle

    @app.route('/get_output', methods=['GET'])
    def get_output():
        mode = config.OUTPUT_MODE
        if mode == 'int':
            return jsonify({'output': oracle.draw(next_int)})
        if mode == 'double':
            return jsonify({'output': oracle.draw(next_double)})
        if mode != 'word':
            logger.warning(f"Unknown OUTPUT_MODE '{mode}', serving 'word'")
        out = mask_output(oracle.draw(next_word64))
        return jsonify({'output': hex_output(out)})

    @app.route('/validate', methods=['POST'])
    def validate():
        data = request.get_json(silent=True)
        if not data or 'candidate' not in data:
            return jsonify({'ok': False, 'reason': 'need candidate'}), 400
        try:
            candidate = int(data['candidate'], 16)
        except (TypeError, ValueError):
            return jsonify({'ok': False, 'reason': 'bad hex'}), 400
        expected = mask_output(oracle.draw(next_word64))
        bits = min(config.OUTPUT_BITS, 64)
        ok = (candidate & ((1 << bits) - 1)) == expected
        logger.info(f"validate candidate={candidate:x} ok={ok}")
        return jsonify({'ok': ok, 'expected': hex_output(expected)})

    @app.route('/split', methods=['GET'])
    def split():
        child = oracle.split()
        return jsonify({'seed': format(child.seed, '016x'), 'gamma': format(child.gamma, '016x')})

    return app


if __name__ == '__main__':
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    app = create_app()
    logger.info(f"Starting oracle at http://{config.HOST}:{config.PORT} with SEED_MODE={config.SEED_MODE}")
    app.run(host=config.HOST, port=config.PORT, debug=False)
