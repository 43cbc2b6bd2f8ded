from __future__ import annotations
from typing import Any, Dict
from flask import Flask, request, jsonify

import logging
import time
from collections import deque, defaultdict

from unit_economics.config.env import get_api_config, get_calculator_config
from unit_economics.growth.classifier import Quadrant
from unit_economics.growth.engine import evaluate, result_as_dict
from unit_economics.growth.inputs import InvalidInput, ScenarioInput

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Configuration helpers (overridable via app.config in tests)

def _get_api_key() -> str | None:
    if 'API_KEY' in app.config:
        return app.config.get('API_KEY')
    return get_api_config().api_key


def _get_rate_limit() -> tuple[int, float]:
    n = app.config.get('RATE_LIMIT_N')
    w = app.config.get('RATE_LIMIT_WINDOW_SEC')
    if n is None or w is None:
        cfg = get_api_config()
        n = cfg.rate_limit_n if n is None else n
        w = cfg.rate_limit_window_sec if w is None else w
    return int(n), float(w)


def _trust_proxy() -> bool:
    if 'TRUST_PROXY' in app.config:
        return bool(app.config.get('TRUST_PROXY'))
    return get_api_config().trust_proxy

_recent: dict[str, deque[float]] = defaultdict(lambda: deque(maxlen=100))
# Idle clients are dropped once this many are tracked
_MAX_TRACKED_CLIENTS = 10_000


def _client_ip() -> str:
    xff = request.headers.get('X-Forwarded-For')
    if xff and _trust_proxy():
        return xff.split(',')[0].strip()
    return request.remote_addr or 'anon'


def _prune_idle(now: float, window: float) -> None:
    for ip in [k for k, dq in _recent.items() if not dq or now - dq[-1] > window]:
        del _recent[ip]


def _check_api_key():
    api_key = _get_api_key()
    if api_key:
        provided = request.headers.get('X-API-Key')
        if provided != api_key:
            return jsonify({'error': 'unauthorized'}), 401
    return None


def _check_rate_limit(ip: str):
    # Allow if rate limiting disabled or N <= 0
    n, window = _get_rate_limit()
    if n <= 0:
        return None
    now = time.time()
    if ip not in _recent and len(_recent) >= _MAX_TRACKED_CLIENTS:
        _prune_idle(now, window)
    dq = _recent[ip]
    # Drop old entries outside window
    while dq and now - dq[0] > window:
        dq.popleft()
    if len(dq) >= n:
        retry = max(0.0, window - (now - dq[0]))
        resp = jsonify({'error': 'rate_limited'})
        resp.status_code = 429
        resp.headers['Retry-After'] = f"{retry:.2f}"
        return resp
    dq.append(now)
    return None


@app.before_request
def _auth_and_rate_limit():
    if request.path in ('/evaluate', '/quadrants'):
        unauthorized = _check_api_key()
        if unauthorized is not None:
            return unauthorized
        if request.method == 'POST' and request.path == '/evaluate':
            rl = _check_rate_limit(_client_ip())
            if rl is not None:
                return rl
    return None


def _invalid(field: str, reason: str):
    logger.info("rejected /evaluate request: %s: %s", field, reason)
    return jsonify({'error': 'invalid_input', 'field': field, 'reason': reason}), 400


def _number(payload: Dict[str, Any], key: str, default: float | None = None) -> float:
    raw = payload.get(key)
    if raw is None:
        if default is None:
            raise InvalidInput(key, 'is required')
        return default
    if isinstance(raw, bool):
        raise InvalidInput(key, 'must be a number')
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise InvalidInput(key, 'must be a number') from None
    except OverflowError:
        raise InvalidInput(key, 'is too large to represent') from None


@app.post('/evaluate')
def post_evaluate():
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        return _invalid('body', 'expected a JSON object')
    cfg = get_calculator_config()
    period = payload.get('period') or cfg.default_period
    if not isinstance(period, str):
        return _invalid('period', 'must be a string')
    try:
        scenario = ScenarioInput(
            cac=_number(payload, 'cac'),
            cfa=_number(payload, 'cfa', 0.0),
            ltgp=_number(payload, 'ltgp'),
            low_cac_fraction=_number(payload, 'low_cac_fraction', cfg.low_cac_fraction),
            early_gp_rate=_number(payload, 'early_gp_rate', 0.0),
            period_label=period,
        )
        result = evaluate(scenario)
    except InvalidInput as e:
        return _invalid(e.field, e.reason)
    return jsonify(result_as_dict(result))


@app.get('/quadrants')
def get_quadrants():
    return jsonify({'quadrants': [
        {
            'quadrant': q.value,
            'title': q.title,
            'description': q.description,
            'cac_level': q.cac_level.value,
            'cfa_level': q.cfa_level.value,
        }
        for q in Quadrant
    ]})


if __name__ == '__main__':
    _cfg = get_api_config()
    app.run(host=_cfg.host, port=_cfg.port)
