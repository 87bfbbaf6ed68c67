"""
main.py — Pathfinder Visualizer Flask API
==========================================
JSON surface over the engine.  Whatever draws the boards (browser,
canvas, terminal) polls /api/state and paints the grids it gets back.

Routes:
  GET  /api/state              – advance the animation clock, return state
  GET  /api/algorithms         – search registry
  GET  /api/mazes              – maze generator registry
  POST /api/run                – search + schedule animation(s)
  POST /api/maze               – generate a maze  {"kind", "seed"?}
  POST /api/clear              – clear visited / path, keep layout
  POST /api/reset              – blank board
  POST /api/edit/wall          – toggle a wall     {"row", "col"}
  POST /api/edit/start         – move the start    {"row", "col"}
  POST /api/edit/end           – move the end      {"row", "col"}
  POST /api/config/algo        – {"algo"?, "compare_algo"?}
  POST /api/config/speed       – {"speed": ms | preset}
  POST /api/config/compare     – {"enabled": bool}

State management:
  Each browser session carries a random id in the Flask session cookie.
  The matching Visualizer lives in process memory (oldest evicted past
  MAX_SESSIONS); animations are timer state and cannot be serialised.
"""

import logging
import secrets
from collections import OrderedDict

from flask import Flask, request, jsonify, session

from config import DEFAULTS
from algorithms import list_algorithms
from mazes import list_mazes
from engine import Visualizer

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.secret_key = secrets.token_hex(32)
app.config.from_mapping(DEFAULTS)
app.config.from_prefixed_env("PATHFINDER")

_visualizers: "OrderedDict[str, Visualizer]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------
def get_visualizer() -> Visualizer:
    """Look up (or create) the Visualizer bound to this browser session."""
    sid = session.get("sid")
    if sid is None or sid not in _visualizers:
        sid = secrets.token_hex(8)
        session["sid"] = sid
        _visualizers[sid] = Visualizer.from_config(app.config)
        logger.info("new session %s", sid)
        # the session just created always survives eviction
        limit = max(1, int(app.config["MAX_SESSIONS"]))
        while len(_visualizers) > limit:
            old, viz = _visualizers.popitem(last=False)
            viz.cancel()
            logger.info("evicted session %s", old)
    _visualizers.move_to_end(sid)
    return _visualizers[sid]


def payload() -> dict:
    return request.get_json(silent=True) or {}


def cell_arg(data: dict):
    """(row, col) from the request body; ValueError if missing / not ints."""
    try:
        return int(data["row"]), int(data["col"])
    except (KeyError, TypeError, ValueError):
        raise ValueError("row and col are required integers")


def state_response(viz: Visualizer, **extra):
    body = viz.snapshot()
    body.update(extra)
    return jsonify(body)


@app.errorhandler(ValueError)
def bad_request(err):
    return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# API: State & registries
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    viz = get_visualizer()
    viz.tick()
    return state_response(viz)


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([a.to_dict() for a in list_algorithms()])


@app.route("/api/mazes")
def api_mazes():
    return jsonify([m.to_dict() for m in list_mazes()])


# ---------------------------------------------------------------------------
# API: Run / board lifecycle
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    viz = get_visualizer()
    started = viz.visualize()
    viz.tick()
    return state_response(viz, started=started)


@app.route("/api/maze", methods=["POST"])
def api_maze():
    data = payload()
    viz = get_visualizer()
    seed = data.get("seed")
    viz.generate_maze(data.get("kind", "recursive"), seed=int(seed) if seed is not None else None)
    return state_response(viz)


@app.route("/api/clear", methods=["POST"])
def api_clear():
    viz = get_visualizer()
    viz.clear_path()
    return state_response(viz)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    viz = get_visualizer()
    viz.reset_grid()
    return state_response(viz)


# ---------------------------------------------------------------------------
# API: Layout edits (silently ignored when invalid or while running)
# ---------------------------------------------------------------------------
@app.route("/api/edit/<kind>", methods=["POST"])
def api_edit(kind):
    edits = {"wall": "toggle_wall", "start": "move_start", "end": "move_end"}
    if kind not in edits:
        raise ValueError(f"Unknown edit: {kind}")
    viz = get_visualizer()
    row, col = cell_arg(payload())
    applied = getattr(viz, edits[kind])(row, col)
    return state_response(viz, applied=applied)


# ---------------------------------------------------------------------------
# API: Config changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    data = payload()
    viz = get_visualizer()
    viz.set_algorithms(data.get("algo"), data.get("compare_algo"))
    return jsonify({"algo": viz.algo, "compare_algo": viz.compare_algo})


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    viz = get_visualizer()
    viz.set_speed(payload().get("speed", "medium"))
    return jsonify({"speed_ms": viz.speed_ms})


@app.route("/api/config/compare", methods=["POST"])
def api_config_compare():
    viz = get_visualizer()
    applied = viz.set_comparison_mode(payload().get("enabled", False))
    return jsonify({"comparison_mode": viz.comparison_mode, "applied": applied})


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Pathfinder Visualizer API on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
