"""
Flask JSON API over a single route session.

The map, forms and alerts live in the client; this module only exposes
the session contract over HTTP. One session is held per app instance,
so it is meant for a single user on a single process.

Run:
    flask --app ui.flask_app run
"""

from __future__ import annotations

import logging

from flask import Blueprint, Flask, current_app, jsonify, request

from route_planner.config import SEED_GRAPH_PATH
from route_planner.graph.errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    GraphError,
    RoutingError,
    UnknownNodeError,
)
from route_planner.graph.models import Edge, Node
from route_planner.graph.pathfinding import NoPathFound
from route_planner.session import Route, RouteSession

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


def create_app(route_session: RouteSession | None = None) -> Flask:
    """
    Build the Flask app.

    Args:
        route_session: Session to serve (default: one built from the seed file)
    """
    app = Flask(__name__)
    if route_session is None:
        route_session = RouteSession.from_seed_file(SEED_GRAPH_PATH)
    app.config["ROUTE_SESSION"] = route_session
    app.register_blueprint(api)
    return app


def _session() -> RouteSession:
    return current_app.config["ROUTE_SESSION"]


def _payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return data if isinstance(data, dict) else {}


def _number(value):
    """Parse numeric form input; unparseable values are passed on for validation."""
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _node_json(node: Node) -> dict:
    return {
        "id": node.id,
        "title": node.title,
        "latitude": node.latitude,
        "longitude": node.longitude,
    }


def _edge_json(edge: Edge) -> dict:
    return {"source": edge.source, "target": edge.target, "weight": edge.weight}


def _outcome_json(outcome: Route | NoPathFound | None) -> dict | None:
    if outcome is None:
        return None
    if isinstance(outcome, NoPathFound):
        return {"found": False, "message": outcome.message}
    return {"found": True, **outcome.to_dict()}


def _selection_json(session: RouteSession) -> dict:
    selection = session.selection
    return {
        "state": selection.state.value,
        "start": selection.start,
        "goal": selection.goal,
        "algorithm": session.algorithm.value,
        "route": _outcome_json(session.last_outcome),
    }


@api.errorhandler(GraphError)
def handle_graph_error(e: GraphError):
    if isinstance(e, UnknownNodeError):
        status = 404
    elif isinstance(e, (DuplicateNodeError, DuplicateEdgeError)):
        status = 409
    else:
        status = 400
    logger.warning(f"Rejected request: {e}")
    return jsonify({"error": type(e).__name__, "message": str(e)}), status


@api.errorhandler(RoutingError)
def handle_routing_error(e: RoutingError):
    logger.warning(f"Rejected route query: {e}")
    return jsonify({"error": type(e).__name__, "message": str(e)}), 400


@api.errorhandler(ValueError)
def handle_value_error(e: ValueError):
    return jsonify({"error": "ValueError", "message": str(e)}), 400


@api.route("/nodes", methods=["GET"])
def list_nodes():
    return jsonify([_node_json(node) for node in _session().list_nodes()])


@api.route("/nodes", methods=["POST"])
def add_node():
    data = _payload()
    node = _session().add_node(
        data.get("id", ""),
        data.get("title"),
        _number(data.get("latitude")),
        _number(data.get("longitude")),
    )
    return jsonify(_node_json(node)), 201


@api.route("/edges", methods=["GET"])
def list_edges():
    return jsonify([_edge_json(edge) for edge in _session().list_edges()])


@api.route("/edges", methods=["POST"])
def add_edge():
    data = _payload()
    edge = _session().add_edge(
        data.get("source", data.get("from", "")),
        data.get("target", data.get("to", "")),
        _number(data.get("weight")),
    )
    return jsonify(_edge_json(edge)), 201


@api.route("/select", methods=["POST"])
def select():
    session = _session()
    session.select(_payload().get("node", ""))
    return jsonify(_selection_json(session))


@api.route("/selection", methods=["GET"])
def selection():
    return jsonify(_selection_json(_session()))


@api.route("/algorithm", methods=["PUT"])
def set_algorithm():
    session = _session()
    session.set_algorithm(_payload().get("algorithm", ""))
    return jsonify(_selection_json(session))


@api.route("/route", methods=["POST"])
def compute_route():
    outcome = _session().compute_route(_payload().get("algorithm"))
    return jsonify(_outcome_json(outcome))


@api.route("/routes", methods=["GET"])
def route_history():
    return jsonify([route.to_dict() for route in _session().history])


@api.route("/reset", methods=["POST"])
def reset():
    session = _session()
    session.reset()
    return jsonify(_selection_json(session))
