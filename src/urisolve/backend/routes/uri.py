"""URI routes — /api/uri/*."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, abort, current_app, jsonify, request

from urisolve.backend.services.uri_service import UriService

uri_bp = Blueprint("uri", __name__)


def _json_body() -> dict[str, Any]:
    data = request.get_json(force=True)
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data


def _string_field(data: dict[str, Any], name: str) -> str:
    value = data.get(name)
    if not isinstance(value, str):
        abort(400, description=f"Missing or non-string '{name}'")
    return value


@uri_bp.route("/resolve", methods=["POST"])
def resolve():
    """Resolve one reference, or a list of references, against a base."""
    data = _json_body()
    base = data.get("base")
    if base is None:
        base = current_app.config.get("DEFAULT_BASE", "")
    if not isinstance(base, str):
        return jsonify({"error": "'base' must be a string"}), 400

    svc = UriService()

    if "references" in data:
        references = data["references"]
        if not isinstance(references, list) or not all(
            isinstance(ref, str) for ref in references
        ):
            return jsonify({"error": "'references' must be a list of strings"}), 400
        limit = current_app.config.get("MAX_REFERENCES", 1000)
        if len(references) > limit:
            return jsonify({
                "error": f"Too many references ({len(references)} > {limit})",
            }), 400
        results = svc.resolve_all(base, references)
        return jsonify({
            "results": [r.model_dump() for r in results],
            "count": len(results),
        })

    if "reference" not in data:
        return jsonify({"error": "Missing 'reference' or 'references'"}), 400
    reference = _string_field(data, "reference")
    return jsonify(svc.resolve(base, reference).model_dump())


@uri_bp.route("/is-absolute", methods=["POST"])
def is_absolute():
    """Report whether a URI starts with a scheme."""
    uri = _string_field(_json_body(), "uri")
    return jsonify({"uri": uri, "is_absolute": UriService().is_absolute(uri)})


@uri_bp.route("/normalize", methods=["POST"])
def normalize():
    """Remove dot segments from a path."""
    path = _string_field(_json_body(), "path")
    return jsonify({"path": path, "normalized": UriService().normalize(path)})


@uri_bp.route("/components", methods=["POST"])
def components():
    """Split a URI reference into its components."""
    uri = _string_field(_json_body(), "uri")
    return jsonify(UriService().components(uri).model_dump())


@uri_bp.route("/strip-param", methods=["POST"])
def strip_param():
    """Remove a query parameter from a URI."""
    data = _json_body()
    uri = _string_field(data, "uri")
    name = _string_field(data, "name")
    return jsonify({"uri": uri, "result": UriService().strip_param(uri, name)})
