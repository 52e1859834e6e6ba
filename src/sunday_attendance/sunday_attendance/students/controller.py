from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..users.guards import login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    @login_required
    def api_students():
        try:
            students = container.students_repo.list_all()
        except Exception:
            logger.exception("Could not list students")
            return jsonify({"success": False, "message": "System error while loading students"}), 500
        return jsonify([s.to_payload() for s in students])
