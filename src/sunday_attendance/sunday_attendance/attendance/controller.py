from __future__ import annotations

import io
import logging
import uuid

from flask import Flask, flash, jsonify, redirect, render_template, request, send_file, session, url_for

from ..core.exceptions import ValidationError
from ..container import Container
from ..users.guards import login_required

logger = logging.getLogger(__name__)


def _session_key() -> str:
    key = session.get("attendance_key")
    if not key:
        key = uuid.uuid4().hex
        session["attendance_key"] = key
    return key


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _back_to_page():
        return redirect(
            url_for(
                "attendance_page",
                q=request.form.get("q") or None,
                grade=request.form.get("grade") or None,
            )
        )

    @app.route("/", endpoint="index")
    @login_required
    def index():
        return redirect(url_for("attendance_page"))

    @app.route("/attendance", methods=["GET"], endpoint="attendance_page")
    @login_required
    def attendance_page():
        key = _session_key()
        service.set_filters(
            key,
            search_term=request.args.get("q", ""),
            grade_filter=request.args.get("grade", ""),
        )
        view = service.get_view(key)
        return render_template("attendance.html", name=session.get("name"), view=view, active_page="attendance")

    def _toggle(student_id: str, *, field: str):
        toggle = service.toggle_present if field == "present" else service.toggle_permission
        return toggle(_session_key(), student_id)

    @app.route("/attendance/<student_id>/present", methods=["POST"], endpoint="toggle_present")
    @login_required
    def toggle_present(student_id: str):
        try:
            _toggle(student_id, field="present")
        except ValidationError as e:
            flash(str(e), "warning")
        return _back_to_page()

    @app.route("/attendance/<student_id>/permission", methods=["POST"], endpoint="toggle_permission")
    @login_required
    def toggle_permission(student_id: str):
        try:
            _toggle(student_id, field="permission")
        except ValidationError as e:
            flash(str(e), "warning")
        return _back_to_page()

    @app.route("/api/attendance/<student_id>/<field>", methods=["POST"], endpoint="api_toggle")
    @login_required
    def api_toggle(student_id: str, field: str):
        if field not in {"present", "permission"}:
            return jsonify({"success": False, "message": f"Unknown field {field!r}"}), 404
        try:
            status = _toggle(student_id, field=field)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Toggle %s failed for %s", field, student_id)
            return jsonify({"success": False, "message": "System error while marking attendance"}), 500
        return jsonify({"success": True, "student_id": student_id, "status": status.value})

    @app.route("/attendance/submit", methods=["POST"], endpoint="submit_attendance")
    @login_required
    def submit_attendance():
        try:
            export_file = service.submit(_session_key())
        except ValidationError as e:
            flash(str(e), "warning")
            return _back_to_page()
        except Exception:
            logger.exception("Attendance export failed")
            flash("System error while exporting attendance", "danger")
            return _back_to_page()

        flash("Attendance submitted successfully!", "success")
        return send_file(
            io.BytesIO(export_file.content),
            mimetype=export_file.mimetype,
            as_attachment=True,
            download_name=export_file.filename,
        )
