from __future__ import annotations

import logging
import uuid
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..core.exceptions import AuthenticationError
from ..container import Container

logger = logging.getLogger(__name__)


def _safe_next(target: str | None) -> str | None:
    # Only same-site relative paths.
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/signin", methods=["GET", "POST"], endpoint="signin")
    def signin():
        if "user_id" in session:
            return redirect(url_for("attendance_page"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(username, password)
            except AuthenticationError as e:
                flash(str(e), "danger")
                return render_template("signin.html"), 401
            except Exception:
                logger.exception("Sign-in failed for %r", username)
                flash("System error while signing in", "danger")
                return render_template("signin.html"), 500

            session.clear()
            session.permanent = bool(remember)
            app.permanent_session_lifetime = timedelta(days=7)
            session["user_id"] = s_user.user_id
            session["name"] = s_user.full_name
            session["role"] = s_user.role.value
            session["attendance_key"] = uuid.uuid4().hex

            flash("Signed in successfully!", "success")
            return redirect(_safe_next(request.args.get("next")) or url_for("attendance_page"))

        return render_template("signin.html")

    @app.route("/signout", endpoint="signout")
    def signout():
        key = session.get("attendance_key")
        if key:
            container.attendance_service.discard(key)
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("signin"))
