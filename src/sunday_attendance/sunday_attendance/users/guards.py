from __future__ import annotations

from functools import wraps

from flask import flash, jsonify, redirect, request, session, url_for


def login_required(view):
    """Redirect anonymous visitors to the sign-in page (JSON routes get 401)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            if request.path.startswith("/api/"):
                return jsonify({"success": False, "message": "Authentication required"}), 401
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("signin", next=request.path))
        return view(*args, **kwargs)

    return wrapper
