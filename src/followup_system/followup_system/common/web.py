from __future__ import annotations

from functools import wraps

from flask import current_app, flash, redirect, render_template, session, url_for

from ..core.enums import Role


def _forbidden():
    current_user = {"name": session.get("name"), "role": session.get("role")}
    return render_template("403.html", current_user=current_user), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "member_id" not in session:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "member_id" not in session:
                return redirect(url_for("login"))
            if session.get("role") not in allowed:
                return _forbidden()
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = roles_required(Role.ADMIN)
member_required = roles_required(Role.MEMBER)


def flash_system_error(action: str, error: Exception) -> None:
    """Log an unexpected failure and tell the user the action did not go through."""
    current_app.logger.exception("System error while %s", action)
    if current_app.config.get("DEBUG", False):
        flash(f"System error while {action}: {error}", "danger")
    else:
        flash(f"System error while {action}.", "danger")


def refresh_session_member(member) -> None:
    session["member_id"] = member.member_id
    session["name"] = member.name
    session["role"] = member.role.value
    session["gender"] = member.gender.value
    session["approved"] = bool(member.approved)
