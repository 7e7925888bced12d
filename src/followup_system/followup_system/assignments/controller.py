from __future__ import annotations

from flask import Flask, flash, redirect, render_template, session, url_for

from ..common.datetime_utils import now_local
from ..common.web import admin_required, flash_system_error, login_required, member_required, refresh_session_member
from ..core.enums import Role
from ..core.exceptions import AssignmentError, AuthorizationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        # Reload the account so approvals made since sign-in take effect.
        try:
            member = container.member_service.get_member(int(session["member_id"]))
        except ValidationError:
            session.clear()
            return redirect(url_for("login"))
        refresh_session_member(member)

        if member.role == Role.ADMIN:
            return redirect(url_for("admin_dashboard"))
        if not container.assignment_service.is_eligible(member):
            return render_template("pending.html", name=member.name)

        assigned = []
        try:
            assigned = container.assignment_service.list_for_member(member.member_id)
        except Exception as e:
            flash_system_error("loading your assignments", e)

        return render_template(
            "member/dashboard.html",
            name=member.name,
            assigned=assigned,
            now=now_local(),
            active_page="dashboard",
        )

    @app.route("/admin/assignments/generate", methods=["POST"], endpoint="generate_assignments")
    @admin_required
    def generate_assignments():
        try:
            result = container.assignment_service.generate(current_role=Role(session.get("role")))
            flash(f"Assignments generated! {result.created} assignments created.", "success")
            for gender, count in result.unassigned.items():
                flash(f"{count} {gender.value} people were not assigned: no approved {gender.value} members.", "warning")
        except (AssignmentError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception as e:
            flash_system_error("generating assignments", e)

        return redirect(url_for("admin_dashboard"))

    @app.route("/assignments/<int:assignment_id>/complete", methods=["POST"], endpoint="complete_assignment")
    @member_required
    def complete_assignment(assignment_id: int):
        try:
            container.assignment_service.complete(member_id=int(session["member_id"]), assignment_id=assignment_id)
            flash("Marked as done.", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "warning")
        except Exception as e:
            flash_system_error("completing the assignment", e)

        return redirect(url_for("dashboard"))

    @app.route("/assignments/<int:assignment_id>/undo", methods=["POST"], endpoint="undo_assignment")
    @member_required
    def undo_assignment(assignment_id: int):
        try:
            container.assignment_service.undo(member_id=int(session["member_id"]), assignment_id=assignment_id)
            flash("Completion undone.", "info")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "warning")
        except Exception as e:
            flash_system_error("undoing the completion", e)

        return redirect(url_for("dashboard"))
