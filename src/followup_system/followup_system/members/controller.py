from __future__ import annotations

from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import admin_required, flash_system_error, refresh_session_member
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "member_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_member = container.auth_service.authenticate(username, password)

                session.permanent = bool(remember)
                app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
                refresh_session_member(s_member)

                app.logger.info("Member %s signed in as %s", s_member.member_id, s_member.role.value)
                flash("Signed in successfully.", "success")
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                flash_system_error("signing in", e)

        return render_template("login.html")

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        if "member_id" in session:
            return redirect(url_for("dashboard"))

        form = {
            "name": request.form.get("name", ""),
            "username": request.form.get("username", ""),
            "gender": request.form.get("gender", "male"),
        }
        if request.method == "POST":
            try:
                container.auth_service.sign_up(
                    name=form["name"],
                    username=form["username"],
                    password=request.form.get("password", ""),
                    gender=form["gender"],
                )
                flash("Account created. An administrator needs to approve it before you get assignments.", "success")
                return redirect(url_for("login"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception as e:
                flash_system_error("creating the account", e)

        return render_template("signup.html", form=form)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("login"))

    @app.route("/admin/members", endpoint="admin_members")
    @admin_required
    def admin_members():
        return render_template(
            "admin/members.html",
            pending=container.member_service.list_pending(),
            members=container.member_service.list_members(),
            active_page="admin_members",
        )

    @app.route("/admin/members/<int:member_id>/approve", methods=["POST"], endpoint="approve_member")
    @admin_required
    def approve_member(member_id: int):
        try:
            container.member_service.approve(current_role=Role(session.get("role")), member_id=member_id)
            flash("Member approved.", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception as e:
            flash_system_error("approving the member", e)

        return redirect(url_for("admin_members"))

    @app.route("/admin/members/<int:member_id>/reject", methods=["POST"], endpoint="reject_member")
    @admin_required
    def reject_member(member_id: int):
        try:
            container.member_service.reject(current_role=Role(session.get("role")), member_id=member_id)
            flash("Member moved back to pending.", "info")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception as e:
            flash_system_error("rejecting the member", e)

        return redirect(url_for("admin_members"))
