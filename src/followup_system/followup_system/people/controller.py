from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import admin_required, flash_system_error, roles_required
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        search = request.args.get("q", "")
        stats = None
        people = []
        week_assignments = []
        try:
            stats = container.attendance_service.compute_stats()
            people = container.people_service.list_people(search=search)
            week_assignments = container.assignment_service.list_for_week()
        except Exception as e:
            flash_system_error("loading the dashboard", e)

        return render_template(
            "admin/dashboard.html",
            stats=stats,
            people=people,
            search=search,
            assignment_count=len(week_assignments),
            active_page="admin_dashboard",
        )

    def _person_form(person_id=None):
        person = None
        if person_id is not None:
            try:
                person = container.people_service.get_person(person_id)
            except ValidationError as e:
                flash(str(e), "danger")
                return redirect(url_for("admin_dashboard"))

        form = {
            "name": request.form.get("name", person.name if person else ""),
            "phone": request.form.get("phone", person.phone if person else ""),
            "gender": request.form.get("gender", person.gender.value if person else "male"),
        }
        errors: dict[str, str] = {}

        if request.method == "POST":
            _, errors = container.people_service.validate_form(**form)
            if not errors:
                try:
                    if person:
                        container.people_service.update_person(person_id=person.person_id, **form)
                        flash("Person updated.", "success")
                    else:
                        container.people_service.add_person(**form)
                        flash("Person added.", "success")
                    return redirect(url_for("admin_dashboard"))
                except ValidationError as e:
                    flash(str(e), "danger")
                except Exception as e:
                    flash_system_error("saving the person", e)

        return render_template(
            "admin/person_form.html",
            person=person,
            form=form,
            errors=errors,
            active_page="admin_dashboard",
        )

    @app.route("/admin/people/add", methods=["GET", "POST"], endpoint="add_person")
    @admin_required
    def add_person():
        return _person_form()

    @app.route("/admin/people/<int:person_id>/edit", methods=["GET", "POST"], endpoint="edit_person")
    @admin_required
    def edit_person(person_id: int):
        return _person_form(person_id)

    @app.route("/admin/people/<int:person_id>/delete", methods=["POST"], endpoint="delete_person")
    @admin_required
    def delete_person(person_id: int):
        try:
            container.people_service.delete_person(person_id)
            flash("Person deleted.", "success")
        except ValidationError as e:
            flash(str(e), "danger")
        except Exception as e:
            flash_system_error("deleting the person", e)

        return redirect(url_for("admin_dashboard"))

    @app.route("/people/<int:person_id>/present", methods=["POST"], endpoint="mark_present")
    @roles_required(Role.ADMIN, Role.MEMBER)
    def mark_present(person_id: int):
        is_admin = session.get("role") == Role.ADMIN.value
        try:
            if not is_admin:
                container.assignment_service.require_assigned(member_id=int(session["member_id"]), person_id=person_id)
            container.attendance_service.mark_present(person_id)
            flash("Attendance marked!", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception as e:
            flash_system_error("marking attendance", e)

        return redirect(url_for("admin_dashboard" if is_admin else "dashboard"))
