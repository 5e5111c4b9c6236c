from __future__ import annotations

from flask import Flask, abort, flash, jsonify, redirect, render_template, request, send_from_directory, url_for

from ..core.exceptions import NotFoundError, RecordValidationError, ValidationError
from ..core.constants import COUNTRY_CODES
from ..container import Container
from .service import form_values, split_phone

_TRUTHY = {"1", "true", "on", "yes"}


def _id_document_selected() -> bool:
    upload = request.files.get("id_document")
    return bool(upload and upload.filename)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _render_new(values: dict, problems=(), status: int = 200):
        preview = service.preview(values, has_id_document=_id_document_selected())
        return (
            render_template(
                "employees/new.html",
                values=values,
                problems=list(problems),
                compliance=preview.compliance,
                country_codes=COUNTRY_CODES,
                active_page="employees",
            ),
            status,
        )

    @app.route("/employees", endpoint="employees_list")
    def employees_list():
        listing = service.list_employees(
            sort_by=request.args.get("sortBy"),
            department=request.args.get("department"),
            active=request.args.get("active"),
            search=request.args.get("search"),
        )
        return render_template("employees/list.html", listing=listing, active_page="employees")

    @app.route("/employees/new", methods=["GET", "POST"], endpoint="employee_new")
    def employee_new():
        if request.method == "POST":
            try:
                employee_id = service.create_employee(request.form, request.files)
                flash("Employee created.", "success")
                return redirect(url_for("employee_detail", employee_id=employee_id))
            except RecordValidationError as e:
                return _render_new(e.values, e.problems, status=400)
            except ValidationError as e:
                flash(str(e), "danger")
                return _render_new(form_values(request.form), status=400)
            except Exception:
                app.logger.exception("Failed to create employee")
                flash("System error while creating employee", "danger")
                return _render_new(form_values(request.form), status=500)

        return _render_new(form_values({}))

    @app.route("/employees/<int:employee_id>", methods=["GET", "POST"], endpoint="employee_detail")
    def employee_detail(employee_id: int):
        if request.method == "POST":
            action_type = request.form.get("action_type") or request.form.get("actionType") or ""
            try:
                if action_type == "edit":
                    service.update_personal(employee_id, request.form)
                    flash("Personal information updated.", "success")
                elif action_type == "editProfession":
                    service.update_profession(employee_id, request.form)
                    flash("Profession updated.", "success")
                elif action_type == "inactive":
                    service.mark_inactive(employee_id, request.form.get("inactivity_reason"))
                    flash("Employee marked inactive.", "success")
                    return redirect(url_for("employees_list"))
                else:
                    flash("Unknown action", "danger")
            except NotFoundError:
                abort(404)
            except RecordValidationError as e:
                for problem in e.problems:
                    flash(problem.message, "danger")
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Failed to update employee %s", employee_id)
                flash("System error while updating employee", "danger")

            return redirect(url_for("employee_detail", employee_id=employee_id))

        try:
            profile = service.get_profile(employee_id)
        except NotFoundError:
            abort(404)

        country_code, phone_number = split_phone(profile.employee.phone)
        return render_template(
            "employees/detail.html",
            profile=profile,
            compliance=profile.compliance,
            country_code=country_code,
            phone_number=phone_number,
            country_codes=COUNTRY_CODES,
            active_page="employees",
        )

    @app.route("/api/employees/validate", methods=["POST"], endpoint="employee_validate")
    def employee_validate():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = request.form
        has_id = str(data.get("has_id_document", "")).strip().lower() in _TRUTHY or _id_document_selected()

        fields = {k: (v if isinstance(v, str) or v is None else str(v)) for k, v in dict(data).items()}
        preview = service.preview(fields, has_id_document=has_id)
        return jsonify(preview.to_dict())

    @app.route("/uploads/<path:filename>", endpoint="uploaded_file")
    def uploaded_file(filename: str):
        return send_from_directory(container.file_store.uploads_dir, filename)
