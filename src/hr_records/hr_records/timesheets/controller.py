from __future__ import annotations

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..core.enums import TimesheetStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def _form_fields() -> dict:
    return {
        "work_date": request.form.get("work_date"),
        "start_time": request.form.get("start_time"),
        "end_time": request.form.get("end_time"),
        "hours_worked": request.form.get("hours_worked"),
        "notes": request.form.get("notes"),
        "status": request.form.get("status"),
    }


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service

    @app.route("/timesheets", endpoint="timesheets_list")
    def timesheets_list():
        rows = service.list_timesheets()
        return render_template("timesheets/list.html", rows=rows, active_page="timesheets")

    @app.route("/timesheets/new", methods=["GET", "POST"], endpoint="timesheet_new")
    def timesheet_new():
        status_code = 200
        if request.method == "POST":
            try:
                service.create_timesheet(employee_id=request.form.get("employee_id"), **_form_fields())
                flash("Timesheet created.", "success")
                return redirect(url_for("timesheets_list"))
            except ValidationError as e:
                flash(str(e), "danger")
                status_code = 400
            except Exception:
                app.logger.exception("Failed to create timesheet")
                flash("System error while creating timesheet", "danger")
                status_code = 500

        employees = container.employee_service.list_active()
        return (
            render_template(
                "timesheets/new.html",
                employees=employees,
                statuses=list(TimesheetStatus),
                form=request.form,
                active_page="timesheets",
            ),
            status_code,
        )

    @app.route("/timesheets/<int:timesheet_id>", methods=["GET", "POST"], endpoint="timesheet_detail")
    def timesheet_detail(timesheet_id: int):
        status_code = 200
        if request.method == "POST":
            try:
                service.update_timesheet(timesheet_id, **_form_fields())
                flash("Timesheet updated.", "success")
                return redirect(url_for("timesheets_list"))
            except NotFoundError:
                abort(404)
            except ValidationError as e:
                flash(str(e), "danger")
                status_code = 400
            except Exception:
                app.logger.exception("Failed to update timesheet %s", timesheet_id)
                flash("System error while updating timesheet", "danger")
                status_code = 500

        try:
            timesheet = service.get_timesheet(timesheet_id)
        except NotFoundError:
            abort(404)

        return (
            render_template(
                "timesheets/detail.html",
                timesheet=timesheet,
                statuses=list(TimesheetStatus),
                active_page="timesheets",
            ),
            status_code,
        )
