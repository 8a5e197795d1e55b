from __future__ import annotations

from flask import Flask, jsonify, redirect, render_template, request, url_for

from ..common.validators import require_non_empty
from ..core.enums import ActionType
from ..core.exceptions import ValidationError
from ..container import Container
from . import report
from .model import Action
from .service import RosterController


def register(app: Flask, container: Container) -> None:
    def _controller() -> RosterController:
        controller = container.roster_controller()
        controller.load()
        return controller

    def _snapshot(controller: RosterController) -> dict:
        return {
            "students": report.to_rows(controller.roster),
            "counts": controller.counts.to_dict(),
        }

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        controller = _controller()
        controller.set_pending_name(request.args.get("name"))
        return render_template(
            "index.html",
            rows=report.to_rows(controller.roster),
            counts=controller.counts,
            final_table=report.format_table(controller.roster),
            pending_name=controller.pending_name,
        )

    @app.route("/students", methods=["POST"], endpoint="add_student")
    def add_student():
        controller = _controller()
        controller.set_pending_name(request.form.get("name"))
        if not controller.submit_add():
            # rejected: hand the typed text back to the form
            return redirect(url_for("index", name=controller.pending_name or None))
        return redirect(url_for("index"))

    @app.route("/students/<int:student_id>/present", methods=["POST"], endpoint="mark_present")
    def mark_present(student_id: int):
        _controller().mark_present(student_id)
        return redirect(url_for("index"))

    @app.route("/students/<int:student_id>/absent", methods=["POST"], endpoint="mark_absent")
    def mark_absent(student_id: int):
        _controller().mark_absent(student_id)
        return redirect(url_for("index"))

    @app.route("/students/<int:student_id>/remove", methods=["POST"], endpoint="remove_student")
    def remove_student(student_id: int):
        _controller().remove(student_id)
        return redirect(url_for("index"))

    @app.route("/reset", methods=["POST"], endpoint="reset")
    def reset():
        _controller().reset()
        return redirect(url_for("index"))

    # ===== JSON API =====

    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        return jsonify(_snapshot(_controller())), 200

    @app.route("/api/actions", methods=["POST"], endpoint="api_actions")
    def api_actions():
        """Dispatch a raw action; unknown action types leave the roster unchanged."""

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Expected a JSON object"}), 400

        action = Action.from_dict(data)
        controller = _controller()
        try:
            if action.type == ActionType.ADD_STUDENT:
                raw_name = action.payload.get("name")
                name = require_non_empty(raw_name if isinstance(raw_name, str) else None, "Student name")
                controller.submit_add(name)
            else:
                controller.dispatch(action)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, **_snapshot(controller)}), 200

    # ===== EXPORTS =====

    @app.route("/attendance.txt", methods=["GET"], endpoint="attendance_txt")
    def attendance_txt():
        body = report.format_table(_controller().roster)
        return app.response_class(body, mimetype="text/plain")

    @app.route("/attendance.csv", methods=["GET"], endpoint="attendance_csv")
    def attendance_csv():
        return app.response_class(
            report.write_csv(_controller().roster),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=attendance.csv"},
        )
