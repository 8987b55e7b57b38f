from __future__ import annotations

from flask import Flask, jsonify

from ..core.exceptions import ValidationError
from ..container import Container
from .model import Student


def _to_json(s: Student) -> dict:
    return {
        "id": s.student_id,
        "number": s.number,
        "name": s.name,
        "score": s.score,
        "is_leader": s.is_leader,
    }


def register(app: Flask, container: Container) -> None:
    @app.route(
        "/api/schools/<school_id>/classes/<class_name>/students",
        methods=["GET"],
        endpoint="api_class_students",
    )
    def api_class_students(school_id: str, class_name: str):
        try:
            roster = container.roster_service.get_roster(school_id=school_id, class_name=class_name)
            return jsonify({"success": True, "students": [_to_json(s) for s in roster]}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            return jsonify({"success": False, "message": "System error while loading students"}), 500

    @app.route("/api/students/<student_id>/leader", methods=["POST"], endpoint="api_student_toggle_leader")
    def api_student_toggle_leader(student_id: str):
        try:
            student = container.roster_service.toggle_leader(student_id)
            return jsonify({"success": True, "student": _to_json(student)}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            return jsonify({"success": False, "message": "System error while saving leader flag"}), 500
