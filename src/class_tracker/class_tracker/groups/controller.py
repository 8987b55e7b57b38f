from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _exclusions(data: dict) -> str:
        text = data.get("exclusions") or ""
        if not isinstance(text, str):
            raise ValidationError("exclusions must be text, one rule per line")
        return text

    def _num_groups(data: dict):
        value = data.get("num_groups", data.get("numGroups"))
        return container.grouping_service.default_num_groups if value is None else value

    @app.route("/api/groups", methods=["POST"], endpoint="api_groups_create")
    def api_groups_create():
        """Group an ad-hoc roster sent in the request body."""
        try:
            data = _payload()
            roster = container.roster_service.parse_payload(data.get("students", []))
            result = container.grouping_service.create_groups(
                roster=roster,
                num_groups=_num_groups(data),
                exclusion_text=_exclusions(data),
            )
            return jsonify({"success": True, **container.grouping_service.to_ui(result)}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            return jsonify({"success": False, "message": "System error while creating groups"}), 500

    @app.route(
        "/api/schools/<school_id>/classes/<class_name>/groups",
        methods=["POST"],
        endpoint="api_class_groups_create",
    )
    def api_class_groups_create(school_id: str, class_name: str):
        try:
            data = _payload()
            result = container.grouping_service.create_groups_for_class(
                school_id=school_id,
                class_name=class_name,
                num_groups=_num_groups(data),
                exclusion_text=_exclusions(data),
            )
            return jsonify({"success": True, **container.grouping_service.to_ui(result)}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            return jsonify({"success": False, "message": "System error while creating groups"}), 500
