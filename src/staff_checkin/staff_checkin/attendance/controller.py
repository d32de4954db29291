from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import DomainError
from ..container import Container
from .service import export_filename, filters_from_mapping, to_json_row


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/staff/list", methods=["POST"], endpoint="api_staff_attendance_list")
    def api_staff_attendance_list():
        """Body: {departmentFilter?, staffNameOrIdFilter?, dateFilter?}"""
        data = request.get_json(silent=True)
        filters = filters_from_mapping(data if isinstance(data, dict) else None)
        try:
            rows = container.history_service.list_records(**filters)
        except DomainError as e:
            return jsonify({"error": str(e)}), e.category.http_status
        return jsonify([to_json_row(r) for r in rows]), 200

    @app.route("/api/attendance/staff/<staff_id>/history", methods=["GET"], endpoint="api_staff_attendance_history")
    def api_staff_attendance_history(staff_id: str):
        try:
            rows = container.history_service.history_for_staff(staff_id)
        except DomainError as e:
            return jsonify({"error": str(e)}), e.category.http_status
        return jsonify([to_json_row(r) for r in rows]), 200

    @app.route("/api/attendance/staff/export.csv", methods=["GET"], endpoint="api_staff_attendance_csv")
    def api_staff_attendance_csv():
        filters = filters_from_mapping(request.args.to_dict())
        try:
            rows = container.history_service.list_records(**filters)
        except DomainError as e:
            return jsonify({"error": str(e)}), e.category.http_status

        filename = export_filename(**filters)
        return app.response_class(
            container.history_service.export_csv(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
