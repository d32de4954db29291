from __future__ import annotations

import logging

from flask import Flask, Response, jsonify, request

from ..core.exceptions import DomainError, PersistenceError
from ..container import Container
from .qr import decode_image, render_png

logger = logging.getLogger(__name__)

CHECK_IN_API = "/api/attendance/staff/check-in"


def register(app: Flask, container: Container) -> None:
    def _error_response(e: DomainError):
        return jsonify({"error": str(e)}), e.category.http_status

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def _run_check_in(staff_id, token):
        try:
            result = container.checkin_service.check_in(staff_id, token)
            return jsonify({"message": result.message}), 200
        except PersistenceError as e:
            logger.exception("Check-in failed to reach the attendance store for %r", staff_id)
            return _error_response(e)
        except DomainError as e:
            logger.warning("Check-in rejected for %r: %s", staff_id, e)
            return _error_response(e)
        except Exception as e:
            logger.exception("Unexpected error during check-in")
            return jsonify({"error": str(e) or "Unknown error"}), 500

    def _request_origin() -> str:
        return container.public_origin or request.host_url.rstrip("/")

    @app.route(CHECK_IN_API, methods=["POST"], endpoint="api_staff_check_in")
    def api_staff_check_in():
        """Body: {staffId, token}. Records a 'Present' row for today unless one exists."""
        data = _json_body()
        return _run_check_in(data.get("staffId"), data.get("token"))

    @app.route("/staff/attendance/check-in", methods=["GET", "POST"], endpoint="staff_check_in_link")
    def staff_check_in_link():
        """Target of the URL embedded in the scan payload.

        GET and HEAD only echo the decoded link back; a POST records the check-in.
        """
        decoded = container.kiosk.decode_payload(request.url)
        if request.method == "POST":
            data = _json_body()
            return _run_check_in(data.get("staffId") or decoded.staff_id, data.get("token") or decoded.token)
        return jsonify({"token": decoded.token, "staffId": decoded.staff_id, "submitTo": CHECK_IN_API}), 200

    @app.route("/api/attendance/staff/qr", methods=["GET"], endpoint="api_staff_qr")
    def api_staff_qr():
        code = container.kiosk.issue_token(request.args.get("staffId") or None, origin=_request_origin())
        return jsonify(
            {
                "token": str(code.token),
                "expiresAt": code.expires_at_ms,
                "secondsLeft": code.seconds_left(),
                "status": code.status_label(),
                "payload": code.payload.to_dict(),
                "qrValue": code.payload.to_json(),
            }
        ), 201

    @app.route("/api/attendance/staff/qr.png", methods=["GET"], endpoint="api_staff_qr_png")
    def api_staff_qr_png():
        code = container.kiosk.issue_token(request.args.get("staffId") or None, origin=_request_origin())
        return Response(
            render_png(code.payload.to_json()),
            mimetype="image/png",
            headers={"Cache-Control": "no-store"},
        )

    @app.route("/api/attendance/staff/decode", methods=["POST"], endpoint="api_staff_decode")
    def api_staff_decode():
        """Accepts JSON {text} or a multipart upload field `image`."""
        if "image" in request.files:
            try:
                text = decode_image(request.files["image"].stream)
            except Exception:
                logger.exception("Failed to read QR image")
                return jsonify({"error": "Could not read image"}), 400
            if not text:
                return jsonify({"error": "No QR code found in image"}), 400
        else:
            data = request.get_json(silent=True)
            text = data.get("text") if isinstance(data, dict) else None

        decoded = container.kiosk.decode_payload(text)
        return jsonify({"token": decoded.token, "staffId": decoded.staff_id}), 200
