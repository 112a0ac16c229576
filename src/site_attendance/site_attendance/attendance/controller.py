from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    @app.route(f"{prefix}/attendance", methods=["GET"], endpoint="list_attendance")
    @json_endpoint("Failed to retrieve attendance records")
    def list_attendance():
        records = container.attendance_service.list_for_worker(worker_id=request.args.get("workerID"))
        return jsonify(records), 200

    @app.route(f"{prefix}/attendance", methods=["POST"], endpoint="mark_attendance")
    @json_endpoint("Failed to add/update attendance entry")
    def mark_attendance():
        body = json_body(request)
        mark = container.attendance_service.mark(
            worker_id=body.get("workerID"),
            project_name=body.get("projectName"),
            date=body.get("Date"),
            work_description=body.get("workDescription"),
            image_path=body.get("imagePath"),
        )
        message = "Attendance added successfully" if mark.created else "Attendance updated successfully"
        return jsonify({"message": message, "workerId": mark.worker_id}), 200
