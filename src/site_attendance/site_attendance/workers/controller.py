from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    @app.route(f"{prefix}/workers", methods=["GET"], endpoint="list_workers")
    @json_endpoint("Failed to retrieve workers")
    def list_workers():
        return jsonify(container.worker_service.list_workers()), 200

    @app.route(f"{prefix}/workers", methods=["POST"], endpoint="create_worker")
    @json_endpoint("Failed to add worker")
    def create_worker():
        body = json_body(request)
        worker_id = container.worker_service.create_worker(
            username=body.get("username"),
            password=body.get("password"),
            role=body.get("role"),
            full_name=body.get("fullName"),
            contact_number=body.get("contactNumber"),
            dob=body.get("dob"),
            doj=body.get("doj"),
            address=body.get("address"),
        )
        return jsonify({"message": "Worker added successfully", "workerId": worker_id}), 201

    @app.route(f"{prefix}/workers/deleteWorker", methods=["DELETE"], endpoint="delete_worker")
    @json_endpoint("Failed to delete worker")
    def delete_worker():
        body = json_body(request)
        container.worker_service.delete_worker(username=body.get("username"))
        return jsonify({"message": "Worker deleted successfully"}), 200
