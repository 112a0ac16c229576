from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_endpoint
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    @app.route(f"{prefix}/backup/", methods=["GET"], endpoint="backup_dump", strict_slashes=False)
    @json_endpoint("Failed to retrieve database")
    def dump():
        return jsonify(container.backup_service.snapshot()), 200
