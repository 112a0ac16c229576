from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    @app.route(f"{prefix}/auth", methods=["POST"], endpoint="auth_login")
    @json_endpoint("Server error. Please try again later.", message_key="message")
    def login():
        body = json_body(request)
        container.auth_service.login(
            username=body.get("username"),
            password=body.get("password"),
            role=body.get("role"),
        )
        return jsonify({"message": "Login successful"}), 200
