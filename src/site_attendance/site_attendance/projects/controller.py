from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    @app.route(f"{prefix}/projects", methods=["GET"], endpoint="list_projects")
    @json_endpoint("Failed to retrieve projects")
    def list_projects():
        return jsonify(container.project_service.list_projects()), 200

    @app.route(f"{prefix}/projects", methods=["POST"], endpoint="create_project")
    @json_endpoint("Failed to add project")
    def create_project():
        body = json_body(request)
        project_id = container.project_service.create_project(
            project_name=body.get("projectName"),
            project_overview=body.get("projectOverview"),
            workers=body.get("workers"),
        )
        return jsonify({"message": "Project created", "projectId": project_id}), 201

    @app.route(f"{prefix}/projects", methods=["PUT"], endpoint="replace_project_workers")
    @json_endpoint("Failed to add workers to project")
    def replace_workers():
        body = json_body(request)
        project_id = container.project_service.replace_workers(
            project_name=body.get("projectName"),
            worker_usernames=body.get("workerUsernames"),
        )
        return jsonify({"message": "Workers added successfully to the project", "projectId": project_id}), 200

    @app.route(f"{prefix}/projects", methods=["PATCH"], endpoint="update_project")
    @json_endpoint("Failed to update project")
    def update_project():
        body = json_body(request)
        project_id = container.project_service.update_details(
            project_name=body.get("projectName"),
            new_project_name=body.get("newProjectName"),
            project_overview=body.get("projectOverview"),
        )
        return jsonify({"message": "Project updated successfully", "projectId": project_id}), 200

    @app.route(f"{prefix}/projects/loadPageInfo", methods=["GET"], endpoint="load_project_page_info")
    @json_endpoint("Internal server error")
    def load_page_info():
        projects = container.project_service.projects_for_worker(username=request.args.get("username"))
        return jsonify(projects), 200

    @app.route(f"{prefix}/projects/deleteProject", methods=["DELETE"], endpoint="delete_project")
    @json_endpoint("Failed to delete project")
    def delete_project():
        body = json_body(request)
        project_id = container.project_service.delete_project(project_name=body.get("projectName"))
        return jsonify({"message": "Project deleted successfully", "projectId": project_id}), 200
