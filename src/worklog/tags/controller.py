from __future__ import annotations

from flask import Flask

from ..common.http import json_body, make_api_view, require_id
from ..common.responses import ok
from ..common.validators import parse
from ..container import Container
from .schemas import TagCreate, TagUpdate


def register(app: Flask, container: Container) -> None:
    api_view = make_api_view(container.perf)

    @app.route("/api/tags", methods=["GET"], endpoint="list_tags")
    @api_view("Failed to fetch tags")
    def list_tags():
        return ok([t.to_dict() for t in container.tag_service.list_all()])

    @app.route("/api/tags", methods=["POST"], endpoint="create_tag")
    @api_view("Failed to create tag")
    def create_tag():
        tag = container.tag_service.create(parse(TagCreate, json_body()))
        return ok(tag.to_dict(), message="Tag created successfully")

    @app.route("/api/tags/<raw_id>", methods=["GET"], endpoint="get_tag")
    @api_view("Failed to fetch tag")
    def get_tag(raw_id: str):
        return ok(container.tag_service.get(require_id(raw_id, "tag")).to_dict())

    @app.route("/api/tags/<raw_id>", methods=["PUT"], endpoint="update_tag")
    @api_view("Failed to update tag")
    def update_tag(raw_id: str):
        tag_id = require_id(raw_id, "tag")
        tag = container.tag_service.update(tag_id, parse(TagUpdate, json_body()))
        return ok(tag.to_dict(), message="Tag updated successfully")

    @app.route("/api/tags/<raw_id>", methods=["DELETE"], endpoint="delete_tag")
    @api_view("Failed to delete tag")
    def delete_tag(raw_id: str):
        container.tag_service.delete(require_id(raw_id, "tag"))
        return ok(message="Tag deleted successfully")
