from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..auth.web import admin_required, current_identity, employee_required
from ..container import Container
from ..core.enums import Uploader
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/documents", methods=["GET", "POST"], endpoint="employee_documents")
    @employee_required
    def employee_documents():
        employee_id = current_identity().employee_id
        if request.method == "POST":
            document_id = container.document_service.upload(
                employee_id=employee_id,
                file=request.files.get("file"),
                category=request.form.get("category") or "",
                uploaded_by=Uploader.EMPLOYEE,
            )
            return jsonify({"success": True, "message": "Document uploaded", "document_id": document_id}), 201

        docs = container.document_service.list_for_employee(employee_id)
        return jsonify({"success": True, "documents": [d.to_dict() for d in docs]})

    @app.route("/employee/documents/<int:document_id>", methods=["GET", "DELETE"], endpoint="employee_document")
    @employee_required
    def employee_document(document_id: int):
        employee_id = current_identity().employee_id
        if request.method == "DELETE":
            container.document_service.delete(document_id=document_id, employee_id=employee_id)
            return jsonify({"success": True, "message": "Document deleted"})

        doc = container.document_service.get(document_id=document_id, employee_id=employee_id)
        path = container.document_service.file_path(doc)
        if not path.exists():
            raise ValidationError("Document file is missing")
        return send_file(path, mimetype="application/pdf", download_name=doc.file_name)

    @app.route("/admin/employees/<int:employee_id>/documents", methods=["GET", "POST"], endpoint="admin_employee_documents")
    @admin_required
    def admin_employee_documents(employee_id: int):
        if request.method == "POST":
            document_id = container.document_service.upload(
                employee_id=employee_id,
                file=request.files.get("file"),
                category=request.form.get("category") or "",
                uploaded_by=Uploader.ADMIN,
            )
            return jsonify({"success": True, "message": "Document uploaded", "document_id": document_id}), 201

        docs = container.document_service.list_for_employee(employee_id)
        return jsonify({"success": True, "documents": [d.to_dict() for d in docs]})

    @app.route("/admin/documents/<int:document_id>", methods=["DELETE"], endpoint="admin_delete_document")
    @admin_required
    def admin_delete_document(document_id: int):
        container.document_service.delete(document_id=document_id)
        return jsonify({"success": True, "message": "Document deleted"})
