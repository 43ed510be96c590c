from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Optional, Sequence

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..common.validators import require_non_empty
from ..core.constants import ALLOWED_DOCUMENT_EXTENSIONS
from ..core.enums import Uploader
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import EmployeeDocument
from .repository import DocumentRepository

logger = logging.getLogger(__name__)


def allowed_file(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_DOCUMENT_EXTENSIONS


class DocumentService:
    """Stores uploaded files under ``upload_folder`` and their metadata in the repository."""

    def __init__(self, documents: DocumentRepository, employees: EmployeeRepository, *, upload_folder: str | Path):
        self._documents = documents
        self._employees = employees
        self._folder = Path(upload_folder)

    def upload(
        self,
        *,
        employee_id: int,
        file: Optional[FileStorage],
        category: str,
        uploaded_by: Uploader,
    ) -> int:
        category = require_non_empty(category, "Category")
        if file is None or not file.filename:
            raise ValidationError("Please choose a file")

        file_name = secure_filename(file.filename)
        if not file_name or not allowed_file(file_name):
            raise ValidationError("Only PDF files are allowed")
        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Employee does not exist")

        stored_name = f"{int(employee_id)}_{uuid.uuid4().hex}_{file_name}"
        self._folder.mkdir(parents=True, exist_ok=True)
        file.save(str(self._folder / stored_name))

        try:
            return self._documents.create_document(
                employee_id=int(employee_id),
                category=category,
                file_name=file_name,
                stored_name=stored_name,
                uploaded_by=uploaded_by,
            )
        except Exception:
            (self._folder / stored_name).unlink(missing_ok=True)
            raise

    def list_for_employee(self, employee_id: int) -> Sequence[EmployeeDocument]:
        return self._documents.list_for_employee(int(employee_id))

    def get(self, *, document_id: int, employee_id: Optional[int] = None) -> EmployeeDocument:
        """Fetch a document. With ``employee_id`` the caller may only see their own."""

        doc = self._documents.get_document(document_id=int(document_id))
        if not doc:
            raise ValidationError("Document does not exist")
        if employee_id is not None and doc.employee_id != int(employee_id):
            raise AuthorizationError()
        return doc

    def file_path(self, doc: EmployeeDocument) -> Path:
        return self._folder / doc.stored_name

    def delete(self, *, document_id: int, employee_id: Optional[int] = None) -> None:
        doc = self.get(document_id=document_id, employee_id=employee_id)
        self._documents.delete_document(document_id=doc.document_id)
        path = self.file_path(doc)
        if path.exists():
            path.unlink()
        else:
            logger.warning("Document %s had no file on disk", doc.document_id)
