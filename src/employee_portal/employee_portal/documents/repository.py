from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Uploader
from .model import EmployeeDocument


class DocumentRepository(Protocol):
    def create_document(
        self,
        *,
        employee_id: int,
        category: str,
        file_name: str,
        stored_name: str,
        uploaded_by: Uploader,
    ) -> int:
        raise NotImplementedError

    def get_document(self, *, document_id: int) -> Optional[EmployeeDocument]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[EmployeeDocument]:
        raise NotImplementedError

    def delete_document(self, *, document_id: int) -> bool:
        raise NotImplementedError
