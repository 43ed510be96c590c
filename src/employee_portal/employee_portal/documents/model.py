from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Uploader


@dataclass(frozen=True)
class EmployeeDocument:
    document_id: int
    employee_id: int
    category: str
    file_name: str
    stored_name: str
    uploaded_by: Uploader
    uploaded_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "document_id": self.document_id,
            "employee_id": self.employee_id,
            "category": self.category,
            "file_name": self.file_name,
            "uploaded_by": self.uploaded_by.value,
            "uploaded_at": self.uploaded_at.strftime("%Y-%m-%d %H:%M") if self.uploaded_at else None,
        }
