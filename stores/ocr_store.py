"""
OCR Central Store - scanned documents and the modules their data went to
TC-SAFE: OCR data must be validated by the user before it is applied.
No automatic decisions, no regulatory validation.
"""

import logging
import re
from typing import Any, Dict, List, Optional
from models.ocr_document import OcrDocument, OcrDocumentType
from stores.data_sources import generate_id
from stores.domain_store import merge_changes, require_owner

logger = logging.getLogger(__name__)


def generate_duplicate_key(registration: str, report_date: str, amo: str) -> str:
    """Anti-duplicate key for maintenance reports"""
    key = f"{registration.lower()}-{report_date}-{amo.lower()}"
    return re.sub(r"\s+", "", key)


class OcrStore:
    def __init__(self):
        self.documents: List[OcrDocument] = []

    def add_document(self, document: Dict[str, Any]) -> str:
        doc = OcrDocument(**{**document, "id": generate_id()})

        if doc.type == OcrDocumentType.MAINTENANCE_REPORT and doc.maintenance_data:
            data = doc.maintenance_data
            if data.registration and data.report_date and data.amo:
                doc.duplicate_key = generate_duplicate_key(data.registration, data.report_date, data.amo)

        self.documents = [doc] + self.documents
        return doc.id

    def update_document(self, document_id: str, **changes):
        self.documents = [
            merge_changes(doc, changes) if doc.id == document_id else doc
            for doc in self.documents
        ]

    def delete_document(self, document_id: str):
        self.documents = [doc for doc in self.documents if doc.id != document_id]

    def get_documents_by_aircraft(self, aircraft_id: str) -> List[OcrDocument]:
        owner = require_owner(aircraft_id)
        return [doc for doc in self.documents if doc.aircraft_id == owner]

    def get_document_by_id(self, document_id: str) -> Optional[OcrDocument]:
        return next((doc for doc in self.documents if doc.id == document_id), None)

    def check_duplicate(self, registration: str, report_date: str, amo: str) -> bool:
        key = generate_duplicate_key(registration, report_date, amo)
        return any(doc.duplicate_key == key for doc in self.documents)

    def mark_as_applied(self, document_id: str, modules: List[str]):
        """Mark validated and record which modules received the data"""
        updated = []
        for doc in self.documents:
            if doc.id == document_id:
                applied = list(dict.fromkeys(doc.applied_to_modules + list(modules)))
                doc = doc.model_copy(update={"validated": True, "applied_to_modules": applied})
            updated.append(doc)
        self.documents = updated


class NullOcrStore:
    """Defaults used when no OcrProvider is mounted"""

    def __init__(self):
        self.documents: List[OcrDocument] = []

    def add_document(self, document: Dict[str, Any]) -> str:
        logger.warning("OcrProvider not found")
        return ""

    def update_document(self, document_id: str, **changes):
        logger.warning("OcrProvider not found")

    def delete_document(self, document_id: str):
        logger.warning("OcrProvider not found")

    def get_documents_by_aircraft(self, aircraft_id: str) -> List[OcrDocument]:
        return []

    def get_document_by_id(self, document_id: str) -> None:
        return None

    def check_duplicate(self, registration: str, report_date: str, amo: str) -> bool:
        return False

    def mark_as_applied(self, document_id: str, modules: List[str]):
        logger.warning("OcrProvider not found")
