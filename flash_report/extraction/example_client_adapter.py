"""Offline extraction client.

Returns a fixed, valid incident record so the whole upload flow can run
without network access. Register new providers in ExtractorFactory.
"""

import json
from typing import ClassVar

from flash_report.extraction.client_base import BaseExtractionClient
from flash_report.extraction.models import DocumentPart


class ExampleClientAdapter(BaseExtractionClient):
    """Adapter that answers every request with the same canned JSON."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "title": "حفاظتی واقعہ: ٹرک الٹ گیا",
        "operation": "لولو گونڈو",
        "department": "کان کنی",
        "location": "ویسٹ پٹ ہال روڈ",
        "company": "بیرک",
        "date": "12 مارچ 2024",
        "time": "صبح 10:30",
        "classification": "میڈیکل ٹریٹمنٹ واقعہ",
        "fatal_risk": "گاڑی کا الٹنا",
        "severity": "درمیانہ",
        "summary": "ایک ٹرک موڑ کاٹتے ہوئے الٹ گیا۔ ڈرائیور کو معمولی چوٹ آئی۔",
        "how_it_happened": "سڑک گیلی تھی اور ٹرک کی رفتار زیادہ تھی۔",
        "actions": "1. رفتار کی حد پر عمل کریں\n- سڑک پر پانی کا چھڑکاؤ کم کریں\n• ڈرائیوروں کی دوبارہ تربیت",
        "image_caption": "الٹا ہوا ٹرک",
        "box_2d": [100, 200, 400, 700],
    }

    def create_structured_completion(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        documents: list[DocumentPart],
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, instructions, documents, json_schema
        return json.dumps(self.DEFAULT_RESPONSE, ensure_ascii=False)
