from flash_report.extraction.base import BaseExtractor
from flash_report.extraction.extractor import Extractor
from flash_report.extraction.factory import ExtractorFactory
from flash_report.extraction.models import IncidentRecord

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory", "IncidentRecord"]
