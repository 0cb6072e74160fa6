from .models import ParsedDoc
from .parse import ResumeParseError, parse_document

__all__ = ["ParsedDoc", "ResumeParseError", "parse_document"]
