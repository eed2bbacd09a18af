from chinese_react_parser.models.domain import (
    CustomPattern,
    FieldMatch,
    FinishOutcome,
    KeywordSet,
    Language,
    ModelType,
    OperationOutcome,
    ParseOutcome,
    Role,
    Vendor,
    VendorProfile,
)
from chinese_react_parser.models.schemas import (
    CustomKeywords,
    ExtractionOptions,
    PartialKeywords,
)

__all__ = [
    "CustomPattern",
    "FieldMatch",
    "FinishOutcome",
    "KeywordSet",
    "Language",
    "ModelType",
    "OperationOutcome",
    "ParseOutcome",
    "Role",
    "Vendor",
    "VendorProfile",
    "CustomKeywords",
    "ExtractionOptions",
    "PartialKeywords",
]
