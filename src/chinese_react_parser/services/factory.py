"""
Parser factory.

``glm`` reuses the ChatGLM profile and ``minimax`` reuses the Qwen profile
verbatim. ``auto`` returns the cascading parser.
"""

from typing import Dict, List, Optional, Union

from chinese_react_parser.config import get_settings
from chinese_react_parser.errors import UnsupportedModelError
from chinese_react_parser.models import ExtractionOptions, ModelType, Vendor
from chinese_react_parser.services.parser import ReActOutputParser
from chinese_react_parser.services.universal import UniversalReActParser
from chinese_react_parser.services.vendor_profiles import get_profile

Parser = Union[ReActOutputParser, UniversalReActParser]

MODEL_VENDORS: Dict[ModelType, Vendor] = {
    ModelType.QWEN: Vendor.QWEN,
    ModelType.CHATGLM: Vendor.CHATGLM,
    ModelType.BAICHUAN: Vendor.BAICHUAN,
    ModelType.GLM: Vendor.CHATGLM,
    ModelType.ERNIE: Vendor.ERNIE,
    ModelType.MINIMAX: Vendor.QWEN,
}

SUPPORTED_MODELS = tuple(model.value for model in ModelType)


def get_supported_models() -> List[str]:
    return list(SUPPORTED_MODELS)


def is_supported(model_type: object) -> bool:
    return _coerce_model_type(model_type) is not None


def create_parser(
    model_type: Union[ModelType, str, None] = None,
    options: Optional[ExtractionOptions] = None,
) -> Parser:
    """Create the parser for ``model_type``, falling back to configured defaults."""
    settings = get_settings()
    if model_type is None:
        model_type = settings.default_model
    if options is None:
        options = ExtractionOptions.from_settings(settings)

    resolved = _coerce_model_type(model_type)
    if resolved is None:
        raise UnsupportedModelError(model_type, get_supported_models())
    if resolved is ModelType.AUTO:
        return UniversalReActParser(options)
    return ReActOutputParser(get_profile(MODEL_VENDORS[resolved]), options)


def create_qwen_parser(options: Optional[ExtractionOptions] = None) -> ReActOutputParser:
    return ReActOutputParser(get_profile(Vendor.QWEN), options)


def create_chatglm_parser(options: Optional[ExtractionOptions] = None) -> ReActOutputParser:
    return ReActOutputParser(get_profile(Vendor.CHATGLM), options)


def create_baichuan_parser(options: Optional[ExtractionOptions] = None) -> ReActOutputParser:
    return ReActOutputParser(get_profile(Vendor.BAICHUAN), options)


def create_ernie_parser(options: Optional[ExtractionOptions] = None) -> ReActOutputParser:
    return ReActOutputParser(get_profile(Vendor.ERNIE), options)


def create_auto_parser(options: Optional[ExtractionOptions] = None) -> UniversalReActParser:
    return UniversalReActParser(options)


def _coerce_model_type(model_type: object) -> Optional[ModelType]:
    if isinstance(model_type, ModelType):
        return model_type
    if not isinstance(model_type, str):
        return None
    try:
        return ModelType(model_type.strip().lower())
    except ValueError:
        return None
