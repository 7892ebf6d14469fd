"""Template loading, placeholder synthesis and brand theming."""

from .cache import InMemoryTemplateCache, TemplateCache
from .features import TemplateFeatures, classify_features, feature_labels
from .manager import TemplateManager, get_template_manager
from .models import BrandKit, CategoryManifest, GeneratedContent, Template, TemplateCategory, TemplateDraft
from .placeholders import extract_placeholders, replace_placeholders
from .store import TemplateStore, custom_template_id
from .synthesis import ContentSynthesizer, HeuristicSynthesizer, get_sample_content
from .theming import apply_brand_kit

__all__ = [
    "BrandKit",
    "CategoryManifest",
    "ContentSynthesizer",
    "GeneratedContent",
    "HeuristicSynthesizer",
    "InMemoryTemplateCache",
    "Template",
    "TemplateCache",
    "TemplateCategory",
    "TemplateDraft",
    "TemplateFeatures",
    "TemplateManager",
    "TemplateStore",
    "apply_brand_kit",
    "classify_features",
    "custom_template_id",
    "extract_placeholders",
    "feature_labels",
    "get_sample_content",
    "get_template_manager",
    "replace_placeholders",
]
