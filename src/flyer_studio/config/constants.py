"""Centralized constants for flyer-studio."""
#File layout of the template store
TEMPLATE_EXT=".html"
CATEGORIES_MANIFEST="categories.json"
CUSTOM_NAMESPACE="custom"
#Marker substrings that flag each visual feature
FEATURE_MARKERS={
    "glass_morphism":("glass-effect","backdrop-filter"),
    "neon_effects":("neon-glow","shadow-glow"),
    "animations":("animate-","transition"),
    "gradient":("gradient","from-","to-"),
}
#Content synthesis bounds
class Limits:
    HEADLINE_CHARS=60
    DESCRIPTION_SHORT_MAX=100
    DESCRIPTION_CHARS=150
    EXCERPT_CHARS=50
    BRAND_WORD_MIN_LEN=4
