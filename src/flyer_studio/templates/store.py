"""Filesystem-backed template store.

Layout::

    <templates_dir>/categories.json     {"categories": [{id, name, description}, ...]}
    <templates_dir>/<category>/<slug>.html

Reads favour availability: a missing manifest, category directory or
template file is logged and reported as an empty/None result. Writes are
strict: a failed save raises.
"""

from __future__ import annotations

import os
import re
import threading
from pathlib import Path
from typing import List

from pydantic import ValidationError as PydanticValidationError

from flyer_studio.config.constants import CATEGORIES_MANIFEST, CUSTOM_NAMESPACE, TEMPLATE_EXT
from flyer_studio.config.logging import get_logger
from flyer_studio.exceptions import StorageError, ValidationError
from flyer_studio.utils.file_utils import write_atomically

from .cache import InMemoryTemplateCache, TemplateCache
from .models import CategoryManifest, Template, TemplateCategory, TemplateDraft

logger = get_logger(__name__)

_WORD_START = re.compile(r"\b\w", re.ASCII)


def custom_template_id(name: str) -> str:
    """Id for a custom template saved without an explicit one.

    Examples:
        "My Banner" -> "custom/my-banner"
        "Spring  Sale Flyer" -> "custom/spring-sale-flyer"
    """
    slug = re.sub(r"\s+", "-", name.strip().lower())
    return f"{CUSTOM_NAMESPACE}/{slug}"


def split_template_id(template_id: str) -> tuple[str, str]:
    """Split ``category/slug``. Nested categories keep their inner slashes."""
    category, _, slug = template_id.rpartition("/")
    return category, slug


def name_from_slug(slug: str) -> str:
    """Human-readable title from a file slug, e.g. 'neon-night' -> 'Neon Night'."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), re.sub(r"[-_]+", " ", slug).strip())


def default_description(category: str) -> str:
    return f"{category} template with modern design"


class TemplateStore:
    """Discovers, parses, caches and saves templates under one root directory.

    Categories are read from the manifest once and kept for the store's
    lifetime. Templates go through ``cache``; with the default cache they
    also live until the process exits or ``invalidate`` is called, so edits
    to files on disk are not picked up before that.
    """

    def __init__(self, templates_dir: Path | str, cache: TemplateCache | None = None):
        self.templates_dir = Path(templates_dir)
        self.cache: TemplateCache = cache if cache is not None else InMemoryTemplateCache()
        self._categories: List[TemplateCategory] | None = None
        self._categories_lock = threading.Lock()
        self.reads = 0

    @property
    def manifest_path(self) -> Path:
        return self.templates_dir / CATEGORIES_MANIFEST

    def resolve_path(self, relative: str) -> Path:
        """Resolve ``relative`` under the store root.

        Raises:
            ValidationError: If the path is empty, absolute or escapes the root.
        """
        if not relative or relative.startswith(("/", "\\")) or "\\" in relative:
            raise ValidationError(f"Invalid template path '{relative}'")
        if any(part in ("", ".", "..") for part in relative.split("/")):
            raise ValidationError(f"Invalid template path '{relative}'")
        base = self.templates_dir.resolve()
        resolved = (base / relative).resolve()
        try:
            common = Path(os.path.commonpath([str(base), str(resolved)]))
        except ValueError:
            common = None
        if common != base:
            raise ValidationError("Path traversal detected", details=relative)
        return resolved

    def template_path(self, template_id: str) -> Path:
        category, slug = split_template_id(template_id)
        if not category or not slug:
            raise ValidationError(f"Template id '{template_id}' must look like 'category/slug'")
        return self.resolve_path(template_id + TEMPLATE_EXT)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def get_categories(self) -> List[TemplateCategory]:
        """Categories from the manifest, loaded on first call.

        A missing or malformed manifest logs an error and returns ``[]``.
        Failed loads are not cached, so a later call tries again.
        """
        with self._categories_lock:
            if self._categories is not None:
                return list(self._categories)
            try:
                manifest = CategoryManifest.model_validate_json(self.manifest_path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Error loading categories from %s: %s", self.manifest_path, e)
                return []
            except PydanticValidationError as e:
                logger.error("Malformed category manifest %s: %s", self.manifest_path, e)
                return []
            self._categories = manifest.categories
            logger.debug("Loaded %d template categories", len(self._categories))
            return list(self._categories)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def list_templates(self, category: str | None = None) -> List[Template]:
        """Templates of one category, or of every manifest category.

        A category whose directory is missing or unreadable is skipped with
        a warning; whatever else was found is still returned.
        """
        targets = [category] if category else [c.id for c in self.get_categories()]
        templates: List[Template] = []
        for cat in targets:
            try:
                cat_dir = self.resolve_path(cat)
                files = sorted(p for p in cat_dir.iterdir() if p.is_file() and p.suffix == TEMPLATE_EXT)
            except (OSError, ValidationError) as e:
                logger.warning("Category %s not found or inaccessible: %s", cat, e)
                continue
            for fp in files:
                template = self.load_template(f"{cat}/{fp.stem}")
                if template is not None:
                    templates.append(template)
        return templates

    def load_template(self, template_id: str) -> Template | None:
        """Load a template by ``category/slug``, serving repeats from cache.

        Returns:
            The Template, or None when the id is invalid or the file can't be read.
        """
        cached = self.cache.get(template_id)
        if cached is not None:
            return cached
        try:
            path = self.template_path(template_id)
            self.reads += 1
            html_content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.error("Error loading template %s: %s", template_id, e)
            return None
        category, slug = split_template_id(template_id)
        template = Template(
            id=template_id,
            name=name_from_slug(slug),
            category=category,
            description=default_description(category),
            html_content=html_content,
        )
        self.cache.set(template_id, template)
        logger.debug("Loaded template %s with %d placeholders", template_id, len(template.placeholders))
        return template

    def save_template(self, draft: TemplateDraft, custom_id: str | None = None) -> str:
        """Write a new template's markup and cache it.

        The category manifest is not touched; a template in a category that
        isn't listed there stays reachable through ``load_template`` only.

        Args:
            draft: Template data without an id.
            custom_id: Explicit id. Defaults to ``custom/<name-slug>``.

        Returns:
            The assigned template id.

        Raises:
            ValidationError: If the id is malformed or escapes the store root.
            StorageError: If the directory or file can't be written.
        """
        template_id = custom_id or custom_template_id(draft.name)
        path = self.template_path(template_id)
        try:
            write_atomically(path, draft.html_content)
        except OSError as e:
            raise StorageError(f"Failed to save template '{template_id}'", details=str(e)) from e
        template = Template(
            id=template_id,
            name=draft.name,
            category=draft.category,
            description=draft.description,
            html_content=draft.html_content,
            preview_url=draft.preview_url,
            thumbnail_url=draft.thumbnail_url,
        )
        self.cache.set(template_id, template)
        logger.info("Saved template %s to %s", template_id, path)
        return template_id

    def invalidate(self, template_id: str | None = None) -> None:
        """Drop one cached template, or every cached template and the categories."""
        if template_id is not None:
            self.cache.delete(template_id)
            return
        self.cache.clear()
        with self._categories_lock:
            self._categories = None
        logger.debug("Cleared template and category caches")
