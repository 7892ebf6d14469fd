"""Shared fixtures: a small template store on disk."""

import json
from pathlib import Path

import pytest

from flyer_studio.config.settings import clear_settings_cache
from flyer_studio.templates import TemplateManager, TemplateStore
from flyer_studio.templates.manager import get_template_manager

EVENT_HTML = """<html>
<head>
<style>
.neon-glow { color: #0ff; }
</style>
</head>
<body class="bg-gradient-to-r from-blue-600 to-purple-600">
<h1 class="neon-glow animate-pulse">{{HEADLINE}}</h1>
<p>{{CONTENT}}</p>
<a class="bg-blue-600">{{CTA_TEXT}}</a>
<footer>{{BRAND_NAME}} &middot; {{HEADLINE}}</footer>
</body>
</html>"""

PLAIN_HTML = "<div><h1>{{TITLE}}</h1><span>{{VENUE}}</span></div>"


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Keep settings and the shared manager from leaking between tests."""
    clear_settings_cache()
    get_template_manager.cache_clear()
    yield
    clear_settings_cache()
    get_template_manager.cache_clear()


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Template store with two manifest categories and one unlisted directory."""
    root = tmp_path / "templates"
    (root / "event").mkdir(parents=True)
    (root / "social").mkdir()
    (root / "unlisted").mkdir()
    (root / "categories.json").write_text(
        json.dumps(
            {
                "categories": [
                    {"id": "event", "name": "Event Flyers", "description": "Events"},
                    {"id": "social", "name": "Social Posts", "description": "Posts"},
                    {"id": "ghost", "name": "Ghost", "description": "No directory on disk"},
                ]
            }
        )
    )
    (root / "event" / "summer-fest.html").write_text(EVENT_HTML)
    (root / "event" / "plain.html").write_text(PLAIN_HTML)
    (root / "event" / "notes.txt").write_text("not a template")
    (root / "social" / "glass-card.html").write_text('<div class="glass-effect">{{POST_HEADLINE}}</div>')
    (root / "unlisted" / "hidden.html").write_text("<p>{{HEADLINE}}</p>")
    return root


@pytest.fixture
def store(templates_dir: Path) -> TemplateStore:
    return TemplateStore(templates_dir)


@pytest.fixture
def manager(store: TemplateStore) -> TemplateManager:
    return TemplateManager(store)
