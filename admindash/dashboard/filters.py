"""
Template filters for the dashboard pages.
"""

from fastapi.templating import Jinja2Templates

from .config import format_value


def setup_template_filters(templates: Jinja2Templates) -> None:
    """Register dashboard filters on a Jinja2Templates instance."""
    templates.env.filters["format_value"] = format_value
