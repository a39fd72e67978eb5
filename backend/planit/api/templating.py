"""
Jinja2 rendering with the shell context injected into every page.
"""

from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates
from starlette.requests import Request
from starlette.responses import HTMLResponse

from planit.core.config import get_settings
from planit.schemas.page import RootData

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    template_name: str,
    root: RootData,
    ctx: Optional[dict] = None,
    status_code: int = 200,
    title: Optional[str] = None,
) -> HTMLResponse:
    """TemplateResponse wrapper injecting root loader data for the shell."""
    settings = get_settings()
    base_ctx = {
        "app_name": settings.APP_NAME,
        "title": title,
        "root": root,
        "current_user": root.current_user,
        "signed_in": root.current_user is not None,
        "ENV": root.ENV,
    }
    merged = {**base_ctx, **(ctx or {})}
    return templates.TemplateResponse(request, template_name, merged, status_code=status_code)
