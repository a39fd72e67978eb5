"""
Authentication pages: login, signup and logout.

Form actions return a redirect on success. Failures are rendered inline on
the same form, with the page status taken from the action result.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from planit.api.loaders import load_root_data, root_loader
from planit.api.templating import render
from planit.core.exceptions import PlanItError
from planit.db.session import get_db, get_session_factory
from planit.schemas.page import ActionResult, RootData
from planit.services.auth_service import authenticate_user, register_user
from planit.services.session_service import create_user_session, destroy_user_session

router = APIRouter(tags=["Authentication"])


async def _render_action_failure(
    request: Request,
    factory: async_sessionmaker[AsyncSession],
    template_name: str,
    error: PlanItError,
    form: dict,
) -> HTMLResponse:
    action_data = ActionResult(**error.to_dict())
    root = await load_root_data(request, factory)
    return render(
        request,
        template_name,
        root,
        {"action_data": action_data, "form": form},
        status_code=action_data.status,
    )


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request, root: RootData = Depends(root_loader)):
    """Show the login form, or send signed-in users home."""
    if root.current_user:
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    return render(request, "login.html", root, {"action_data": None, "form": {}}, title="Log In")


@router.post("/login", response_class=HTMLResponse)
async def login_action(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    db: AsyncSession = Depends(get_db),
    factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Verify credentials and start a session."""
    try:
        user = await authenticate_user(db, email, password)
    except PlanItError as e:
        return await _render_action_failure(request, factory, "login.html", e, {"email": email or ""})

    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    return create_user_session(response, user.id)


@router.get("/signup", response_class=HTMLResponse)
async def signup_page(request: Request, root: RootData = Depends(root_loader)):
    if root.current_user:
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    return render(request, "signup.html", root, {"action_data": None, "form": {}}, title="Sign Up")


@router.post("/signup", response_class=HTMLResponse)
async def signup_action(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    name: Optional[str] = Form(None),
    db: AsyncSession = Depends(get_db),
    factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Create an account and sign the new user in."""
    try:
        user = await register_user(db, email, password, name)
    except PlanItError as e:
        form = {"email": email or "", "name": name or ""}
        return await _render_action_failure(request, factory, "signup.html", e, form)

    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    return create_user_session(response, user.id)


@router.post("/logout")
async def logout_action():
    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    return destroy_user_session(response)
