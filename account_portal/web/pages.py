"""
HTML pages for login, profile edit and password change.

Pages:
- GET /login, /profile, /password - Render the empty form
- POST /login, /profile, /password - Submit the form through the account API
  and re-render it with field errors or the outcome message
"""

from pathlib import Path
from typing import Annotated, AsyncGenerator

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..client import PortalClient
from ..forms import BaseForm, LoginForm, PasswordForm, ProfileForm

TEMPLATES_DIR = Path(__file__).parent / "templates"

router = APIRouter(include_in_schema=False)
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


async def get_portal_client(request: Request) -> AsyncGenerator[PortalClient, None]:
    """
    Client that calls this application's own API in-process.

    The API sees the page caller's address, so rate limits count per visitor.
    """
    if request.client is None:
        transport = httpx.ASGITransport(app=request.app)
    else:
        transport = httpx.ASGITransport(app=request.app, client=(request.client.host, request.client.port))
    async with PortalClient(base_url=str(request.base_url), transport=transport) as client:
        yield client


PortalClientDep = Annotated[PortalClient, Depends(get_portal_client)]


def _render(request: Request, template: str, form: BaseForm, title: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        template,
        {"form": form, "title": title},
    )


async def _submit(request: Request, form: BaseForm) -> BaseForm:
    data = await request.form()
    for name in form.fields:
        value = data.get(name, "")
        form.set_field(name, value if isinstance(value, str) else "")
    await form.submit()
    return form


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html", {"title": "Account"})


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request) -> HTMLResponse:
    return _render(request, "login.html", LoginForm(), "Login")


@router.post("/login", response_class=HTMLResponse)
async def submit_login(request: Request, client: PortalClientDep) -> HTMLResponse:
    form = await _submit(request, LoginForm(client))
    return _render(request, "login.html", form, "Login")


@router.get("/password", response_class=HTMLResponse)
async def password_page(request: Request) -> HTMLResponse:
    return _render(request, "password.html", PasswordForm(), "Change Password")


@router.post("/password", response_class=HTMLResponse)
async def submit_password(request: Request, client: PortalClientDep) -> HTMLResponse:
    form = await _submit(request, PasswordForm(client))
    return _render(request, "password.html", form, "Change Password")


@router.get("/profile", response_class=HTMLResponse)
async def profile_page(request: Request) -> HTMLResponse:
    return _render(request, "profile.html", ProfileForm(), "Edit Profile")


@router.post("/profile", response_class=HTMLResponse)
async def submit_profile(request: Request, client: PortalClientDep) -> HTMLResponse:
    form = await _submit(request, ProfileForm(client))
    return _render(request, "profile.html", form, "Edit Profile")
