"""
Home page: upcoming events and groups from the root loader.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from planit.api.loaders import root_loader
from planit.api.templating import render
from planit.schemas.page import RootData

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request, root: RootData = Depends(root_loader)):
    return render(request, "index.html", root, title="Plan It Social")
