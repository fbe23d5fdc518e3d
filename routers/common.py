"""Helpers shared by the page routers."""
from urllib.parse import urlencode

from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from config import TEMPLATES_DIR

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def redirect_to(path: str, **flags) -> RedirectResponse:
    """303 redirect to ``path`` with the given status flags in the query string."""
    query = urlencode({key: value for key, value in flags.items() if value is not None})
    url = f"{path}?{query}" if query else path
    return RedirectResponse(url=url, status_code=303)
