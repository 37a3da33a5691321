import io
import logging
from urllib.parse import parse_qsl

import python_multipart
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .hashing import hash_hex, parse_width
from .models import INDEX_TITLE, RESULT_TITLE, PageContext
from .server import Listener


logger = logging.getLogger(__name__)

TEMPLATES_DIR = "templates"
STATIC_DIR = "www-data"


# === Dependencies ===


def get_templates(request: Request) -> Jinja2Templates:
    """Fresh template environment, so every request re-reads templates from disk."""
    return Jinja2Templates(directory=request.app.state.templates_dir)


def get_listener(request: Request) -> Listener:
    return request.app.state.listener


# === Helpers ===


def empty_response() -> Response:
    return Response(status_code=200)


def _multipart_field(content_type: str, body: bytes, name: bytes) -> bytes:
    found: list[bytes] = []

    def on_field(field) -> None:
        if field.field_name == name and not found:
            found.append(field.value or b"")

    def on_file(_file) -> None:
        pass

    headers = {"Content-Type": content_type, "Content-Length": str(len(body))}
    python_multipart.parse_form(headers, io.BytesIO(body), on_field, on_file)
    return found[0] if found else b""


async def read_form_bytes(request: Request, name: str) -> bytes:
    """Return the raw bytes of form field ``name``, without any charset decoding.

    Missing fields read as the empty string.
    """
    body = await request.body()
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/form-data"):
        return _multipart_field(content_type, body, name.encode("ascii"))
    # latin-1 maps every byte to one code point, so the round trip is lossless.
    pairs = parse_qsl(body.decode("latin-1"), keep_blank_values=True, encoding="latin-1")
    for key, value in pairs:
        if key == name:
            return value.encode("latin-1")
    return b""


# === Routes ===


def root() -> RedirectResponse:
    return RedirectResponse("/H64", status_code=302)


def hash_index(
    width: str,
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
):
    hash_width = parse_width(width)
    if hash_width is None:
        logger.debug("Ignoring unsupported width %r", width)
        return empty_response()
    context = PageContext(page_title=INDEX_TITLE, hash_width=hash_width)
    return templates.TemplateResponse(request, "index.tpl.html", context.as_dict())


async def hash_result(
    width: str,
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
):
    hash_width = parse_width(width)
    if hash_width is None:
        logger.debug("Ignoring unsupported width %r", width)
        return empty_response()
    data = await read_form_bytes(request, "string_to_hash")
    digest = hash_hex(data, hash_width)
    context = PageContext(page_title=RESULT_TITLE, hash_width=hash_width, string_hash=digest)
    return templates.TemplateResponse(request, "result.tpl.html", context.as_dict())


def stop(listener: Listener = Depends(get_listener)) -> RedirectResponse:
    listener.stop()
    return RedirectResponse("/", status_code=302)


def create_app(
    listener: Listener,
    templates_dir: str = TEMPLATES_DIR,
    static_dir: str = STATIC_DIR,
) -> FastAPI:
    app = FastAPI(title="Hashpage", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.listener = listener
    app.state.templates_dir = templates_dir

    app.mount("/www-data", StaticFiles(directory=static_dir), name="www-data")

    app.add_api_route("/", root, methods=["GET"])
    app.add_api_route("/stop", stop, methods=["GET"])
    app.add_api_route("/H{width}", hash_index, methods=["GET"])
    app.add_api_route("/H{width}", hash_result, methods=["POST"])
    return app
