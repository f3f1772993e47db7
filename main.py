"""FastAPI application for the form label service.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import html
import json
import logging
import traceback
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env from the service directory so LABELS_* settings are set
load_dotenv(Path(__file__).resolve().parent / ".env")

from config import Settings, load_settings
from labels.human_names import MappingHumanNameProvider
from labels.markup import render_input, render_label
from labels.naming import default_input_type
from labels.resolver import resolve
from models.field import FieldDescriptor, LabelOptions
from models.request import FieldRequest
from models.response import FieldResponse, LabelResponse
from translations.remote import RemoteCatalogClient
from translations.store import TranslationStore, load_catalog_dir


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("object_name", "attribute", "locale", "label_source"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("labels")
logger.addHandler(_handler)
logger.setLevel(logging.INFO)
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# Settings and translations (lazy init)
# ---------------------------------------------------------------------------

_settings: Settings | None = None
_store: TranslationStore | None = None


def get_settings() -> Settings:
    """Return the module-level settings, reading the environment on first use."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = load_settings()
    return _settings


def get_store() -> TranslationStore:
    """Return the module-level translation store, loading catalogs on first use.

    Local catalogs come from ``LABELS_TRANSLATIONS_DIR``; when
    ``LABELS_TRANSLATIONS_URL`` is set, the default locale and every local
    locale are also fetched from the catalog service. A failing service
    leaves the local catalogs in place.
    """
    global _store  # noqa: PLW0603
    if _store is None:
        settings = get_settings()
        store = TranslationStore(default_locale=settings.default_locale)
        if settings.translations_dir:
            loaded = load_catalog_dir(store, settings.translations_dir)
            logger.info("loaded local catalogs: %s", ", ".join(loaded) or "none")
        if settings.translations_url:
            client = RemoteCatalogClient(settings.translations_url)
            locales = sorted({settings.default_locale, *store.locales})
            try:
                client.load_into(store, locales)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "remote catalogs unavailable: %s: %s",
                    type(exc).__name__,
                    exc,
                )
            finally:
                client.close()
        _store = store
    return _store


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="Form Label Service")


# ---------------------------------------------------------------------------
# Global exception handler -- rendering must NEVER crash the page
# ---------------------------------------------------------------------------

SAFE_EMPTY_RESPONSE = {"html": "", "label_html": "", "input_html": ""}


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch all unhandled exceptions and return empty markup."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
    )
    return JSONResponse(status_code=200, content=SAFE_EMPTY_RESPONSE)


# ---------------------------------------------------------------------------
# Request mapping
# ---------------------------------------------------------------------------

def _descriptor(request: FieldRequest) -> FieldDescriptor:
    input_type = request.as_ or request.input_type or default_input_type(
        request.attribute, request.column_type
    )
    return FieldDescriptor(
        object_type_name=request.object_name,
        attribute_name=request.attribute,
        input_type=input_type,
    )


def _options(request: FieldRequest) -> LabelOptions:
    """Label options for a request; caller-supplied label text is escaped."""
    label_text = request.label
    if isinstance(label_text, str):
        label_text = html.escape(label_text, quote=False)
    required = request.required
    if required is None:
        required = get_settings().required_by_default
    return LabelOptions(
        label=label_text,
        required=required,
        html=request.html,
        label_html=request.label_html,
        collection=request.collection,
    )


def _human_names(request: FieldRequest) -> MappingHumanNameProvider:
    """Human names from the request body, escaped like explicit labels."""
    return MappingHumanNameProvider(
        {k: html.escape(v, quote=False) for k, v in request.human_names.items()}
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/label", response_model=LabelResponse)
async def label(request: FieldRequest) -> LabelResponse:
    """Resolve and render the label for one field."""
    locale = request.locale or get_settings().default_locale
    resolved = resolve(
        _descriptor(request),
        _options(request),
        get_store(),
        human_names=_human_names(request),
        locale=locale,
    )
    logger.info(
        "label request",
        extra={
            "object_name": request.object_name,
            "attribute": request.attribute,
            "locale": locale,
        },
    )
    return LabelResponse(label=resolved, html=render_label(resolved))


@app.post("/field", response_model=FieldResponse)
async def field(request: FieldRequest) -> FieldResponse:
    """Render the label and input for one field."""
    locale = request.locale or get_settings().default_locale
    descriptor = _descriptor(request)
    options = _options(request)
    resolved = resolve(
        descriptor,
        options,
        get_store(),
        human_names=_human_names(request),
        locale=locale,
    )
    label_html = render_label(resolved)
    input_html = render_input(descriptor, options)
    logger.info(
        "field request",
        extra={
            "object_name": request.object_name,
            "attribute": request.attribute,
            "locale": locale,
        },
    )
    return FieldResponse(
        label_html=label_html,
        input_html=input_html,
        html=label_html + input_html,
    )
