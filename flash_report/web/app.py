from pathlib import Path

from fastapi import BackgroundTasks, FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from flash_report.config.settings import Settings
from flash_report.extraction.base import BaseExtractor
from flash_report.extraction.factory import ExtractorFactory
from flash_report.imaging.cropper import Cropper
from flash_report.logging.logger import Log
from flash_report.poster.export import build_export_options
from flash_report.poster.view import build_poster_view
from flash_report.session.exceptions import InvalidTransitionError
from flash_report.session.models import Result
from flash_report.session.session import PosterSession

TEMPLATES_DIR = Path(__file__).parent / "templates"
PROCESSING_REFRESH_SECONDS = 2


def build_session(settings: Settings, extractor: BaseExtractor | None = None) -> PosterSession:
    """Build a fresh PosterSession with the configured extractor."""
    return PosterSession(
        extractor or ExtractorFactory.create(settings),
        Cropper(),
        max_upload_bytes=settings.max_upload_bytes,
    )


def create_app(settings: Settings, extractor: BaseExtractor | None = None) -> FastAPI:
    """Create the single-page poster translator application."""
    app = FastAPI(title="Flash Report Translator")
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.state.settings = settings
    app.state.session = build_session(settings, extractor)

    def _redirect_home() -> RedirectResponse:
        return RedirectResponse(url="/", status_code=303)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, align: str = "right", spacing: str = "normal") -> HTMLResponse:
        session: PosterSession = app.state.session
        state = session.state
        poster = None
        if isinstance(state, Result):
            poster = build_poster_view(state.record, state.asset, align=align, spacing=spacing)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "state": state,
                "validation_message": session.validation_message,
                "poster": poster,
                "export": build_export_options(app.state.settings),
                "refresh_seconds": PROCESSING_REFRESH_SECONDS,
            },
        )

    @app.post("/upload")
    async def upload(
        background_tasks: BackgroundTasks,
        file: UploadFile = File(...),
    ) -> RedirectResponse:
        session: PosterSession = app.state.session
        # at most one byte past the limit; validate_upload rejects anything longer
        data = await file.read(app.state.settings.max_upload_bytes + 1)
        try:
            accepted = session.select_file(file.filename or "", file.content_type, data)
        except InvalidTransitionError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        if accepted:
            background_tasks.add_task(session.process)
        return _redirect_home()

    @app.post("/reset")
    def reset() -> RedirectResponse:
        app.state.session.reset()
        return _redirect_home()

    @app.post("/credential")
    def credential(api_key: str = Form(...)) -> RedirectResponse:
        if not api_key.strip():
            raise HTTPException(status_code=422, detail="API key must not be empty")
        try:
            updated = ExtractorFactory.with_api_key(app.state.settings, api_key)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        app.state.settings = updated
        app.state.session = build_session(updated)
        Log.info(f"Credential updated for provider {updated.extraction_provider}, session reloaded")
        return _redirect_home()

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app
