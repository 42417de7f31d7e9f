import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from flash_report.config.settings import Settings
from flash_report.session.models import Error, Result, Uploading
from flash_report.web.app import create_app


def _example_settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, extraction_provider="example", **overrides)  # type: ignore[arg-type]


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(_example_settings()))


class TestIndex:
    def test_renders_upload_card(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "Upload Safety Incident Poster" in response.text

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy"}


class TestUploadFlow:
    def test_image_upload_produces_cropped_poster(self, client: TestClient, png_bytes: bytes) -> None:
        response = client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})

        assert response.status_code == 200
        state = client.app.state.session.state
        assert isinstance(state, Result)
        assert state.record.title == "حفاظتی واقعہ: ٹرک الٹ گیا"
        with Image.open(io.BytesIO(state.asset.payload)) as cropped:
            assert cropped.size == (1000, 300)
        assert "Download JPG" in response.text
        assert "رفتار کی حد پر عمل کریں" in response.text
        assert "Barrick-Safety-Incident-Urdu-" in response.text

    def test_pdf_upload_shows_placeholder(self, client: TestClient, sample_pdf_bytes: bytes) -> None:
        response = client.post(
            "/upload", files={"file": ("poster.pdf", sample_pdf_bytes, "application/pdf")}
        )

        state = client.app.state.session.state
        assert isinstance(state, Result)
        assert state.asset.payload == sample_pdf_bytes
        assert "PDF Document Uploaded" in response.text

    def test_unsupported_type_stays_on_upload(self, client: TestClient) -> None:
        response = client.post("/upload", files={"file": ("notes.txt", b"hello", "text/plain")})

        assert isinstance(client.app.state.session.state, Uploading)
        assert "Please upload an image file (JPG, PNG) or PDF." in response.text

    def test_oversized_upload_rejected(self, png_bytes: bytes) -> None:
        client = TestClient(create_app(_example_settings(max_upload_bytes=100)))

        response = client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})

        assert isinstance(client.app.state.session.state, Uploading)
        assert "larger than" in response.text

    def test_upload_while_showing_result_conflicts(self, client: TestClient, png_bytes: bytes) -> None:
        client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})
        response = client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})
        assert response.status_code == 409

    def test_reset_returns_to_upload(self, client: TestClient, png_bytes: bytes) -> None:
        client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})

        response = client.post("/reset")

        assert isinstance(client.app.state.session.state, Uploading)
        assert "Upload Safety Incident Poster" in response.text


class TestLayoutControls:
    def test_align_and_spacing_query(self, client: TestClient, png_bytes: bytes) -> None:
        client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})

        response = client.get("/", params={"align": "left", "spacing": "tight"})

        assert "align-left" in response.text
        assert "py-1" in response.text

    def test_unknown_layout_values_fall_back(self, client: TestClient, png_bytes: bytes) -> None:
        client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})

        response = client.get("/", params={"align": "middle", "spacing": "wide"})

        assert "align-right" in response.text
        assert "py-3" in response.text


class TestCredentialFlow:
    def test_missing_key_offers_credential_form(self, png_bytes: bytes) -> None:
        settings = Settings(_env_file=None, extraction_provider="gemini", extraction_gemini_api_key="")
        client = TestClient(create_app(settings))

        response = client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})

        state = client.app.state.session.state
        assert isinstance(state, Error)
        assert state.credential_missing is True
        assert 'action="/credential"' in response.text

    def test_credential_reloads_session(self, png_bytes: bytes) -> None:
        settings = Settings(_env_file=None, extraction_provider="gemini", extraction_gemini_api_key="")
        client = TestClient(create_app(settings))
        client.post("/upload", files={"file": ("poster.png", png_bytes, "image/png")})

        response = client.post("/credential", data={"api_key": "  new-key  "})

        assert response.status_code == 200
        assert client.app.state.settings.extraction_gemini_api_key == "new-key"
        assert isinstance(client.app.state.session.state, Uploading)

    def test_blank_credential_rejected(self, client: TestClient) -> None:
        assert client.post("/credential", data={"api_key": "   "}).status_code == 422

    def test_keyless_provider_rejects_credential(self) -> None:
        client = TestClient(create_app(_example_settings()))
        assert client.post("/credential", data={"api_key": "abc"}).status_code == 400
