import io

import pytest
from fastapi import UploadFile

from skillnest.core.config import settings
from skillnest.core.exceptions import ExtractionError, UnsupportedFileError
from skillnest.routers import functions
from skillnest.services import pdf_text


class RecordingFile(io.BytesIO):
    """Upload body that remembers how much the handler asked to read."""

    def __init__(self, data):
        super().__init__(data)
        self.read_sizes = []

    def read(self, size=-1):
        self.read_sizes.append(size)
        return super().read(size)


def make_pdf(text: str) -> bytes:
    """Single-page PDF with one line of Helvetica text and a correct xref table."""
    stream = f"BT /F1 18 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode()
    return bytes(out)


def test_extracts_text(client):
    files = {"file": ("Resume.PDF", make_pdf("Jane Doe Python Engineer"), "application/pdf")}
    response = client.post("/api/extract-pdf-text", files=files)
    assert response.status_code == 200
    data = response.json()
    assert "Jane Doe Python Engineer" in data["text"]
    assert data["fileName"] == "Resume.PDF"


def test_missing_file(client):
    response = client.post("/api/extract-pdf-text", data={"other": "x"})
    assert response.status_code == 400
    assert response.json()["error"] == "No file provided"


def test_rejects_non_pdf(client):
    files = {"file": ("resume.docx", b"PK\x03\x04", "application/octet-stream")}
    response = client.post("/api/extract-pdf-text", files=files)
    assert response.status_code == 400
    assert response.json()["error"] == "Only PDF files are supported"


def test_rejects_oversized_file(client, monkeypatch):
    monkeypatch.setattr(settings, "max_pdf_bytes", 1024 * 1024)
    files = {"file": ("big.pdf", b"%PDF-1.4\n" + b"0" * (1024 * 1024), "application/pdf")}
    response = client.post("/api/extract-pdf-text", files=files)
    assert response.status_code == 400
    assert response.json()["error"] == "File size must be less than 1MB"


def test_upload_read_is_capped(monkeypatch):
    monkeypatch.setattr(settings, "max_pdf_bytes", 1024 * 1024)
    body = RecordingFile(b"%PDF-1.4\n" + b"0" * (3 * 1024 * 1024))
    upload = UploadFile(file=body, filename="big.pdf")
    with pytest.raises(UnsupportedFileError) as excinfo:
        functions.extract_pdf_text(upload)
    assert excinfo.value.message == "File size must be less than 1MB"
    assert body.read_sizes == [1024 * 1024 + 1]


def test_wrong_extension_is_rejected_before_reading():
    body = RecordingFile(b"PK\x03\x04")
    upload = UploadFile(file=body, filename="resume.docx")
    with pytest.raises(UnsupportedFileError):
        functions.extract_pdf_text(upload)
    assert body.read_sizes == []


def test_garbage_pdf_fails_cleanly():
    with pytest.raises(ExtractionError) as excinfo:
        pdf_text.extract_pdf_text("broken.pdf", b"this is not a pdf")
    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "Failed to extract text from PDF"
