import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from meeting_analysis.analysis.models import SourceFile

MEETING_TEXT = "Participants: Ali, Veli. Meeting started. Topics were discussed."


def _pdf(*pages: list[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def meeting_pdf_bytes() -> bytes:
    """Single-page meeting minutes with a participants label."""
    return _pdf([MEETING_TEXT])


@pytest.fixture()
def long_pdf_bytes() -> bytes:
    """Seven sentences spread over two pages, no participants label."""
    return _pdf(
        ["One is first. Two is second! Three is third?"],
        ["Four is fourth. Five is fifth. Six is sixth. Seven is seventh."],
    )


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return _pdf(["Page one content"], ["Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a blank page."""
    return _pdf([])


@pytest.fixture()
def meeting_pdf(meeting_pdf_bytes: bytes) -> SourceFile:
    return SourceFile.from_bytes("minutes.pdf", "application/pdf", meeting_pdf_bytes)


@pytest.fixture()
def corrupted_pdf() -> SourceFile:
    return SourceFile.from_bytes("broken.pdf", "application/pdf", b"not a pdf")


@pytest.fixture()
def audio_file() -> SourceFile:
    return SourceFile.from_bytes("call.mp3", "audio/mpeg", b"ID3fake-audio")


@pytest.fixture()
def video_file() -> SourceFile:
    return SourceFile.from_bytes("standup.mp4", "video/mp4", b"\x00\x00\x00\x18ftypmp42")
