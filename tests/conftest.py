import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import report_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from report_toolkit.layout import PageConfig, RenderSession
from report_toolkit.output.backend import (
    DocumentBackend,
    FinalizeError,
    FontNotFoundError,
    ImageAssetError,
)


class RecordingBackend(DocumentBackend):
    """
    In-memory backend recording every drawing call.

    Text metrics are synthetic: each character is half the font size wide.
    """

    KNOWN_FAMILIES = {"times", "helvetica", "courier", "arial"}
    IMAGE_SIZE = (200, 100)

    def __init__(self):
        self.ops: list[dict] = []
        self.pages = 0

    def add_page(self, width, height):
        self.pages += 1
        self.ops.append({"op": "page", "page": self.pages, "width": width, "height": height})

    def resolve_font(self, family, style):
        if family.lower() not in self.KNOWN_FAMILIES:
            raise FontNotFoundError(f"undefined font: {family} {style}".rstrip())
        return f"{family.lower()}-{style or 'R'}"

    def string_width(self, text, font, size):
        return len(text) * size * 0.5

    def set_font(self, font, size):
        self.ops.append({"op": "font", "page": self.pages, "font": font, "size": size})

    def draw_rect(self, x, y, width, height, *, fill, stroke, fill_color, line_width):
        self.ops.append({
            "op": "rect", "page": self.pages, "x": x, "y": y, "width": width,
            "height": height, "fill": fill, "stroke": stroke,
            "fill_color": fill_color, "line_width": line_width,
        })

    def draw_line(self, x1, y1, x2, y2, *, line_width):
        self.ops.append({"op": "line", "page": self.pages, "points": (x1, y1, x2, y2)})

    def draw_text(self, x, baseline, text, *, color):
        self.ops.append({
            "op": "text", "page": self.pages, "x": x, "baseline": baseline,
            "text": text, "color": color,
        })

    def image_size(self, path):
        if not Path(path).exists():
            raise ImageAssetError(f"image not found: {path}")
        return self.IMAGE_SIZE

    def draw_image(self, path, x, y, width, height):
        self.ops.append({
            "op": "image", "page": self.pages, "path": Path(path),
            "x": x, "y": y, "width": width, "height": height,
        })

    def finalize(self):
        if self.pages == 0:
            raise FinalizeError("document has no pages")
        return b"%PDF-recorded"

    # Query helpers

    def of(self, kind: str) -> list[dict]:
        return [op for op in self.ops if op["op"] == kind]

    def text(self, value: str) -> dict:
        matches = [op for op in self.of("text") if op["text"] == value]
        assert len(matches) == 1, f"expected one text op for {value!r}, got {len(matches)}"
        return matches[0]


# Common test fixtures
@pytest.fixture
def recording_backend():
    """Return a fresh recording backend."""
    return RecordingBackend()


@pytest.fixture
def pt_config():
    """Page config measured in points (1 user unit == 1 pt)."""
    return PageConfig(unit="pt", margin_left=10, margin_top=10, margin_right=10, margin_bottom=20)


@pytest.fixture
def session(pt_config, recording_backend):
    """Session on a recording backend with one page and a font selected."""
    s = RenderSession(pt_config, recording_backend)
    s.add_page()
    s.set_font("Helvetica", "", 10)
    return s


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def sample_csv(tmp_path: Path):
    """Write the orders example table and return its path."""
    path = tmp_path / "orders.csv"
    path.write_text(
        "Date,Qty,Item,Price\n"
        "2018-01-16,3,Widget,9.99\n",
        encoding="utf-8",
    )
    return path
