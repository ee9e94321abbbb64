import io

import pytest
from PIL import Image

from utils.qr_config import QR_THEMES, get_qr_style
from utils.qr_generator import QRCapacityError, generate_qr_png


def test_qr_generator_returns_png_bytes():
    result = generate_qr_png(payload="WIFI:T:WPA;S:Home;P:password123;H:false;;", size=300)
    assert isinstance(result, bytes)
    assert result.startswith(b"\x89PNG")
    img = Image.open(io.BytesIO(result))
    assert img.size == (300, 300)


@pytest.mark.parametrize("style", sorted(QR_THEMES))
def test_every_theme_renders(style):
    conf = get_qr_style(style)
    result = generate_qr_png(
        payload="geo:40.712800,-74.006000",
        size=conf["size"],
        fg=conf["fg"],
        bg=conf["bg"],
        error_correction=conf["error_correction"],
        border=conf["border"],
        module_style=conf["module_style"],
        gradient=conf["gradient"],
    )
    assert Image.open(io.BytesIO(result)).size == (conf["size"], conf["size"])


def test_unknown_style_falls_back_to_default():
    assert get_qr_style("does-not-exist") == get_qr_style("classic")


def test_invalid_error_correction_is_rejected():
    with pytest.raises(ValueError):
        generate_qr_png(payload="x", error_correction="Z")


def test_empty_payload_is_rejected():
    with pytest.raises(ValueError):
        generate_qr_png(payload="")


@pytest.mark.parametrize(
    "payload, level",
    [
        ("日" * 2000, "M"),
        ("a" * 2000, "H"),
    ],
)
def test_oversized_payload_raises_capacity_error(payload, level):
    with pytest.raises(QRCapacityError):
        generate_qr_png(payload=payload, error_correction=level)
