import pytest
from PIL import Image

from receipt_inventory.domain.exceptions import ImageDecodingError, ImageNotFoundError
from receipt_inventory.extraction import ImageFileReader


@pytest.fixture
def reader():
    """Fixture для ImageFileReader."""
    return ImageFileReader()


@pytest.fixture
def temp_image_jpeg(tmp_path):
    """Fixture: создает временный JPEG файл для тестов."""
    image_path = tmp_path / "test_image.jpg"
    Image.new("RGB", (100, 100), color=(200, 150, 100)).save(image_path, format="JPEG")
    return image_path


@pytest.fixture
def temp_image_png(tmp_path):
    """Fixture: создает временный PNG файл для тестов."""
    image_path = tmp_path / "test_image.png"
    Image.new("RGB", (100, 100), color=(200, 150, 100)).save(image_path, format="PNG")
    return image_path


def test_read_jpeg(reader, temp_image_jpeg):
    content = reader.read(temp_image_jpeg)
    assert content == temp_image_jpeg.read_bytes()


def test_read_png(reader, temp_image_png):
    content = reader.read(temp_image_png)
    assert content[:8] == b"\x89PNG\r\n\x1a\n"


def test_uppercase_suffix(reader, tmp_path):
    image_path = tmp_path / "RECEIPT.JPG"
    Image.new("RGB", (10, 10)).save(image_path, format="JPEG")
    assert reader.read(image_path)


def test_file_not_found(reader, tmp_path):
    with pytest.raises(ImageNotFoundError):
        reader.read(tmp_path / "nonexistent.jpg")


def test_unsupported_format(reader, tmp_path):
    text_file = tmp_path / "receipt.txt"
    text_file.write_text("ДДВ број 123", encoding="utf-8")

    with pytest.raises(ImageDecodingError):
        reader.read(text_file)


def test_corrupted_image(reader, tmp_path):
    broken = tmp_path / "broken.jpg"
    broken.write_bytes(b"not an image at all")

    with pytest.raises(ImageDecodingError) as exc_info:
        reader.read(broken)

    assert exc_info.value.original_error is not None


def test_custom_formats(tmp_path):
    image_path = tmp_path / "test_image.png"
    Image.new("RGB", (10, 10)).save(image_path, format="PNG")

    with pytest.raises(ImageDecodingError):
        ImageFileReader(supported_formats=[".jpg"]).read(image_path)


def test_directory_with_image_suffix(reader, tmp_path):
    image_dir = tmp_path / "receipt.jpg"
    image_dir.mkdir()

    with pytest.raises(ImageNotFoundError) as exc_info:
        reader.read(image_dir)

    assert isinstance(exc_info.value.original_error, OSError)
