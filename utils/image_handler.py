"""
Image Validation and Processing Module

Validates uploaded recipe images before they are stored in the database.
Re-encodes images through PIL to strip potential exploits.
"""

from io import BytesIO

from PIL import Image

from constants.validation import ALLOWED_EXTENSIONS


class ImageValidationError(Exception):
    """Raised when an image fails validation."""
    pass


# Allowed image formats (PIL format names)
ALLOWED_FORMATS = {'JPEG', 'PNG', 'GIF', 'WEBP'}

# Maximum image dimensions (prevent decompression bombs)
MAX_WIDTH = 4096
MAX_HEIGHT = 4096

# Maximum file size (10MB)
MAX_FILE_SIZE = 10 * 1024 * 1024


def allowed_file(filename):
    """Check the upload's extension against the whitelist."""
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def validate_and_process_image(image_data, max_width=2048, max_height=2048):
    """
    Validate and re-encode an image to ensure safety.

    Args:
        image_data: Raw image bytes or file-like object
        max_width: Maximum width to resize to (default 2048)
        max_height: Maximum height to resize to (default 2048)

    Returns:
        bytes: The image re-encoded as JPEG

    Raises:
        ImageValidationError: If the image is invalid or potentially malicious
    """
    # Handle bytes or file-like object
    if isinstance(image_data, (bytes, bytearray)):
        content = bytes(image_data)
    else:
        image_data.seek(0)
        content = image_data.read()

    if not content:
        raise ImageValidationError("Image is empty")
    if len(content) > MAX_FILE_SIZE:
        raise ImageValidationError(f"Image too large: {len(content)} bytes (max {MAX_FILE_SIZE})")
    image_buffer = BytesIO(content)

    try:
        # Open image with PIL (validates format)
        img = Image.open(image_buffer)

        # Verify it's actually an image (detects corrupted/fake files)
        img.verify()

        # Re-open after verify (verify() leaves file in uncertain state)
        image_buffer.seek(0)
        img = Image.open(image_buffer)

        if img.format not in ALLOWED_FORMATS:
            raise ImageValidationError(
                f"Invalid image format: {img.format}. "
                f"Allowed formats: {', '.join(sorted(ALLOWED_FORMATS))}"
            )

        # Check dimensions (prevent decompression bombs)
        width, height = img.size
        if width > MAX_WIDTH or height > MAX_HEIGHT:
            raise ImageValidationError(
                f"Image dimensions too large: {width}x{height}. "
                f"Maximum: {MAX_WIDTH}x{MAX_HEIGHT}"
            )

        if width > max_width or height > max_height:
            img.thumbnail((max_width, max_height), Image.Resampling.LANCZOS)

        # Convert RGBA to RGB for JPEG (remove alpha channel)
        if img.mode in ('RGBA', 'LA', 'P'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode != 'RGBA':
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1])
            img = background
        elif img.mode != 'RGB':
            img = img.convert('RGB')

        output = BytesIO()
        img.save(output, 'JPEG', quality=85, optimize=True)
        return output.getvalue()

    except ImageValidationError:
        raise
    except Image.DecompressionBombError:
        raise ImageValidationError("Image appears to be a decompression bomb (too large when decoded)")
    except Exception as e:
        raise ImageValidationError(f"Invalid or corrupted image: {str(e)}")
