# Utility modules for Recipe Box
from .image_handler import validate_and_process_image, allowed_file, ImageValidationError
from .sanitizer import (
    normalize_name, sanitize_name, sanitize_text, sanitize_instructions
)
