import mimetypes
import secrets
import time

from werkzeug.utils import secure_filename

ALLOWED_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif', 'webp'}

# trennt den generierten Präfix vom ursprünglichen Dateinamen
NAME_SEPARATOR = "__"

# mimetypes kennt webp nicht auf jeder Plattform
mimetypes.add_type("image/webp", ".webp")


def file_extension(filename):
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[1].lower()


def allowed_file(filename):
    return file_extension(filename) in ALLOWED_EXTENSIONS


def is_image_mimetype(mimetype):
    return bool(mimetype) and mimetype.lower().startswith("image/")


def guess_mimetype(filename):
    return mimetypes.guess_type(filename)[0]


def generate_filename(original_name):
    """Build a collision-free storage name that still carries the original name.

    Format: ``<millis>-<random hex>__<sanitized original>``.
    """
    # ".png" hat keinen Stamm, die Endung muss trotzdem erhalten bleiben
    ext = file_extension(original_name)
    stem = original_name.rsplit('.', 1)[0] if ext else (original_name or '')
    safe_stem = secure_filename(stem) or "bild"
    prefix = f"{int(time.time() * 1000)}-{secrets.token_hex(4)}"
    suffix = f".{ext}" if ext else ""
    return f"{prefix}{NAME_SEPARATOR}{safe_stem}{suffix}"


def original_name_from(stored_name):
    if NAME_SEPARATOR not in stored_name:
        return stored_name
    return stored_name.split(NAME_SEPARATOR, 1)[1]
