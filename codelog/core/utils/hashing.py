import hashlib
from pathlib import Path
from typing import Union


def content_hash(text: str) -> str:
    """Return the SHA256 hash of a document's text."""
    return hashlib.sha256(text.encode("utf8")).hexdigest()


def file_hash(path: Union[str, Path]) -> str:
    """Return the SHA256 hash of the text currently stored at ``path``."""
    return content_hash(Path(path).read_text(encoding="utf8"))
