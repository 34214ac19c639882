from typing import Iterable, List, Optional, Tuple


def split_options(text: str) -> list[str]:
    """One candidate per non-blank line, in order."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_uploads(files: Optional[Iterable], per_line: bool = False) -> List[Tuple[str, str]]:
    """
    Candidates from uploaded files as (text, source name) pairs, in upload order.
    Bytes are decoded as UTF-8 with undecodable bytes dropped. With per_line,
    each non-blank line of a file becomes its own candidate.
    """
    out: List[Tuple[str, str]] = []
    for f in files or ():
        raw = f.read()
        text = raw.decode("utf-8", errors="ignore") if isinstance(raw, bytes) else str(raw)
        source = getattr(f, "name", None) or "uploaded.txt"
        chunks = split_options(text) if per_line else [text]
        out.extend((c, source) for c in chunks)
    return out
