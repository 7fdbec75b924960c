"""Text extraction for résumés and job descriptions (txt, md, pdf, docx, rtf)."""

import logging
from pathlib import Path

import docx
from pypdf import PdfReader

from resume_matcher.errors import UnsupportedFormatError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {".txt", ".text", ".md"}
SUPPORTED_EXTENSIONS = TEXT_EXTENSIONS | {".pdf", ".docx", ".rtf"}


def read_text(path: str | Path) -> str:
    """Plain text and Markdown, decoded as UTF-8."""
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def read_docx(path: str | Path) -> str:
    """Body paragraphs, then table cell text, one per line."""
    document = docx.Document(str(path))
    lines = [p.text for p in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                lines.append(cell.text)
    return "\n".join(lines)


def read_pdf(path: str | Path) -> str:
    """
    Extract text page by page, each page followed by a newline.

    Pages that fail extraction are skipped. Scanned (image-only) PDFs yield
    little or no text.
    """
    reader = PdfReader(str(path))
    text_parts = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            page_text = page.extract_text()
        except Exception as e:  # pypdf raises a wide range of types on malformed pages
            logger.warning("Skipping page %d of %s: %s", number, path, e)
            continue
        if page_text:
            text_parts.append(page_text + "\n")
    return "".join(text_parts)


def _hex_byte(data: bytes, i: int) -> int | None:
    try:
        return int(data[i:i + 2].decode("ascii"), 16) if len(data[i:i + 2]) == 2 else None
    except ValueError:
        return None


def _byte_char(value: int) -> str:
    return bytes([value]).decode("cp1252", errors="replace")


def parse_rtf(data: bytes) -> str:
    """
    Minimal RTF to plain text.

    Group braces are dropped. \\'XX bytes are decoded as cp1252, \\uN becomes
    the UTF-16 unit N (negative values wrap by 65536) and its one-character
    fallback is skipped. Adjacent surrogate units combine into one character;
    unpaired or out-of-range units become U+FFFD, so the result always
    encodes as UTF-8. Escaped \\\\, \\{ and \\} emit the literal character.
    Every other control word, with its optional numeric parameter and
    delimiting space, is discarded. Bytes >= 32, newline and tab pass through.
    """
    out: list[str] = []
    i = 0
    n = len(data)
    while i < n:
        b = data[i]
        if b in (0x7B, 0x7D):  # { }
            i += 1
            continue
        if b != 0x5C:  # backslash
            if b >= 32 or b in (0x0A, 0x09):
                out.append(chr(b) if b < 128 else _byte_char(b))
            i += 1
            continue

        if i + 1 >= n:
            break
        nxt = data[i + 1]
        if nxt in (0x5C, 0x7B, 0x7D):
            out.append(chr(nxt))
            i += 2
            continue
        if nxt == 0x27:  # '
            value = _hex_byte(data, i + 2)
            if value is not None:
                out.append(_byte_char(value))
            i += 4
            continue

        j = i + 1
        while j < n and chr(data[j]).isascii() and chr(data[j]).isalpha():
            j += 1
        name = data[i + 1:j].decode("ascii").lower()
        if not name:
            # control symbol such as \~ or \-
            i += 2
            continue

        num_start = j
        if j < n and data[j] == 0x2D:  # -
            j += 1
        digits_start = j
        while j < n and 0x30 <= data[j] <= 0x39:
            j += 1
        has_num = j > digits_start
        num_end = j
        if j < n and data[j] == 0x20:
            j += 1

        if name == "u" and has_num:
            code = int(data[num_start:num_end].decode("ascii"))
            if code < 0:
                code += 65536
            try:
                out.append(chr(code))
            except ValueError:
                out.append("\ufffd")
            # skip the ANSI fallback character
            if j < n:
                if data[j] == 0x5C and j + 1 < n and data[j + 1] == 0x27:
                    j += 4
                elif data[j] not in (0x5C, 0x7B, 0x7D):
                    j += 1
        i = j
    # Pair UTF-16 surrogate halves; lone halves become U+FFFD.
    return "".join(out).encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def read_rtf(path: str | Path) -> str:
    return parse_rtf(Path(path).read_bytes())


def extract_text(path: str | Path) -> str:
    """
    Dispatch on the lowercased file extension.

    Raises:
        UnsupportedFormatError: extension is not one of SUPPORTED_EXTENSIONS.
        OSError: the file cannot be read.
    """
    ext = Path(path).suffix.lower()
    if ext in TEXT_EXTENSIONS:
        return read_text(path)
    if ext == ".docx":
        return read_docx(path)
    if ext == ".pdf":
        return read_pdf(path)
    if ext == ".rtf":
        return read_rtf(path)
    raise UnsupportedFormatError(ext)
