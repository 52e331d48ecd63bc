"""Site output writer.

Writes the assembled document to disk. The document first goes to a
temporary file in the target directory which then replaces the target, so
a failed run never leaves a truncated page behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from readinglist.exceptions import FileAccessError

logger = logging.getLogger(__name__)


def ensure_output_dir(output_dir: Path) -> None:
    """Create ``output_dir`` and its parents; an existing directory is fine.

    Raises
    ------
    FileAccessError
        If the directory cannot be created, e.g. a path component is a file.
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileAccessError(
            f"Cannot create output directory {output_dir}: {exc}",
            context={"stage": "write", "path": str(output_dir)},
        ) from exc


def write_site(html_content: str, output_file: Path) -> Path:
    r"""Write the HTML document to ``output_file``, replacing any old copy.

    Parameters
    ----------
    html_content : str
        Complete HTML document.
    output_file : Path
        Destination file. Missing parent directories are created.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    FileAccessError
        On any filesystem failure. The previous file, if any, is left as it
        was and no temporary file remains.

    Examples
    --------
    >>> import tempfile
    >>> target = Path(tempfile.mkdtemp()) / ".site" / "index.html"
    >>> write_site("<html></html>", target).read_text(encoding="utf-8")
    '<html></html>'
    """
    output_file = Path(output_file)
    ensure_output_dir(output_file.parent)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=output_file.parent,
            prefix=f".{output_file.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(html_content.encode("utf-8"))
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, output_file)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileAccessError(
            f"Cannot write site to {output_file}: {exc}",
            context={"stage": "write", "path": str(output_file)},
        ) from exc
    logger.info("Wrote %d bytes to %s", len(html_content.encode("utf-8")), output_file)
    return output_file
