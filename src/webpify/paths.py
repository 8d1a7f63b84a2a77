"""Output path derivation."""

from __future__ import annotations

import os

WEBP_SUFFIX = ".webp"


def resolve_output_path(input_file: str, explicit_output: str | None = None) -> str:
    """Return the path the WebP output should be written to.

    Parameters
    ----------
    input_file : str
        Source image path as given by the caller.
    explicit_output : str | None, default=None
        User-supplied output path. When non-empty it is returned unchanged,
        without checking its directory, extension or writability.

    Returns
    -------
    str
        ``explicit_output`` if given, otherwise the input's directory joined
        with ``<stem>.webp``.

    Examples
    --------
    >>> resolve_output_path("photos/img.PNG")
    'photos/img.webp'
    >>> resolve_output_path("img.jpg")
    'img.webp'
    """
    if explicit_output:
        return explicit_output

    directory, filename = os.path.split(os.fspath(input_file))
    stem, _ext = os.path.splitext(filename)
    return os.path.join(directory, f"{stem}{WEBP_SUFFIX}")
