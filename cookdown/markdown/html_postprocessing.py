"""
Routines for post-processing rendered HTML, e.g. rewriting links.
"""

from typing import Callable, Dict, List, Optional

from pathlib import Path

from urllib.parse import urlsplit, unquote

import mimetypes

from base64 import b64encode

import lxml.html  # type: ignore

from cookdown.exceptions import (
    LinkToExternalFileError,
    LinkToNonExistentFileError,
)


HTMLPostprocessingStage = Callable[[lxml.html.HtmlElement], Optional[lxml.html.HtmlElement]]
"""
Function which post-processes a lxml.html.Element tree, optionally returning
the modified element (or modifying in place if None is returned).
"""


def parse_fragment(
    html: str,
    stages: List[HTMLPostprocessingStage] = [],
) -> lxml.html.HtmlElement:
    """
    Parse a HTML fragment and post-process it with the specified stages.

    Returns a ``<div>`` element whose contents is the parsed fragment. Because
    lxml cannot represent bare text or sequences of tags as a fragment, the
    fragment is always wrapped in this ``<div>``. Stages must not remove or
    replace this wrapper.
    """
    tree = lxml.html.fragment_fromstring(f"<div>{html}</div>")

    for stage in stages:
        new_tree = stage(tree)
        if new_tree is not None:
            tree = new_tree

    return tree


def append_fragment(
    container: lxml.html.HtmlElement, fragment: lxml.html.HtmlElement
) -> None:
    """
    Move the contents of ``fragment`` (text and child elements) onto the end of
    ``container``, leaving ``fragment`` empty.
    """
    if fragment.text:
        if len(container):
            last = container[-1]
            last.tail = (last.tail or "") + fragment.text
        else:
            container.text = (container.text or "") + fragment.text
        fragment.text = None

    # NB: lxml moves each element's tail text along with it
    for child in list(fragment):
        container.append(child)


def resolve_local_link(url: str, source: Path, root: Path) -> Optional[Path]:
    """
    Return the local file a link in a recipe refers to, or None if the link
    is not local (e.g. a website or an anchor within the page).

    Relative links are resolved against the directory containing ``source``
    and absolute links (``/images/cake.png``) against ``root``. Any query
    string or fragment is ignored.

    Raises :py:exc:`~cookdown.exceptions.LinkToExternalFileError` if the link
    escapes ``root`` and
    :py:exc:`~cookdown.exceptions.LinkToNonExistentFileError` if it does not
    name an existing file.
    """
    parts = urlsplit(url)
    if parts.scheme != "" or parts.netloc != "" or parts.path == "":
        return None

    path = unquote(parts.path)
    if path.startswith("/"):
        fspath = root.joinpath(*path.split("/")[1:])
    else:
        fspath = source.parent.joinpath(*path.split("/"))
    fspath = fspath.resolve()

    root = root.resolve()
    if fspath != root and root not in fspath.parents:
        raise LinkToExternalFileError(
            f"{source} contains a link to a file outside {root}: {url}"
        )
    if not fspath.is_file():
        raise LinkToNonExistentFileError(
            f"{source} contains a link to non-existent file: {url}"
        )

    return fspath


def file_to_data_url(path: Path) -> str:
    """
    Return a base64 ``data:`` URL holding the contents of a file. The MIME
    type is guessed from the filename.
    """
    mimetype, _encoding = mimetypes.guess_type(str(path))
    if mimetype is None:
        mimetype = "application/octet-stream"
    return f"data:{mimetype};base64,{b64encode(path.read_bytes()).decode('ascii')}"


def embed_local_links_as_data_urls(
    tree: lxml.html.HtmlElement,
    source: Path,
    root: Path,
) -> None:
    """
    A post-processing stage which replaces links to local files (typically a
    recipe's images) with ``data:`` URLs so that the rendered HTML stands
    alone. See :py:func:`resolve_local_link` for how links are resolved.

    Each file is read once, no matter how many times it is linked to.
    """
    data_urls: Dict[Path, str] = {}

    def rewrite_link(url: str) -> str:
        path = resolve_local_link(url, source, root)
        if path is None:
            return url
        if path not in data_urls:
            data_urls[path] = file_to_data_url(path)
        return data_urls[path]

    tree.rewrite_links(rewrite_link)
