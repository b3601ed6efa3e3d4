"""
Markdown rendering for recipe fragments.

Internally the :py:mod:`marko` markdown parser is used providing support for
`CommonMark <https://commonmark.org/>`_ markdown syntax. Rendered HTML is
parsed with :py:mod:`lxml` so that it can be post-processed (see
:py:mod:`cookdown.markdown.html_postprocessing`) and attached to a container
element.

.. autodata:: cookdown.markdown.engine.MarkdownEngine

.. autoclass:: cookdown.markdown.engine.MarkoEngine
    :members:
"""

from cookdown.markdown.engine import MarkdownEngine, MarkoEngine, check_still_loaded
