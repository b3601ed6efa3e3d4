"""
The ``cookdown`` command renders a single parsed recipe into a stand-alone
HTML page.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ cookdown RECIPE_JSON [OUTPUT_FILENAME]

This will render the recipe in the indicated JSON file (as produced by a
Cooklang parser). If no output filename is given, the input filename with the
suffix replaced with '.html' is used.

Layout
======

Settings may be loaded from a JSON file using ``--settings``. Individual
settings may also be overridden with ``--heading-level`` and ``--steps``.

Links and images
================

By default links to local files and images are embedded as ``data:`` URLs. This
means that the generated HTML page is completely standalone and does not depend
on any other files. This feature can be disabled using the
``--no-embed-local-links`` or ``-E`` flag.
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from dataclasses import replace

from cookdown.exceptions import CookdownError

from cookdown.settings import DEFAULT_SETTINGS, StepStyle, load_settings

from cookdown.standalone_page import generate_standalone_page


def main() -> None:
    parser = ArgumentParser(
        description="""
            Render a Cooklang recipe (in its parsed JSON form) into a
            standalone HTML page.
        """,
    )

    parser.add_argument(
        "recipe",
        type=Path,
        help="""
            The filename of the recipe JSON file to render.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The output filename for the generated HTML file. Defaults to the
            input filename with the extension replaced with .html if no name is
            given.
        """,
    )

    parser.add_argument(
        "--settings",
        type=Path,
        metavar="SETTINGS_JSON",
        default=None,
        help="""
            A JSON file containing rendering settings.
        """,
    )
    parser.add_argument(
        "--heading-level",
        type=int,
        choices=range(1, 7),
        metavar="LEVEL",
        default=None,
        help="""
            The heading level (1-6) to use for section headings.
        """,
    )
    parser.add_argument(
        "--steps",
        choices=[style.value for style in StepStyle],
        default=None,
        help="""
            How to lay out the steps of the recipe.
        """,
    )

    parser.add_argument(
        "--embed-local-links",
        "-e",
        action="store_true",
        default=True,
        help="""
            Replace all local link and image URLs with data: URLs embedding the
            linked resource directly into the HTML. This is the default mode.
        """,
    )
    parser.add_argument(
        "--no-embed-local-links",
        "-E",
        action="store_false",
        dest="embed_local_links",
        help="""
            Leave local link and image URLs as they are.
        """,
    )

    args = parser.parse_args()

    try:
        settings = DEFAULT_SETTINGS
        if args.settings is not None:
            settings = load_settings(args.settings)
        if args.heading_level is not None:
            settings = replace(settings, heading_level=args.heading_level)
        if args.steps is not None:
            settings = replace(settings, step_style=StepStyle(args.steps))

        html = generate_standalone_page(
            args.recipe,
            settings=settings,
            embed_local_links=args.embed_local_links,
        )
    except CookdownError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    output = args.output
    if output is None:
        output = args.recipe.with_suffix(".html")

    with output.open("w") as f:
        f.write(html)


if __name__ == "__main__":
    main()
