"""
Rules for formatting the parts of a recipe as markdown.

.. autofunction:: render_heading

.. autofunction:: render_ingredient

.. autofunction:: render_cookware

.. autofunction:: render_step
"""

from cookdown.number_formatting import format_amount

from cookdown.recipe import BlockKind, Ingredient, Cookware, Step


def render_heading(text: str, level: int = 2) -> str:
    return f"{'#' * level} {text}"


def render_ingredient(ingredient: Ingredient) -> str:
    """
    Render an ingredient in bold. When the ingredient has a quantity, the
    amount and units are shown before the name, e.g. '**2cups flour**'.

    NB: No space is inserted between the amount and units, following the
    Cooklang convention of writing quantities like '2cups'.
    """
    if ingredient.quantity > 0:
        amount = format_amount(ingredient.amount)
        return f"**{amount}{ingredient.units} {ingredient.name}**"
    else:
        return f"**{ingredient.name}**"


def render_cookware(cookware: Cookware) -> str:
    return cookware.name


def render_step(step: Step) -> str:
    """
    Render a step as a single line of markdown. Each block is surrounded by a
    single space on either side: text is included verbatim, ingredients are
    formatted as in :py:func:`render_ingredient` and cookware is italicised.

    Blocks of any other kind are skipped.
    """
    out = ""
    for block in step.line:
        kind = getattr(block, "kind", None)
        if kind is BlockKind.TEXT:
            out += f" {block.value} "  # type: ignore
        elif kind is BlockKind.INGREDIENT:
            out += f" {render_ingredient(block)} "  # type: ignore
        elif kind is BlockKind.COOKWARE:
            out += f" *{block.name}* "  # type: ignore
    return out
