class CookdownError(Exception):
    """Base class for all exceptions thrown by cookdown."""


class RecipeLoadError(CookdownError):
    """Thrown when a recipe model cannot be read from its JSON form."""


class SettingsError(CookdownError):
    """Thrown when a settings file contains unknown or invalid settings."""


class RenderError(CookdownError):
    """Base class for exceptions thrown while rendering markdown."""


class LinkToExternalFileError(RenderError):
    """Thrown when a file outside the recipe's root directory is linked to or referenced."""


class LinkToNonExistentFileError(RenderError):
    """Thrown when a non-file is linked to or referenced."""


class RenderCancelled(RenderError):
    """Thrown when the component owning a render is unloaded part-way through."""
