"""Exception hierarchy for Handscript."""


class HandscriptError(Exception):
    """Base exception for all Handscript errors."""

    pass


class InputShapeError(HandscriptError):
    """Pixel buffer length does not match the declared dimensions."""

    def __init__(self, character: str, expected: int, actual: int) -> None:
        self.character = character
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Pixel buffer for '{character}' has {actual} bytes, expected {expected}"
        )


class ImageLoadError(HandscriptError):
    """Error loading a glyph drawing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class AssemblyError(HandscriptError):
    """The font could not be assembled from the glyph records."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Font assembly failed: {reason}")


class FontSaveError(HandscriptError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")
