"""Exception hierarchy for Bitmapsdf."""


class BitmapSdfError(Exception):
    """Base exception for all Bitmapsdf errors."""

    pass


class BitmapError(BitmapSdfError):
    """Errors related to bitmap loading or saving."""

    pass


class BitmapLoadError(BitmapError):
    """Error loading a bitmap file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load bitmap '{path}': {reason}")


class BitmapSaveError(BitmapError):
    """Error saving a bitmap file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save bitmap '{path}': {reason}")


class FormatError(BitmapSdfError):
    """Errors related to pixel layouts."""

    pass


class UnsupportedFormatError(FormatError):
    """Pixel format cannot be converted to a distance field."""

    def __init__(self, pixel_format: str, reason: str) -> None:
        self.pixel_format = pixel_format
        self.reason = reason
        super().__init__(f"Unsupported pixel format '{pixel_format}': {reason}")


class ConversionError(BitmapSdfError):
    """Errors raised while building a distance field."""

    pass


class InsufficientIntersectionsError(ConversionError):
    """A channel has fewer than two threshold crossings."""

    def __init__(self, channel: str, count: int) -> None:
        self.channel = channel
        self.count = count
        super().__init__(
            f"Channel '{channel}' has {count} intersections, at least 2 are required"
        )
