"""Channel classification for source pixel layouts."""

import structlog

from bitmapsdf.domain import ChannelRole, PixelFormat
from bitmapsdf.exceptions import UnsupportedFormatError

logger = structlog.get_logger(__name__)

_CHANNEL_ROLES: dict[PixelFormat, tuple[ChannelRole, ...]] = {
    PixelFormat.G8: (ChannelRole.ALPHA,),
    PixelFormat.BGRA8: (
        ChannelRole.BLUE,
        ChannelRole.GREEN,
        ChannelRole.RED,
        ChannelRole.ALPHA,
    ),
    PixelFormat.BGRE8: (
        ChannelRole.BLUE,
        ChannelRole.GREEN,
        ChannelRole.RED,
        ChannelRole.ALPHA,
    ),
    PixelFormat.RGBA8: (
        ChannelRole.RED,
        ChannelRole.GREEN,
        ChannelRole.BLUE,
        ChannelRole.ALPHA,
    ),
}


def classify_channels(pixel_format: PixelFormat) -> tuple[ChannelRole, ...]:
    """Map a pixel layout to its channel roles in byte order.

    Single channel layouts hold one Alpha-role channel; four channel layouts
    list their roles in on-disk byte order.

    Args:
        pixel_format: Source pixel layout

    Returns:
        Channel roles indexed by byte offset

    Raises:
        UnsupportedFormatError: For 16-bit and floating point layouts

    Examples:
        >>> classify_channels(PixelFormat.G8)
        (<ChannelRole.ALPHA: 'alpha'>,)
    """
    roles = _CHANNEL_ROLES.get(pixel_format)
    if roles is not None:
        return roles

    reason = "16 bit and floating point formats are not supported"
    logger.error(
        "Unsupported source format",
        pixel_format=pixel_format.value,
        reason=reason,
    )
    raise UnsupportedFormatError(pixel_format.value, reason)
