from __future__ import annotations

from typing import Any, Optional, Protocol

from pixelite.config.settings import PixeliteSettings
from pixelite.errors import DecodeError
from pixelite.types import RawImage


class DecoderBackend(Protocol):
    """An external decoding facility that produces RGBA pixels."""

    name: str

    def accepts(self, source: Any) -> bool: ...

    async def decode(
        self,
        source: Any,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        settings: Optional[PixeliteSettings] = None,
    ) -> RawImage: ...


def resolve_target_size(
    source_width: int,
    source_height: int,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> tuple[int, int]:
    """Return the output ``(width, height)`` for a decode request.

    Both given: exact size, aspect ratio ignored ("fill"). One given: the other
    follows the source aspect ratio. None given: source size.
    """

    sw, sh = int(source_width), int(source_height)
    if width is None and height is None:
        tw, th = sw, sh
    elif width is not None and height is not None:
        tw, th = int(width), int(height)
    elif width is not None:
        tw = int(width)
        th = max(1, int(round(tw * sh / sw))) if sw > 0 else 0
    else:
        th = int(height)  # type: ignore[arg-type]
        tw = max(1, int(round(th * sw / sh))) if sh > 0 else 0

    if tw <= 0 or th <= 0:
        raise DecodeError(
            f"Invalid canvas dimensions (width: {tw}, height: {th})",
            {
                "width": tw,
                "height": th,
                "source_width": sw,
                "source_height": sh,
            },
        )
    return tw, th
