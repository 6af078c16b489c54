"""
Focus-aware crop geometry.

Cover scaling: the source is scaled until it fills the output rectangle, then
translated so the focus point sits as close to the output centre as possible
without exposing any area outside the source.
"""

from __future__ import annotations

from typing import Optional

import cv2
import numpy as np

from models.focus import CropTransform, FocusPoint
from algorithms.saliency.errors import InvalidDimensionsError


def compute_transform(
    src_w: int,
    src_h: int,
    focus: FocusPoint,
    out_w: int,
    out_h: int,
) -> CropTransform:
    """
    Compute the scale + translation that crops src into out around focus.

    Args:
        src_w, src_h: Source image size in pixels.
        focus: Normalized focus point.
        out_w, out_h: Output size in pixels.

    Returns:
        CropTransform whose scaled source fully covers the output rectangle.

    Raises:
        InvalidDimensionsError: If any dimension is not positive.
    """
    if min(src_w, src_h, out_w, out_h) <= 0:
        raise InvalidDimensionsError(
            f"dimensions must be positive: src={src_w}x{src_h} out={out_w}x{out_h}"
        )

    if src_w * out_h > out_w * src_h:
        # source is wider: match heights, slide horizontally
        scale = out_h / src_h
        tx = -src_w * scale * focus.x + out_w / 2.0
        tx = max(min(tx, 0.0), out_w - src_w * scale)
        return CropTransform(scale=scale, tx=tx, ty=0.0)

    scale = out_w / src_w
    ty = -src_h * scale * focus.y + out_h / 2.0
    ty = max(min(ty, 0.0), out_h - src_h * scale)
    return CropTransform(scale=scale, tx=0.0, ty=ty)


def apply_transform(
    image: np.ndarray,
    transform: CropTransform,
    out_w: int,
    out_h: int,
    recycled: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Draw image into an out_h x out_w frame with bilinear filtering.

    If ``recycled`` is given it must already have the output shape and dtype;
    it is overwritten in place and returned.
    """
    if out_w <= 0 or out_h <= 0:
        raise InvalidDimensionsError(f"output size must be positive, got {out_w}x{out_h}")

    expected_shape = (out_h, out_w) + image.shape[2:]
    if recycled is not None:
        if recycled.shape != expected_shape or recycled.dtype != image.dtype:
            raise InvalidDimensionsError(
                f"recycled buffer {recycled.shape}/{recycled.dtype} does not match "
                f"{expected_shape}/{image.dtype}"
            )
        cv2.warpAffine(
            image,
            transform.to_matrix(),
            (out_w, out_h),
            dst=recycled,
            flags=cv2.INTER_LINEAR,
            borderMode=cv2.BORDER_REPLICATE,
        )
        return recycled

    return cv2.warpAffine(
        image,
        transform.to_matrix(),
        (out_w, out_h),
        flags=cv2.INTER_LINEAR,
        borderMode=cv2.BORDER_REPLICATE,
    )


def crop(
    image: np.ndarray,
    focus: FocusPoint,
    out_w: int,
    out_h: int,
    recycled: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Crop and scale image to out_w x out_h, keeping focus in view."""
    src_h, src_w = image.shape[:2]
    transform = compute_transform(src_w, src_h, focus, out_w, out_h)
    return apply_transform(image, transform, out_w, out_h, recycled=recycled)
