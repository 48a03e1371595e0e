"""
Edit Service - Business logic for registry edit operations.

Every operation reads its inputs from the image registry, validates all
preconditions, computes the result, and only then inserts it under the
destination name(s). A rejected operation leaves the registry untouched.
"""

import logging
from typing import Callable, Dict, List, Optional

from core.enums import Component, FlipAxis, OperationKind
from core.exceptions import DuplicateNameError, ImagingError, InvalidDimensionsError
from core.pixel_buffer import PixelBuffer
from core.region import FULL, MaskRegion, Region, SplitRegion, apply_region
from core.registry import ImageRegistry
from core.utils.decorators import timer
from imaging import (
    blur,
    brightness,
    color_correct,
    combine_rgb,
    component,
    compress,
    compute_histogram,
    fit_tone_curve,
    flip,
    levels_adjust,
    luma,
    render_histogram,
    resample,
    sepia,
    sharpen,
    split_rgb,
)
from schemas.common import RegionSpec
from schemas.operations import OperationResult

logger = logging.getLogger(__name__)


class EditService:
    """
    Service for named-image edit operations.

    The service holds no lock; callers sharing the registry between threads
    must serialize calls.
    """

    def __init__(self, registry: ImageRegistry, allow_upscale: bool = True):
        """
        Initialize edit service.

        Args:
            registry: Image registry shared with the image service
            allow_upscale: Whether downscale may produce a larger image
        """
        self.registry = registry
        self.allow_upscale = allow_upscale
        self._handlers: Dict[OperationKind, Callable] = {
            OperationKind.COMPONENT: lambda op: [
                self.component(op.source, op.dest, op.component, self._resolve_region(op.region))
            ],
            OperationKind.GREYSCALE: lambda op: [
                self.greyscale(op.source, op.dest, self._resolve_region(op.region))
            ],
            OperationKind.SEPIA: lambda op: [
                self.sepia(op.source, op.dest, self._resolve_region(op.region))
            ],
            OperationKind.BRIGHTEN: lambda op: [
                self.brighten(op.source, op.dest, op.amount, self._resolve_region(op.region))
            ],
            OperationKind.DARKEN: lambda op: [
                self.darken(op.source, op.dest, op.amount, self._resolve_region(op.region))
            ],
            OperationKind.BLUR: lambda op: [
                self.blur(op.source, op.dest, self._resolve_region(op.region))
            ],
            OperationKind.SHARPEN: lambda op: [
                self.sharpen(op.source, op.dest, self._resolve_region(op.region))
            ],
            OperationKind.HORIZONTAL_FLIP: lambda op: [
                self.flip(op.source, op.dest, FlipAxis.HORIZONTAL)
            ],
            OperationKind.VERTICAL_FLIP: lambda op: [
                self.flip(op.source, op.dest, FlipAxis.VERTICAL)
            ],
            OperationKind.RGB_SPLIT: lambda op: self.rgb_split(
                op.source, op.red_dest, op.green_dest, op.blue_dest
            ),
            OperationKind.RGB_COMBINE: lambda op: [
                self.rgb_combine(op.red, op.green, op.blue, op.dest)
            ],
            OperationKind.HISTOGRAM: lambda op: [self.histogram(op.source, op.dest)],
            OperationKind.COLOR_CORRECT: lambda op: [
                self.color_correct(op.source, op.dest, self._resolve_region(op.region))
            ],
            OperationKind.LEVELS_ADJUST: lambda op: [
                self.levels_adjust(
                    op.source,
                    op.dest,
                    op.black,
                    op.mid,
                    op.white,
                    self._resolve_region(op.region),
                )
            ],
            OperationKind.COMPRESS: lambda op: [
                self.compress(op.source, op.dest, op.percentage)
            ],
            OperationKind.DOWNSCALE: lambda op: [
                self.downscale(op.source, op.dest, op.width, op.height)
            ],
        }
        missing = set(OperationKind) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for operation kinds: {sorted(m.value for m in missing)}")

    @property
    def supported_kinds(self) -> List[OperationKind]:
        return list(self._handlers)

    def execute(self, operation) -> OperationResult:
        """
        Run one validated operation request.

        Args:
            operation: Any request model from ``schemas.operations``

        Returns:
            OperationResult naming the images written

        Raises:
            ImagingError: The operation was rejected; nothing was written
        """
        kind = OperationKind(operation.kind)
        handler = self._handlers[kind]

        try:
            with timer() as t:
                written = handler(operation)
        except ImagingError as e:
            logger.warning(f"Rejected {kind.value}: {e}")
            raise

        first = self.registry.get(written[0])
        logger.info(f"{kind.value} wrote {', '.join(written)} in {t['ms']}ms")
        return OperationResult(
            kind=kind.value,
            written=written,
            width=first.width,
            height=first.height,
            processing_time_ms=t["ms"],
        )

    def _resolve_region(self, region_spec: Optional[RegionSpec]) -> Region:
        """Turn a region request into a Region, looking up the mask image by name"""
        if region_spec is None:
            return FULL
        if region_spec.mask is not None:
            return MaskRegion(self.registry.get(region_spec.mask))
        if region_spec.split is not None:
            return SplitRegion(region_spec.split)
        return FULL

    def _store(self, dest: str, image: PixelBuffer, origin: str) -> str:
        self.registry.add(dest, image, origin=origin)
        return dest

    def _regional(self, source: str, dest: str, transform, region: Region, origin: str) -> str:
        """Shared path of every region-restrictable operation"""
        image = self.registry.get(source)
        self.registry.require_absent(dest)
        result = apply_region(image, transform, region)
        return self._store(dest, result, f"{origin}({source}, {region.describe()})")

    # Color transforms

    def component(
        self, source: str, dest: str, kind: Component, region: Region = FULL
    ) -> str:
        kind = Component(kind)
        return self._regional(source, dest, component(kind), region, kind.value)

    def greyscale(self, source: str, dest: str, region: Region = FULL) -> str:
        return self._regional(source, dest, luma, region, "greyscale")

    def sepia(self, source: str, dest: str, region: Region = FULL) -> str:
        return self._regional(source, dest, sepia, region, "sepia")

    def brighten(self, source: str, dest: str, amount: int, region: Region = FULL) -> str:
        return self._regional(source, dest, brightness(amount), region, f"brighten {amount}")

    def darken(self, source: str, dest: str, amount: int, region: Region = FULL) -> str:
        return self._regional(source, dest, brightness(-amount), region, f"darken {amount}")

    # Spatial filters

    def blur(self, source: str, dest: str, region: Region = FULL) -> str:
        return self._regional(source, dest, blur, region, "blur")

    def sharpen(self, source: str, dest: str, region: Region = FULL) -> str:
        return self._regional(source, dest, sharpen, region, "sharpen")

    # Tone

    def color_correct(self, source: str, dest: str, region: Region = FULL) -> str:
        """Shift each channel so its histogram peak meets the average peak"""
        return self._regional(source, dest, color_correct, region, "color-correct")

    def levels_adjust(
        self,
        source: str,
        dest: str,
        black: int,
        mid: int,
        white: int,
        region: Region = FULL,
    ) -> str:
        """
        Remap tones through the quadratic passing (black, 0), (mid, 128), (white, 255).

        Raises:
            OutOfRangeError: Unless 0 <= black < mid < white <= 255
        """
        curve = fit_tone_curve(black, mid, white)
        return self._regional(
            source,
            dest,
            lambda image: levels_adjust(image, curve),
            region,
            f"levels {black}/{mid}/{white}",
        )

    # Whole-image operations

    def flip(self, source: str, dest: str, axis: FlipAxis) -> str:
        axis = FlipAxis(axis)
        image = self.registry.get(source)
        self.registry.require_absent(dest)
        return self._store(dest, flip(image, axis), f"{axis.value}-flip({source})")

    def rgb_split(self, source: str, red_dest: str, green_dest: str, blue_dest: str) -> List[str]:
        """
        Write the red, green and blue component images of ``source``.

        All three names are checked before any image is written.
        """
        image = self.registry.get(source)
        dests = [red_dest, green_dest, blue_dest]
        for i, name in enumerate(dests):
            if name in dests[:i]:
                raise DuplicateNameError(name)
        self.registry.require_absent(*dests)

        for name, channel_image, channel in zip(dests, split_rgb(image), ("red", "green", "blue")):
            self._store(name, channel_image, f"rgb-split {channel}({source})")
        return dests

    def rgb_combine(self, red: str, green: str, blue: str, dest: str) -> str:
        """
        Combine the red channel of ``red``, green of ``green`` and blue of ``blue``.

        Raises:
            DimensionMismatchError: The three sources differ in size
        """
        red_image = self.registry.get(red)
        green_image = self.registry.get(green)
        blue_image = self.registry.get(blue)
        self.registry.require_absent(dest)
        combined = combine_rgb(red_image, green_image, blue_image)
        return self._store(dest, combined, f"rgb-combine({red}, {green}, {blue})")

    def histogram(self, source: str, dest: str) -> str:
        """Render the 256x256 histogram chart of ``source``"""
        image = self.registry.get(source)
        self.registry.require_absent(dest)
        chart = render_histogram(compute_histogram(image))
        return self._store(dest, chart, f"histogram({source})")

    def compress(self, source: str, dest: str, percentage: int) -> str:
        """Haar wavelet compression discarding ``percentage`` % of coefficients"""
        image = self.registry.get(source)
        self.registry.require_absent(dest)
        result = compress(image, percentage)
        return self._store(dest, result, f"compress {percentage}%({source})")

    def downscale(self, source: str, dest: str, width: int, height: int) -> str:
        """
        Bilinear resample of ``source`` to ``width`` x ``height``.

        Raises:
            InvalidDimensionsError: Non-positive target, or a larger target
                while upscaling is disabled
        """
        image = self.registry.get(source)
        self.registry.require_absent(dest)
        if not self.allow_upscale and (width > image.width or height > image.height):
            raise InvalidDimensionsError(
                f"Target {width}x{height} is larger than source "
                f"{image.width}x{image.height} and upscaling is disabled",
                width=width,
                height=height,
            )
        result = resample(image, width, height)
        return self._store(dest, result, f"downscale {width}x{height}({source})")
