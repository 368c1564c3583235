"""
Thumbor URL Builder - Fluent construction of image service URLs

Accumulates transformation directives through chained setter calls and
renders them into a (optionally signed) URL of the form::

    {server_url}/{signature}/{operations/}{image_path}
"""

import logging
from typing import List, Optional, Union

from core.constants import UrlConstants
from core.exceptions import ImagePathRequiredError
from core.signing import get_secure_string
from core.utils.enum_converter import enum_to_string
from schemas.common import CropWindow

logger = logging.getLogger(__name__)

# Pixel count (0 = proportional) or the "orig" token
Dimension = Union[int, str]


class ThumborUrlBuilder:
    """
    Builder for Thumbor image URLs.

    Every setter returns the builder so calls can be chained::

        url = (
            ThumborUrlBuilder(None, "http://example.com")
            .set_image_path("/image.jpg")
            .resize(300, 200)
            .build_url()
        )

    Instances are not thread safe; create one builder per URL.
    """

    def __init__(self, security_key: Optional[str], server_url: str):
        """
        Initialize URL builder

        Args:
            security_key: Signing secret, or None to build "unsafe" URLs
            server_url: Base URL of the image service, without trailing slash
        """
        self.security_key = security_key
        self.server_url = server_url

        self.image_path = ""
        self.width: Dimension = UrlConstants.PROPORTIONAL_DIMENSION
        self.height: Dimension = UrlConstants.PROPORTIONAL_DIMENSION
        self.smart = False
        self.fit_in_flag = False
        self.flip_horizontally = False
        self.flip_vertically = False
        self.h_align_value: Optional[str] = None
        self.v_align_value: Optional[str] = None
        self.crop_window: Optional[CropWindow] = None
        self.meta = False
        self.filter_calls: List[str] = []

    def set_image_path(self, image_path: str) -> "ThumborUrlBuilder":
        """Set path of image, dropping one leading slash"""
        if image_path.startswith(UrlConstants.PATH_SEPARATOR):
            image_path = image_path[1:]
        self.image_path = image_path
        return self

    def resize(self, width: Dimension, height: Dimension) -> "ThumborUrlBuilder":
        """
        Resize the image to the specified dimensions. Overrides the dimensions
        of any previous call to `fit_in` or `resize`.

        Use a value of 0 for proportional resizing. E.g. for a 640 x 480 image,
        `.resize(320, 0)` yields a 320 x 240 thumbnail.

        Use a value of 'orig' to use an original image dimension. E.g. for a
        640 x 480 image, `.resize(320, 'orig')` yields a 320 x 480 thumbnail.

        Note that an earlier `fit_in` call stays in effect.
        """
        self.width = width
        self.height = height
        return self

    def fit_in(self, width: Dimension, height: Dimension) -> "ThumborUrlBuilder":
        """
        Resize the image to fit in a box of the specified dimensions.
        Overrides any previous call to `fit_in` or `resize`.
        """
        self.width = width
        self.height = height
        self.fit_in_flag = True
        return self

    def smart_crop(self, smart_crop: bool) -> "ThumborUrlBuilder":
        """Let the image service pick the crop region from image content"""
        self.smart = smart_crop
        return self

    def with_flip_horizontally(self) -> "ThumborUrlBuilder":
        self.flip_horizontally = True
        return self

    def with_flip_vertically(self) -> "ThumborUrlBuilder":
        self.flip_vertically = True
        return self

    def h_align(self, h_align) -> "ThumborUrlBuilder":
        """
        Specify horizontal alignment used if width is altered due to cropping

        Args:
            h_align: 'left', 'center', 'right' (HAlign or plain string), or None to unset
        """
        self.h_align_value = None if h_align is None else enum_to_string(h_align)
        return self

    def v_align(self, v_align) -> "ThumborUrlBuilder":
        """
        Specify vertical alignment used if height is altered due to cropping

        Args:
            v_align: 'top', 'middle', 'bottom' (VAlign or plain string), or None to unset
        """
        self.v_align_value = None if v_align is None else enum_to_string(v_align)
        return self

    def meta_data_only(self) -> "ThumborUrlBuilder":
        """Request JSON metadata instead of the thumbnailed image"""
        self.meta = True
        return self

    def filter(self, filter_call: str) -> "ThumborUrlBuilder":
        """Append a filter call verbatim, e.g. quality(80)"""
        self.filter_calls.append(filter_call)
        return self

    def format(self, image_format) -> "ThumborUrlBuilder":
        """Append a format() filter (ImageFormat or plain string)"""
        return self.filter(f"format({enum_to_string(image_format)})")

    def crop(self, left: int, top: int, right: int, bottom: int) -> "ThumborUrlBuilder":
        """
        Manually specify crop window.

        The call is ignored unless all four coordinates are positive integers.
        """
        crop_window = CropWindow.from_coordinates(left, top, right, bottom)
        if crop_window is None:
            logger.debug(f"Ignoring crop window {left}x{top}:{right}x{bottom}")
        else:
            self.crop_window = crop_window
        return self

    def build_url(self) -> str:
        """
        Combine image path and operations with the signature segment

        Returns:
            Full URL

        Raises:
            ImagePathRequiredError: If no image path was set
        """
        operation = self.get_operation_path()
        secure_string = get_secure_string(self.security_key, operation, self.image_path)

        url = (
            self.server_url
            + UrlConstants.PATH_SEPARATOR
            + secure_string
            + UrlConstants.PATH_SEPARATOR
            + operation
            + self.image_path
        )
        logger.debug(f"Built URL for {self.image_path}: {url}")
        return url

    def get_operation_path(self) -> str:
        """Join operation segments; empty string when there are none"""
        parts = self.url_parts()

        if not parts:
            return ""

        return UrlConstants.PATH_SEPARATOR.join(parts) + UrlConstants.PATH_SEPARATOR

    def url_parts(self) -> List[str]:
        """
        Build list of operation segments in the order the image service expects.

        Returns:
            List of path segments (without slashes)

        Raises:
            ImagePathRequiredError: If no image path was set
        """
        if not self.image_path:
            raise ImagePathRequiredError()

        parts: List[str] = []

        if self.meta:
            parts.append(UrlConstants.META)

        if self.crop_window is not None:
            parts.append(self.crop_window.to_segment())

        if self.fit_in_flag:
            parts.append(UrlConstants.FIT_IN)

        if self.width or self.height or self.flip_horizontally or self.flip_vertically:
            parts.append(self._size_segment())

        if self.h_align_value is not None:
            parts.append(self.h_align_value)

        if self.v_align_value is not None:
            parts.append(self.v_align_value)

        if self.smart:
            parts.append(UrlConstants.SMART)

        if self.filter_calls:
            parts.append(
                UrlConstants.FILTERS_PREFIX + UrlConstants.FILTER_SEPARATOR.join(self.filter_calls)
            )

        return parts

    def _size_segment(self) -> str:
        """Render [-]WIDTHx[-]HEIGHT"""
        size = ""

        if self.flip_horizontally:
            size += UrlConstants.FLIP_MARKER
        size += str(self.width)

        size += UrlConstants.SIZE_SEPARATOR

        if self.flip_vertically:
            size += UrlConstants.FLIP_MARKER
        size += str(self.height)

        return size
