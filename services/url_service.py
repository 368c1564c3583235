"""
URL Service - Business logic for building image service URLs.

This service owns the signing key and server URL and translates API
requests into builder calls. A fresh builder is created per request.
"""

import logging
from typing import Optional

from core.url_builder import ThumborUrlBuilder
from schemas import UrlBuildRequest, UrlBuildResponse

logger = logging.getLogger(__name__)


class UrlService:
    """
    Service for URL building operations.
    """

    def __init__(self, security_key: Optional[str], server_url: str):
        """
        Initialize URL service.

        Args:
            security_key: Signing secret, or None for unsigned URLs
            server_url: Base URL of the image service
        """
        self.security_key = security_key
        self.server_url = server_url.rstrip("/")

        logger.info(
            f"URL service initialized for {self.server_url} "
            f"({'signed' if self.is_signed else 'unsafe'} URLs)"
        )

    @property
    def is_signed(self) -> bool:
        return self.security_key is not None

    def new_builder(self) -> ThumborUrlBuilder:
        """Create an empty builder bound to this service's key and server"""
        return ThumborUrlBuilder(self.security_key, self.server_url)

    def apply_request(self, builder: ThumborUrlBuilder, request: UrlBuildRequest) -> ThumborUrlBuilder:
        """
        Apply every option of a request to a builder.

        Args:
            builder: Builder to configure
            request: URL build request

        Returns:
            The configured builder
        """
        builder.set_image_path(request.image_path)

        if request.fit_in:
            builder.fit_in(request.width, request.height)
        else:
            builder.resize(request.width, request.height)

        builder.smart_crop(request.smart)

        if request.flip_horizontally:
            builder.with_flip_horizontally()
        if request.flip_vertically:
            builder.with_flip_vertically()

        if request.h_align is not None:
            builder.h_align(request.h_align)
        if request.v_align is not None:
            builder.v_align(request.v_align)

        if request.crop is not None:
            builder.crop(request.crop.left, request.crop.top, request.crop.right, request.crop.bottom)

        if request.meta:
            builder.meta_data_only()

        for filter_call in request.filters:
            builder.filter(filter_call)

        if request.format is not None:
            builder.format(request.format)

        return builder

    def build(self, request: UrlBuildRequest) -> UrlBuildResponse:
        """
        Build a URL from a request.

        Args:
            request: URL build request

        Returns:
            UrlBuildResponse with the URL and its operation path

        Raises:
            ImagePathRequiredError: If the request has an empty image path
        """
        builder = self.apply_request(self.new_builder(), request)

        operation_path = builder.get_operation_path()
        url = builder.build_url()

        logger.info(f"Built URL for {builder.image_path} with operations '{operation_path}'")

        return UrlBuildResponse(url=url, operation_path=operation_path, signed=self.is_signed)
