"""
Tests for UrlService
"""

import pytest

from core.exceptions import ImagePathRequiredError
from schemas import UrlBuildRequest


class TestUrlService:
    """Test UrlService functionality"""

    def test_initialization(self, url_service, signed_url_service):
        """Test signing mode follows the security key"""
        assert url_service.is_signed is False
        assert signed_url_service.is_signed is True

    def test_trailing_slash_removed(self):
        """Test the server URL is normalized"""
        from services.url_service import UrlService

        service = UrlService(security_key=None, server_url="http://example.com/")
        assert service.server_url == "http://example.com"

    def test_new_builder_is_fresh(self, url_service):
        """Test each builder starts empty"""
        first = url_service.new_builder().set_image_path("a.jpg").smart_crop(True)
        second = url_service.new_builder()

        assert first is not second
        assert second.smart is False
        assert second.server_url == "http://example.com"

    def test_build_resize(self, url_service):
        """Test a plain resize request"""
        response = url_service.build(
            UrlBuildRequest(image_path="/image.jpg", width=300, height=200)
        )

        assert response.url == "http://example.com/unsafe/300x200/image.jpg"
        assert response.operation_path == "300x200/"
        assert response.signed is False

    def test_build_all_options(self, url_service):
        """Test every option maps to its segment"""
        request = UrlBuildRequest(
            image_path="cat.jpg",
            width=100,
            height="orig",
            fit_in=True,
            smart=True,
            flip_horizontally=True,
            flip_vertically=True,
            h_align="left",
            v_align="top",
            crop={"left": 1, "top": 2, "right": 3, "bottom": 4},
            meta=True,
            filters=["quality(80)", "grayscale()"],
            format="webp",
        )

        response = url_service.build(request)

        assert response.operation_path == (
            "meta/1x2:3x4/fit-in/-100x-orig/left/top/smart/"
            "filters:quality(80):grayscale():format(webp)/"
        )

    def test_build_invalid_crop_ignored(self, url_service):
        """Test a non-positive crop is dropped"""
        request = UrlBuildRequest(image_path="a.jpg", crop={"left": 0, "top": 5, "right": 10, "bottom": 10})
        response = url_service.build(request)

        assert response.url == "http://example.com/unsafe/a.jpg"

    def test_build_signed(self, signed_url_service):
        """Test signed requests do not use 'unsafe'"""
        response = signed_url_service.build(UrlBuildRequest(image_path="a.jpg", width=10))

        assert response.signed is True
        assert "/unsafe/" not in response.url
        assert response.url.endswith("/10x0/a.jpg")

    def test_build_empty_image_path(self, url_service):
        """Test empty image path raises"""
        with pytest.raises(ImagePathRequiredError):
            url_service.build(UrlBuildRequest(image_path=""))
