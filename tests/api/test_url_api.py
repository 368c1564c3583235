"""
API Integration Tests for URL Endpoints
"""


class TestUrlAPI:
    """Integration tests for URL API endpoints"""

    def test_build_resize(self, client):
        """Test building a resized image URL"""
        response = client.post(
            "/api/url/build", json={"image_path": "/image.jpg", "width": 300, "height": 200}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["url"] == "http://example.com/unsafe/300x200/image.jpg"
        assert data["operation_path"] == "300x200/"
        assert data["signed"] is False

    def test_build_fit_in_aligned(self, client):
        """Test fit-in with alignment"""
        request_data = {
            "image_path": "a.png",
            "width": 100,
            "height": 0,
            "fit_in": True,
            "h_align": "left",
            "v_align": "top",
        }
        response = client.post("/api/url/build", json=request_data)

        assert response.status_code == 200
        assert response.json()["url"] == "http://example.com/unsafe/fit-in/100x0/left/top/a.png"

    def test_build_filters_and_format(self, client):
        """Test filters keep request order and format goes last"""
        request_data = {"image_path": "x.jpg", "filters": ["quality(80)"], "format": "webp"}
        response = client.post("/api/url/build", json=request_data)

        assert response.status_code == 200
        assert response.json()["operation_path"] == "filters:quality(80):format(webp)/"

    def test_build_original_dimension(self, client):
        """Test the 'orig' dimension token"""
        response = client.post(
            "/api/url/build", json={"image_path": "x.jpg", "width": 320, "height": "orig"}
        )

        assert response.status_code == 200
        assert response.json()["operation_path"] == "320xorig/"

    def test_build_signed(self, signed_client):
        """Test the signed service never returns unsafe URLs"""
        response = signed_client.post("/api/url/build", json={"image_path": "x.jpg", "width": 10})

        assert response.status_code == 200
        data = response.json()
        assert data["signed"] is True
        assert "/unsafe/" not in data["url"]

    def test_build_empty_image_path(self, client):
        """Test empty image path is rejected with 400"""
        response = client.post("/api/url/build", json={"image_path": ""})

        assert response.status_code == 400
        assert "can't be null or empty" in response.json()["detail"]

    def test_build_missing_image_path(self, client):
        """Test missing image path fails validation"""
        response = client.post("/api/url/build", json={"width": 10})

        assert response.status_code == 422

    def test_build_invalid_alignment(self, client):
        """Test unknown alignment values fail validation"""
        response = client.post("/api/url/build", json={"image_path": "x.jpg", "h_align": "up"})

        assert response.status_code == 422

    def test_build_negative_width(self, client):
        """Test negative dimensions fail validation"""
        response = client.post("/api/url/build", json={"image_path": "x.jpg", "width": -5})

        assert response.status_code == 422

    def test_build_unknown_field(self, client):
        """Test extra fields are rejected"""
        response = client.post("/api/url/build", json={"image_path": "x.jpg", "rotate": 90})

        assert response.status_code == 422


class TestSystemAPI:
    """Integration tests for system endpoints"""

    def test_health(self, client):
        response = client.get("/api/system/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_status(self, signed_client):
        response = signed_client.get("/api/system/status")

        assert response.status_code == 200
        data = response.json()
        assert data["signed"] is True
        assert data["server_url"] == "http://example.com"
        assert data["uptime"] >= 0

    def test_config_redacts_key(self, signed_client):
        """Test the security key never leaves the service"""
        response = signed_client.get("/api/system/config")

        assert response.status_code == 200
        assert response.json()["thumbor"]["security_key"] == "***"
        assert "my-security-key" not in response.text

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Thumbor URL Builder"

    def test_app_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["services"]["url_service"] is True
