"""Tests for FastAPI endpoints."""
import json


class TestAnalyzeEndpoint:
    """Test suite for POST /api/analyze."""

    def test_success_body_is_json_encoded_string(self, api_client, sample_json, sample_result):
        response = api_client.post("/api/analyze", json={"text": "Lovely stay."})
        assert response.status_code == 200
        body = response.json()
        assert body == sample_json
        assert json.loads(body) == sample_result

    def test_provider_failure_returns_error_details(self, api_client, fake_openai):
        fake_openai.chat.completions.create.side_effect = RuntimeError("Rate limit reached")

        response = api_client.post("/api/analyze", json={"text": "Lovely stay."})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Error analyzing sentiment",
            "details": "Rate limit reached",
        }

    def test_blank_text_returns_400(self, api_client, fake_openai):
        response = api_client.post("/api/analyze", json={"text": ""})
        assert response.status_code == 400
        assert "error" in response.json()
        fake_openai.chat.completions.create.assert_not_called()

    def test_missing_text_is_unprocessable(self, api_client):
        response = api_client.post("/api/analyze", json={})
        assert response.status_code == 422
