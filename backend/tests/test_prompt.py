"""
/api/ask-gemini (admin) and /api/ask-gemini-public routes.
"""

from types import SimpleNamespace

import pytest

from gemini.personas import ADMIN_ANALYST, PUBLIC_GUIDE

RAW_UPSTREAM_ERROR = "API key not valid. Please pass a valid API key. [key=AIza-secret]"


def _system_instruction(genai_client):
    return genai_client.aio.models.generate_content.await_args.kwargs["config"].system_instruction


# ── Public route ──────────────────────────────────────────────────────────


class TestAskGeminiPublic:

    def test_returns_upstream_text(self, client):
        resp = client.post("/api/ask-gemini-public", json={"prompt": "hello"})

        assert resp.status_code == 200
        assert resp.json() == {"text": "hi there"}

    def test_uses_public_persona_without_auth(self, client, genai_client):
        client.post("/api/ask-gemini-public", json={"prompt": "Where can I eat near Ram Ghat?"})

        kwargs = genai_client.aio.models.generate_content.await_args.kwargs
        assert kwargs["contents"] == "Where can I eat near Ram Ghat?"
        assert _system_instruction(genai_client) == PUBLIC_GUIDE.instruction

    def test_empty_body_is_400(self, client, genai_client):
        resp = client.post("/api/ask-gemini-public")

        assert resp.status_code == 400
        assert "Prompt is required" in resp.json()["message"]
        genai_client.aio.models.generate_content.assert_not_called()

    @pytest.mark.parametrize("payload", [{}, {"prompt": ""}, {"prompt": None}, {"question": "hi"}])
    def test_missing_prompt_is_400(self, client, genai_client, payload):
        resp = client.post("/api/ask-gemini-public", json=payload)

        assert resp.status_code == 400
        assert resp.json() == {"message": "Prompt is required"}
        genai_client.aio.models.generate_content.assert_not_called()

    def test_whitespace_prompt_is_forwarded(self, client, genai_client):
        resp = client.post("/api/ask-gemini-public", json={"prompt": "   "})

        assert resp.status_code == 200
        assert genai_client.aio.models.generate_content.await_args.kwargs["contents"] == "   "

    def test_empty_completion_is_200(self, client, genai_client):
        genai_client.aio.models.generate_content.return_value = SimpleNamespace(text="")

        resp = client.post("/api/ask-gemini-public", json={"prompt": "hello"})

        assert resp.status_code == 200
        assert resp.json() == {"text": ""}

    def test_upstream_failure_is_500(self, client, genai_client):
        genai_client.aio.models.generate_content.side_effect = RuntimeError(RAW_UPSTREAM_ERROR)

        resp = client.post("/api/ask-gemini-public", json={"prompt": "hello"})

        assert resp.status_code == 500
        assert resp.json() == {"message": "Error contacting the Gemini API."}
        assert "AIza-secret" not in resp.text


# ── Admin route ───────────────────────────────────────────────────────────


class TestAskGeminiAdmin:

    def test_returns_upstream_text_with_admin_persona(self, client, genai_client, auth_headers):
        genai_client.aio.models.generate_content.return_value = SimpleNamespace(
            text="Crowd is up 4% on last hour; open gate 3."
        )

        resp = client.post("/api/ask-gemini", json={"prompt": "Summarise crowd trend"}, headers=auth_headers)

        assert resp.status_code == 200
        assert resp.json() == {"text": "Crowd is up 4% on last hour; open gate 3."}
        assert _system_instruction(genai_client) == ADMIN_ANALYST.instruction

    def test_no_token_is_401_and_upstream_not_called(self, client, genai_client):
        resp = client.post("/api/ask-gemini", json={"prompt": "hello"})

        assert resp.status_code == 401
        genai_client.aio.models.generate_content.assert_not_called()

    def test_unregistered_token_is_403(self, client, genai_client):
        resp = client.post(
            "/api/ask-gemini",
            json={"prompt": "hello"},
            headers={"Authorization": "Bearer " + "0" * 64},
        )

        assert resp.status_code == 403
        genai_client.aio.models.generate_content.assert_not_called()

    def test_missing_prompt_is_400(self, client, auth_headers):
        resp = client.post("/api/ask-gemini", json={}, headers=auth_headers)

        assert resp.status_code == 400
        assert "Prompt is required" in resp.json()["message"]

    def test_auth_is_checked_before_prompt(self, client):
        assert client.post("/api/ask-gemini").status_code == 401

    def test_broken_json_is_rejected_before_auth(self, client, genai_client):
        # FastAPI decodes the body before resolving route dependencies
        resp = client.post(
            "/api/ask-gemini",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid request body"}
        genai_client.aio.models.generate_content.assert_not_called()

    def test_upstream_failure_hides_raw_error(self, client, genai_client, auth_headers):
        genai_client.aio.models.generate_content.side_effect = RuntimeError(RAW_UPSTREAM_ERROR)

        resp = client.post("/api/ask-gemini", json={"prompt": "hello"}, headers=auth_headers)

        assert resp.status_code == 500
        assert RAW_UPSTREAM_ERROR not in resp.text
        assert "AIza-secret" not in resp.text
        assert resp.json()["message"] == "Error contacting the Gemini API."
