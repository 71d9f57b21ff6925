import pytest

from prompts.business_mail_template import DEFAULT_SYSTEM_PROMPT


@pytest.mark.parametrize(
    "body",
    [{}, {"text": ""}, {"text": 42}, {"text": None}, {"text": ["a"]}, {"other": "x"}],
)
def test_invalid_text_is_rejected_without_model_call(client, provider, body):
    resp = client.post("/api/rewrite", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "text is required"}
    assert provider.calls == []


def test_non_json_body_is_rejected(client, provider):
    resp = client.post("/api/rewrite", data="not json", content_type="text/plain")
    assert resp.status_code == 400
    assert provider.calls == []


def test_preferred_model_success(client, provider):
    provider.behaviours["preferred-model"] = "  明日の会議につきまして、日程変更をお願いできますでしょうか。\n"
    resp = client.post("/api/rewrite", json={"text": "明日の会議の件、resched したいです"})
    assert resp.status_code == 200
    assert resp.get_json() == {"result": "明日の会議につきまして、日程変更をお願いできますでしょうか。"}
    assert provider.models_called == ["preferred-model"]


def test_timeout_falls_back(client, provider):
    provider.behaviours["preferred-model"] = TimeoutError("request timed out")
    provider.behaviours["fallback-model"] = "ご確認のほどよろしくお願いいたします。"
    resp = client.post("/api/rewrite", json={"text": "確認して"})
    assert resp.status_code == 200
    assert resp.get_json() == {"result": "ご確認のほどよろしくお願いいたします。"}
    assert provider.models_called == ["preferred-model", "fallback-model"]


def test_fallback_uses_same_prompt_and_text(client, provider, cfg):
    with open(cfg.PROMPT_FILE, "w", encoding="utf-8") as f:
        f.write("Rewrite politely.")
    provider.behaviours["preferred-model"] = ""
    provider.behaviours["fallback-model"] = "ok"
    client.post("/api/rewrite", json={"text": "draft"})
    first, second = provider.calls
    assert [m.content for m in first["messages"]] == ["Rewrite politely.", "draft"]
    assert [m.content for m in second["messages"]] == ["Rewrite politely.", "draft"]


def test_both_models_fail(client, provider):
    provider.behaviours["preferred-model"] = RuntimeError("rate limited")
    provider.behaviours["fallback-model"] = RuntimeError("model not found")
    resp = client.post("/api/rewrite", json={"text": "draft"})
    assert resp.status_code == 500
    data = resp.get_json()
    assert "result" not in data
    assert data["error"] == "model not found"
    assert provider.models_called == ["preferred-model", "fallback-model"]


def test_prompt_file_change_applies_without_restart(client, provider, cfg):
    provider.behaviours["preferred-model"] = "ok"
    client.post("/api/rewrite", json={"text": "one"})
    with open(cfg.PROMPT_FILE, "w", encoding="utf-8") as f:
        f.write("New instruction")
    client.post("/api/rewrite", json={"text": "two"})
    assert provider.calls[0]["messages"][0].content == DEFAULT_SYSTEM_PROMPT
    assert provider.calls[1]["messages"][0].content == "New instruction"


def test_unexpected_error_is_server_error(client, app):
    class Broken:
        async def aresolve_prompt(self):
            raise RuntimeError("boom")

    app.extensions["mailrewrite"]["prompts"] = Broken()
    resp = client.post("/api/rewrite", json={"text": "draft"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "boom"}


def test_oversized_body_is_rejected(client, provider):
    resp = client.post("/api/rewrite", json={"text": "x" * (2 * 1024 * 1024)})
    assert resp.status_code == 413
    assert "error" in resp.get_json()
    assert provider.calls == []


@pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": 7}])
def test_invalid_text_never_resolves_prompt(client, app, provider, body):
    resolved = []

    class SpyPrompts:
        async def aresolve_prompt(self):
            resolved.append(True)
            return "unused"

    app.extensions["mailrewrite"]["prompts"] = SpyPrompts()
    resp = client.post("/api/rewrite", json=body)
    assert resp.status_code == 400
    assert resolved == []
    assert provider.calls == []
