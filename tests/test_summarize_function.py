import json

import httpx
import pytest

URL = "/functions/v1/summarize-note"


@pytest.fixture()
def auth(signup):
    return signup()[1]


def completion(text):
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": text}}]})


def _assert_cors(r):
    assert r.headers["access-control-allow-origin"] == "*"
    assert "content-type" in r.headers["access-control-allow-headers"]


def test_preflight_is_answered(client):
    r = client.options(URL)
    assert r.status_code == 200
    _assert_cors(r)


def test_missing_content_is_a_client_error(client, fake_llm, auth):
    calls = []
    fake_llm(lambda req: calls.append(req) or completion("unused"))
    for body in ({"title": "t"}, {"title": "t", "content": ""}, {"content": 5}):
        r = client.post(URL, headers=auth, json=body)
        assert r.status_code == 400
        assert r.json() == {"error": "Content is required"}
        _assert_cors(r)
    assert calls == []


def test_success_forwards_fixed_prompt_and_settings(client, fake_llm, auth, monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    seen = {}

    def handler(request: httpx.Request):
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return completion("Short summary.")

    fake_llm(handler)
    r = client.post(URL, headers=auth, json={"title": "Meeting", "content": "Discuss budget"})
    assert r.status_code == 200
    assert r.json() == {"summary": "Short summary."}
    _assert_cors(r)

    assert seen["auth"] == "Bearer sk-test"
    body = seen["body"]
    assert body["model"] == "openai/gpt-4o-mini"
    assert body["temperature"] == 0.3
    assert body["max_tokens"] == 300
    assert body["messages"][0]["role"] == "system"
    assert "under 200 words" in body["messages"][0]["content"]
    assert body["messages"][1]["content"].endswith("Title: Meeting\n\nContent: Discuss budget")


def test_untitled_notes_are_labelled(client, fake_llm, auth):
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return completion("ok")

    fake_llm(handler)
    client.post(URL, headers=auth, json={"content": "hello"})
    assert "Title: Untitled" in seen["body"]["messages"][1]["content"]


def test_upstream_failure_is_a_server_error(client, fake_llm, auth):
    fake_llm(lambda req: httpx.Response(401, json={"error": "no key"}))
    r = client.post(URL, headers=auth, json={"content": "text"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to generate summary"}
    _assert_cors(r)


def test_empty_completion_is_a_server_error(client, fake_llm, auth):
    for resp in (completion(""), httpx.Response(200, json={"choices": []})):
        fake_llm(lambda req, resp=resp: resp)
        r = client.post(URL, headers=auth, json={"content": "text"})
        assert r.status_code == 500
        assert r.json() == {"error": "No summary generated"}


def test_unexpected_exception_still_answers_with_cors(client, fake_llm, auth):
    def boom(request):
        raise httpx.ConnectError("upstream unreachable")

    fake_llm(boom)
    r = client.post(URL, headers=auth, json={"content": "text"})
    assert r.status_code == 500
    assert r.json() == {"error": "upstream unreachable"}
    _assert_cors(r)


def test_malformed_json_body(client, auth):
    r = client.post(URL, content=b"{not json", headers={**auth, "content-type": "application/json"})
    assert r.status_code == 500
    assert "invalid JSON body" in r.json()["error"]
    _assert_cors(r)


def test_anonymous_callers_are_turned_away(client, fake_llm):
    calls = []
    fake_llm(lambda req: calls.append(req) or completion("unused"))
    for headers in ({}, {"Authorization": "Bearer not-a-jwt"}):
        r = client.post(URL, headers=headers, json={"content": "text"})
        assert r.status_code == 401
        assert "error" in r.json()
        _assert_cors(r)
    assert calls == []
