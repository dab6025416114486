from link_module.log import redact_secrets


def test_redacts_top_level_token():
    out = redact_secrets(None, "info", {"event": "login", "token": "abc"})
    assert out == {"event": "login", "token": "***"}


def test_redacts_authorization_inside_headers():
    out = redact_secrets(None, "debug", {
        "event": "api_request",
        "headers": {"authorization": "Bearer abc", "Accept": "application/json"},
    })
    assert out["headers"] == {"authorization": "***", "Accept": "application/json"}


def test_leaves_other_fields_alone():
    event = {"event": "api_request", "method": "GET", "uri": "/links"}
    assert redact_secrets(None, "debug", dict(event)) == event
