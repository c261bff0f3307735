"""Testes do extrator de envelope de submissão Webflow."""

from __future__ import annotations

from api.normalizers.webflow import extract_form_submission


def test_envelope_unwrapped() -> None:
    submission = extract_form_submission(
        {
            "triggerType": "form_submission",
            "payload": {
                "name": "Demo Request",
                "formId": "66d84d72633d424869c060b0",
                "data": {"email": "a@b.co", "marketing": "false"},
            },
        }
    )

    assert submission.form_data == {"email": "a@b.co", "marketing": "false"}
    assert submission.form_id == "66d84d72633d424869c060b0"
    assert submission.form_name == "Demo Request"


def test_envelope_without_form_id() -> None:
    submission = extract_form_submission({"payload": {"data": {"email": "a@b.co"}}})

    assert submission.form_id is None
    assert submission.form_data == {"email": "a@b.co"}


def test_flat_body_is_form_data() -> None:
    submission = extract_form_submission({"email": "a@b.co", "firstname": "Ann"})

    assert submission.form_data == {"email": "a@b.co", "firstname": "Ann"}
    assert submission.form_id is None


def test_flat_body_root_form_id_extracted() -> None:
    payload = {"email": "a@b.co", "formId": "66d84d72633d424869c060b0"}

    submission = extract_form_submission(payload)

    assert submission.form_id == "66d84d72633d424869c060b0"
    assert "formId" not in submission.form_data
    assert payload["formId"] == "66d84d72633d424869c060b0"


def test_payload_without_data_object_is_flat() -> None:
    submission = extract_form_submission({"payload": "x", "email": "a@b.co"})

    assert submission.form_data == {"payload": "x", "email": "a@b.co"}
