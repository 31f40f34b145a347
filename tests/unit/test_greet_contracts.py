from __future__ import annotations

from versioned_greeter.contracts.greet import GreetRequest, GreetRequestV1, GreetResponse


def test_v1_to_canonical() -> None:
    legacy = GreetRequestV1.model_validate({"firstName": "John", "lastName": "Sample"})
    assert legacy.to_canonical() == GreetRequest(name="John Sample")


def test_v1_defaults_are_empty_strings() -> None:
    legacy = GreetRequestV1.model_validate({})
    assert legacy.first_name == ""
    assert legacy.last_name == ""


def test_response_greeting_format() -> None:
    resp = GreetResponse.for_request(GreetRequest(name="Jane Sample"))
    assert resp.model_dump() == {"greeting": "Hello Jane Sample!"}


def test_response_for_empty_name() -> None:
    assert GreetResponse.for_request(GreetRequest(name="")).greeting == "Hello !"
