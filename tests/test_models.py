"""Wire-schema characterization tests.

These capture the exact JSON shapes exchanged with the generateContent
endpoint. The field names are an external contract, so drift here breaks
real calls even when every other test passes.
"""

from __future__ import annotations

import json
import math

from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError
import pytest

from lumina.config import creative_generation_config, default_safety_settings
from lumina.errors import ConfigurationError
from lumina.models import (
    Candidate,
    Content,
    GenerationParameters,
    GenerationRequest,
    GenerationResponse,
    Part,
    SafetyRule,
)
from lumina.types import GeminiModel, SafetyCategory, SafetyThreshold

pytestmark = pytest.mark.contract


# =============================================================================
# Request
# =============================================================================


def test_minimal_request_omits_optional_keys() -> None:
    request = GenerationRequest.for_prompt("hi")

    assert json.loads(request.to_json()) == {
        "contents": [{"parts": [{"text": "hi"}]}]
    }
    assert "null" not in request.to_json()


def test_full_request_uses_camel_case_wire_names() -> None:
    request = GenerationRequest.for_prompt(
        "hi",
        safety_settings=[
            SafetyRule(
                category=SafetyCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
                threshold=SafetyThreshold.BLOCK_LOW_AND_ABOVE,
            )
        ],
        generation_config=GenerationParameters(
            temperature=0.5,
            top_p=0.8,
            top_k=12,
            max_output_tokens=256,
            stop_sequences=("END",),
        ),
    )

    assert request.to_wire() == {
        "contents": [{"parts": [{"text": "hi"}]}],
        "safetySettings": [
            {
                "category": "HARM_CATEGORY_DANGEROUS_CONTENT",
                "threshold": "BLOCK_LOW_AND_ABOVE",
            }
        ],
        "generationConfig": {
            "temperature": 0.5,
            "topP": 0.8,
            "topK": 12,
            "maxOutputTokens": 256,
            "stopSequences": ["END"],
        },
    }


def test_generation_config_omits_each_absent_field() -> None:
    request = GenerationRequest.for_prompt(
        "hi", generation_config=creative_generation_config()
    )

    assert request.to_wire()["generationConfig"] == {
        "temperature": 0.9,
        "topP": 0.9,
        "topK": 30,
        "maxOutputTokens": 1000,
    }


def test_empty_safety_list_is_sent_not_omitted() -> None:
    request = GenerationRequest.for_prompt("hi", safety_settings=[])

    assert request.to_wire()["safetySettings"] == []


def test_all_none_generation_config_serializes_as_empty_object() -> None:
    request = GenerationRequest.for_prompt(
        "hi", generation_config=GenerationParameters()
    )

    assert request.to_wire()["generationConfig"] == {}


def test_default_safety_preset_wire_form() -> None:
    request = GenerationRequest.for_prompt(
        "hi", safety_settings=default_safety_settings()
    )

    assert request.to_wire()["safetySettings"] == [
        {"category": c.value, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
        for c in SafetyCategory
    ]


def test_models_accept_python_and_wire_field_names() -> None:
    by_name = GenerationParameters(top_p=0.1, max_output_tokens=5)
    by_alias = GenerationParameters.model_validate({"topP": 0.1, "maxOutputTokens": 5})

    assert by_name == by_alias


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_generation_parameters_reject_non_finite_floats(value: float) -> None:
    with pytest.raises(ValidationError):
        GenerationParameters(temperature=value)
    with pytest.raises(ValidationError):
        GenerationParameters(top_p=value)


def test_safety_rule_rejects_unknown_strings() -> None:
    with pytest.raises(ConfigurationError):
        SafetyRule(category="HARM_CATEGORY_NOPE", threshold="BLOCK_NONE")


def test_records_are_frozen() -> None:
    params = GenerationParameters(temperature=0.1)

    with pytest.raises(ValidationError):
        params.temperature = 0.2  # type: ignore[misc]


@given(prompt=st.text(max_size=200))
@settings(max_examples=25, deadline=None, derandomize=True)
def test_prompt_text_survives_json_encoding(prompt: str) -> None:
    """Property: any prompt is carried verbatim as the single text part."""
    payload = json.loads(GenerationRequest.for_prompt(prompt).to_json())

    assert payload["contents"] == [{"parts": [{"text": prompt}]}]


# =============================================================================
# Response
# =============================================================================


def test_response_decodes_candidates() -> None:
    body = '{"candidates":[{"content":{"parts":[{"text":"hello"}]}}]}'

    response = GenerationResponse.model_validate_json(body)

    assert response == GenerationResponse(
        candidates=[Candidate(content=Content(parts=[Part(text="hello")]))]
    )
    assert response.text == "hello"


def test_response_ignores_unknown_fields() -> None:
    body = json.dumps(
        {
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": "a"}]},
                    "finishReason": "STOP",
                    "safetyRatings": [],
                }
            ],
            "usageMetadata": {"totalTokenCount": 3},
            "modelVersion": "gemini-1.5-pro",
        }
    )

    response = GenerationResponse.model_validate_json(body)

    assert response.text == "a"


@pytest.mark.parametrize(
    "body",
    [
        "{}",
        '{"candidates": []}',
        '{"candidates": [{"finishReason": "SAFETY"}]}',
        '{"candidates": [{"content": {"parts": []}}]}',
        '{"promptFeedback": {"blockReason": "SAFETY"}}',
    ],
)
def test_response_without_text_yields_empty_text(body: str) -> None:
    assert GenerationResponse.model_validate_json(body).text == ""


def test_response_with_wrong_shape_fails_validation() -> None:
    with pytest.raises(ValidationError):
        GenerationResponse.model_validate_json('{"candidates": "nope"}')


def test_model_enum_values_are_wire_identifiers() -> None:
    assert [m.value for m in GeminiModel] == [
        "gemini-1.5-pro",
        "gemini-2.0-flash",
        "gemini-2.0-flash-thinking-exp-01-21",
        "gemini-2.0-pro-exp-02-05",
    ]
    assert str(GeminiModel.GEMINI_20FLASH) == "gemini-2.0-flash"
