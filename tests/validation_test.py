"""Response schemas: strict format descriptors and boundary validation."""

import jsonschema
import pytest

from fakes import ANALYSIS_RESPONSE, JD_RESPONSE
from ranking.models import JDExtract, ResumeAnalysis
from ranking.validation import JD_EXTRACT_SCHEMA, RESUME_ANALYSIS_SCHEMA


@pytest.mark.parametrize("schema", [JD_EXTRACT_SCHEMA, RESUME_ANALYSIS_SCHEMA])
def test_strict_schemas_require_every_property(schema):
    body = schema.schema
    assert body["additionalProperties"] is False
    assert set(body["required"]) == set(body["properties"])


def test_response_format():
    fmt = JD_EXTRACT_SCHEMA.response_format()
    assert fmt["type"] == "json_schema"
    assert fmt["json_schema"]["name"] == "jd_extract"
    assert fmt["json_schema"]["strict"] is True
    assert fmt["json_schema"]["schema"] is JD_EXTRACT_SCHEMA.schema


def test_valid_responses_pass():
    JD_EXTRACT_SCHEMA.validate(JD_RESPONSE)
    RESUME_ANALYSIS_SCHEMA.validate(ANALYSIS_RESPONSE)


def test_missing_field_rejected():
    data = {k: v for k, v in JD_RESPONSE.items() if k != "skills_must"}
    with pytest.raises(jsonschema.ValidationError):
        JD_EXTRACT_SCHEMA.validate(data)


def test_extra_field_rejected():
    with pytest.raises(jsonschema.ValidationError):
        RESUME_ANALYSIS_SCHEMA.validate({**ANALYSIS_RESPONSE, "score": 9})


def test_negative_years_pass_validation_and_clamp():
    analysis = {**ANALYSIS_RESPONSE, "years_experience": -1}
    RESUME_ANALYSIS_SCHEMA.validate(analysis)
    assert ResumeAnalysis.from_response(analysis).years_experience == 0.0

    jd = {**JD_RESPONSE, "years_experience_min": -3.5}
    JD_EXTRACT_SCHEMA.validate(jd)
    assert JDExtract.from_response(jd).years_experience_min == 0.0
