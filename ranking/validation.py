"""Schema descriptors for structured LLM responses, validated at the boundary."""

import json
from dataclasses import dataclass, field
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


@dataclass(frozen=True)
class ResponseSchema:
    """A named JSON schema sent as a strict response format and checked on return."""

    name: str
    schema: dict = field(repr=False)
    description: str = "Return only valid JSON for the schema."

    def response_format(self) -> dict:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": self.name,
                "description": self.description,
                "schema": self.schema,
                "strict": True,
            },
        }

    def validate(self, data: object) -> None:
        """Raises jsonschema.ValidationError if data does not conform."""
        jsonschema.validate(data, self.schema)


JD_EXTRACT_SCHEMA = ResponseSchema("jd_extract", _load_schema("jd_extract"))
RESUME_ANALYSIS_SCHEMA = ResponseSchema("resume_analysis", _load_schema("resume_analysis"))
