"""Pull structured payloads out of free-form model output.

Models are asked for bare JSON but routinely wrap it in prose or markdown
fences. We take the first balanced ``{...}`` block and validate it against a
pydantic model; anything that does not fit is a Failure and the caller uses
its deterministic fallback.
"""

import json
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from magical_miles.core.result import Failure, Result, Success
from magical_miles.fare.models import AIFareEstimate

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_json_object(text: str) -> str | None:
    """Return the first balanced ``{...}`` substring of text, or None.

    Braces inside JSON string literals are not counted.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
            elif ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start : i + 1]
        # unbalanced from this brace; try the next one
        start = text.find("{", start + 1)
    return None


def parse_model(text: str, model: type[ModelT]) -> Result[ModelT]:
    blob = extract_json_object(text)
    if blob is None:
        return Failure(reason="no_json_object")

    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        return Failure(reason="invalid_json", error=e)

    try:
        return Success(model.model_validate(data))
    except PydanticValidationError as e:
        return Failure(reason="schema_mismatch", error=e)


def parse_fare_estimate(text: str) -> Result[AIFareEstimate]:
    """Parse an AI fare proposal; totals that disagree with their components are rejected."""
    return parse_model(text, AIFareEstimate)
