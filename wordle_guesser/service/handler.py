"""
Request/response boundary around `generate_guesses`.

Wire format (JSON):
  request  : {"current_state": "C__NE",
              "excluded_letters": ["D", "U"],
              "unplaced_letters": ["A"],
              "excluded_placements": ["_A___"]}     # optional, defaults to []
  response : {"word_suggestions": ["CRANE", ...]}   # 200
  error    : {"error": "<message>"}                 # 400 bad request, 500 bad dictionary/config

`handle_request` is transport-agnostic; `lambda_handler` adapts it to an
API-gateway style function event.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Tuple

from wordle_guesser.config import Settings
from wordle_guesser.datasets.io import Dictionary, read_dictionary
from wordle_guesser.engine import generate_guesses
from wordle_guesser.errors import ConfigError, DecodeError, MalformedInput
from .logs import setup_logging

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _string_list(data: Dict[str, Any], key: str, required: bool = True) -> List[str]:
    if key not in data:
        if required:
            raise MalformedInput(f"missing field: {key}")
        return []
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MalformedInput(f"{key} must be a list of strings")
    return value


@dataclass
class RequestBody:
    current_state: str
    excluded_letters: List[str]
    unplaced_letters: List[str]
    excluded_placements: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, body: bytes | str | Dict[str, Any]) -> "RequestBody":
        """
        Parse a request from raw JSON (bytes/str) or an already-decoded dict.
        Raises MalformedInput on bad JSON, missing fields or wrong types.
        """
        if isinstance(body, (bytes, str)):
            try:
                data = json.loads(body)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedInput(f"request body is not valid JSON: {e}") from e
        else:
            data = body
        if not isinstance(data, dict):
            raise MalformedInput("request body must be a JSON object")

        state = data.get("current_state")
        if not isinstance(state, str):
            raise MalformedInput("current_state must be a string")
        return cls(
            current_state=state,
            excluded_letters=_string_list(data, "excluded_letters"),
            unplaced_letters=_string_list(data, "unplaced_letters"),
            excluded_placements=_string_list(data, "excluded_placements", required=False),
        )


@dataclass
class ResponseBody:
    word_suggestions: List[str]

    def to_json(self) -> str:
        return json.dumps(asdict(self))


def _error(message: str) -> str:
    return json.dumps({"error": message})


def handle_request(body: bytes | str | Dict[str, Any], *,
                   dictionary: Dictionary | None = None,
                   settings: Settings | None = None) -> Tuple[int, str]:
    """
    Run one suggestion request end to end.

    Returns (status, json_body): 200 with the suggestions, 400 for a
    malformed request, 500 if the dictionary can't be read or decoded or the
    configuration is unusable. Either the full suggestion list or an error
    is returned, never both.
    """
    settings = settings or Settings()
    try:
        req = RequestBody.from_json(body)
        if dictionary is None and settings.dictionary_path:
            dictionary = read_dictionary(settings.dictionary_path)
        guesses = generate_guesses(
            req.current_state,
            req.excluded_letters,
            req.unplaced_letters,
            req.excluded_placements,
            dictionary=dictionary,
            workers=settings.workers,
            chunk_size=settings.chunk_size,
            word_length=settings.word_length,
        )
    except MalformedInput as e:
        logger.warning("rejected request: %s", e)
        return 400, _error(str(e))
    except DecodeError as e:
        logger.error("dictionary decode failed: %s", e)
        return 500, _error(str(e))
    except OSError as e:
        logger.error("dictionary unavailable: %s", e)
        return 500, _error(f"dictionary unavailable: {e}")
    except ConfigError as e:
        logger.error("bad configuration: %s", e)
        return 500, _error(str(e))

    return 200, ResponseBody(word_suggestions=guesses).to_json()


_logging_ready = False


def lambda_handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Function-as-a-service entry point (API gateway proxy event shape).
    Settings come from WORDLE_* environment variables.
    """
    global _logging_ready
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logger.error("bad configuration: %s", e)
        return {"statusCode": 500, "headers": JSON_HEADERS, "body": _error(str(e))}
    if not _logging_ready:
        setup_logging(settings.log_level, json_lines=settings.log_json)
        _logging_ready = True

    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body)
        except (binascii.Error, ValueError) as e:
            return {"statusCode": 400, "headers": JSON_HEADERS,
                    "body": _error(f"body is not valid base64: {e}")}

    status, payload = handle_request(body, settings=settings)
    return {"statusCode": status, "headers": JSON_HEADERS, "body": payload}
