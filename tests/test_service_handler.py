import base64
import json

import pytest
from wordle_guesser.config import Settings
from wordle_guesser.datasets import write_dictionary
from wordle_guesser.service import RequestBody, ResponseBody, handle_request, lambda_handler

TINY = tuple(tuple(w) for w in ["crane", "civic", "cliff", "crone", "stare"])

REQUEST = {
    "current_state": "C__NE",
    "excluded_letters": ["D", "E", "U", "O", "G"],
    "unplaced_letters": ["A"],
    "excluded_placements": ["_A__"],
}


def test_request_body_parses_json_bytes():
    req = RequestBody.from_json(json.dumps(REQUEST).encode())
    assert req.current_state == "C__NE"
    assert req.excluded_placements == ["_A__"]


def test_request_body_placements_optional():
    body = {k: v for k, v in REQUEST.items() if k != "excluded_placements"}
    assert RequestBody.from_json(body).excluded_placements == []


def test_response_body_json():
    assert json.loads(ResponseBody(["CRANE"]).to_json()) == {"word_suggestions": ["CRANE"]}


def test_handle_request_ok():
    status, body = handle_request(json.dumps(REQUEST), dictionary=TINY)
    assert status == 200
    assert json.loads(body) == {"word_suggestions": ["CRANE"]}


@pytest.mark.parametrize("body", [
    "not json",
    "[1, 2]",
    json.dumps({"excluded_letters": [], "unplaced_letters": []}),
    json.dumps({"current_state": "_____", "excluded_letters": "ab", "unplaced_letters": []}),
    json.dumps({"current_state": "_____", "excluded_letters": [1], "unplaced_letters": []}),
    json.dumps({"current_state": "______", "excluded_letters": [], "unplaced_letters": []}),
])
def test_handle_request_malformed(body):
    status, payload = handle_request(body, dictionary=TINY)
    assert status == 400
    assert "error" in json.loads(payload)
    assert "word_suggestions" not in json.loads(payload)


def test_handle_request_bad_dictionary_file(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"crane\r\n\xff")
    status, payload = handle_request(REQUEST, settings=Settings(dictionary_path=str(bad)))
    assert status == 500
    assert "UTF-8" in json.loads(payload)["error"]


def test_handle_request_missing_dictionary_file(tmp_path):
    settings = Settings(dictionary_path=str(tmp_path / "nope.txt"))
    status, _ = handle_request(REQUEST, settings=settings)
    assert status == 500


def test_handle_request_dictionary_from_settings(tmp_path):
    p = tmp_path / "words.txt"
    write_dictionary(["crane", "crone"], p)
    status, body = handle_request(REQUEST, settings=Settings(dictionary_path=str(p)))
    assert status == 200
    assert json.loads(body)["word_suggestions"] == ["CRANE"]


def test_lambda_handler_plain_and_base64(tmp_path, monkeypatch):
    p = tmp_path / "words.txt"
    write_dictionary(["crane", "civic"], p)
    monkeypatch.setenv("WORDLE_DICTIONARY", str(p))
    monkeypatch.setenv("WORDLE_LOG_JSON", "1")

    resp = lambda_handler({"body": json.dumps(REQUEST)}, None)
    assert resp["statusCode"] == 200
    assert resp["headers"]["Content-Type"] == "application/json"
    assert json.loads(resp["body"]) == {"word_suggestions": ["CRANE"]}

    encoded = base64.b64encode(json.dumps(REQUEST).encode()).decode()
    resp = lambda_handler({"body": encoded, "isBase64Encoded": True}, None)
    assert resp["statusCode"] == 200


def test_lambda_handler_empty_body():
    assert lambda_handler({}, None)["statusCode"] == 400


@pytest.mark.parametrize("name,value", [
    ("WORDLE_CHUNK_SIZE", "0"),
    ("WORDLE_WORKERS", "lots"),
])
def test_lambda_handler_bad_setting_is_a_500(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    resp = lambda_handler({"body": json.dumps(REQUEST)}, None)
    assert resp["statusCode"] == 500
    assert name in json.loads(resp["body"])["error"]


def test_short_first_line_does_not_reject_valid_requests(tmp_path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"abc\r\ncrane\r\ncivic")
    body = {"current_state": "C____", "excluded_letters": [], "unplaced_letters": []}
    status, payload = handle_request(body, settings=Settings(dictionary_path=str(p)))
    assert status == 200
    assert json.loads(payload)["word_suggestions"] == ["CRANE", "CIVIC"]


def test_word_length_setting_reaches_the_generator(tmp_path):
    p = tmp_path / "words.txt"
    write_dictionary(["planet", "palate"], p)
    body = {"current_state": "P_____", "excluded_letters": ["N"], "unplaced_letters": []}
    settings = Settings(dictionary_path=str(p), word_length=6)
    status, payload = handle_request(body, settings=settings)
    assert status == 200
    assert json.loads(payload)["word_suggestions"] == ["PALATE"]
