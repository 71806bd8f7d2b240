import logging
from dataclasses import dataclass
from typing import List

import pytest
from pydantic import BaseModel
from extkit.logger.logger import logger
from extkit.text.strings import (
    char_at,
    decode_objects,
    is_email,
    is_mobile,
    is_mobile_number,
    to_dictionary,
)


class Record(BaseModel):
    id: int
    name: str = "unnamed"


@dataclass
class Point:
    x: float
    y: float


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: List[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def log_records():
    handler = ListHandler()
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)


def test_char_at():
    assert char_at("hello", 0) == "h"
    assert char_at("hello", 4) == "o"


def test_char_at_counts_characters_not_bytes():
    text = "na\u00efve \u2615 caf\u00e9"
    assert char_at(text, 2) == "\u00ef"
    assert char_at(text, 6) == "\u2615"
    assert char_at(text, len(text) - 1) == "\u00e9"


def test_char_at_counts_grapheme_clusters():
    decomposed = "e\u0301x"
    assert char_at(decomposed, 0) == "e\u0301"
    assert char_at(decomposed, 1) == "x"
    with pytest.raises(IndexError):
        char_at(decomposed, 2)


def test_char_at_flag_emoji_is_one_character():
    text = "\U0001F1EB\U0001F1F7!"
    assert char_at(text, 0) == "\U0001F1EB\U0001F1F7"
    assert char_at(text, 1) == "!"


@pytest.mark.parametrize("position", [5, 100, -1])
def test_char_at_out_of_range(position):
    with pytest.raises(IndexError):
        char_at("hello", position)


def test_decode_objects_models():
    records = decode_objects('[{"id":1},{"id":2}]', Record)

    assert records == [Record(id=1), Record(id=2, name="unnamed")]
    assert [r.id for r in records] == [1, 2]


def test_decode_objects_dataclass():
    points = decode_objects('[{"x": 1.5, "y": -2.5}]', Point)
    assert points == [Point(x=1.5, y=-2.5)]


def test_decode_objects_empty_array():
    assert decode_objects("[]", Record) == []


@pytest.mark.parametrize(
    "text",
    [
        '[{"id":1},',
        "not json",
        "",
        '{"id": 1}',
        '[{"name": "missing id"}]',
        '[{"id": "abc"}]',
        '[{"id":"1"}]',
        '[{"id": 1, "name": 5}]',
        "[\ud800]",
    ],
)
def test_decode_objects_failures_return_none(text):
    assert decode_objects(text, Record) is None


def test_decode_objects_does_not_log(log_records):
    assert decode_objects("garbage", Record) is None
    assert log_records == []


@pytest.mark.parametrize(
    "text",
    [
        "user@example.com",
        "a@b.co",
        "first.last+tag@sub.domain.org",
        "USER_99%@EXAMPLE.IO",
    ],
)
def test_is_email_valid(text):
    assert is_email(text)


@pytest.mark.parametrize(
    "text",
    [
        "bad@@x",
        "x@x",
        "a@b.c",
        "no-at-sign.com",
        "user@example.c0m",
        "user@example.com extra",
        "a" * 60 + "@example.com",
        "",
    ],
)
def test_is_email_invalid(text):
    assert not is_email(text)


@pytest.mark.parametrize(
    "text",
    ["1234567890", "123-456-7890", "123 456 7890", "123/456-78 90"],
)
def test_is_mobile_number_valid(text):
    assert is_mobile_number(text)


@pytest.mark.parametrize(
    "text",
    ["12345", "12345678901", "123.456.7890", "(123) 456-7890", "12345abcde", ""],
)
def test_is_mobile_number_invalid(text):
    assert not is_mobile_number(text)


@pytest.mark.parametrize(
    "number, expected",
    [
        (1234567890, True),
        (-9876543210, True),
        (123456789, False),
        (12345678901, False),
        (0, False),
    ],
)
def test_is_mobile(number, expected):
    assert is_mobile(number) is expected


def test_to_dictionary():
    assert to_dictionary('{"a": 1, "b": [true, null], "c": {"d": "e"}}') == {
        "a": 1,
        "b": [True, None],
        "c": {"d": "e"},
    }


def test_to_dictionary_non_object_is_silent(log_records):
    assert to_dictionary("[1, 2, 3]") is None
    assert to_dictionary('"text"') is None
    assert log_records == []


def test_to_dictionary_logs_parse_error(log_records):
    assert to_dictionary('{"a": ') is None

    assert len(log_records) == 1
    assert log_records[0].levelno == logging.ERROR
    assert "Could not decode JSON object" in log_records[0].getMessage()


@pytest.mark.parametrize(
    "text", ['{"a": NaN}', '{"a": Infinity}', '{"a": [1, -Infinity]}']
)
def test_to_dictionary_rejects_non_json_constants(text, log_records):
    assert to_dictionary(text) is None

    assert len(log_records) == 1
    assert "Invalid JSON constant" in log_records[0].getMessage()
