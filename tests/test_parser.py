import json

import pytest

from cbos.parser import generate_response, parse_frame

INVALID = generate_response("Unknown", 0, False)


def test_generate_response_exact_format():
    assert (
        generate_response("Status", 2, True)
        == '{"Api_Name":"Status","Api_Version":2,"Data":"none","Is_Valid":true}'
    )


def test_invalid_response_fields():
    assert json.loads(INVALID) == {
        "Api_Name": "Unknown",
        "Api_Version": 0,
        "Data": "none",
        "Is_Valid": False,
    }


def test_valid_frame():
    frame = '<{"Api_Name":"Status","Api_Version":2}>'
    assert parse_frame(frame) == generate_response("Status", 2, True)


def test_text_around_frame_is_ignored():
    frame = 'noise <{"Api_Name": "Ping", "Api_Version": 7}> trailing'
    assert parse_frame(frame) == generate_response("Ping", 7, True)


@pytest.mark.parametrize(
    "frame",
    [
        "",
        "no markers at all",
        '{"Api_Name":"Status","Api_Version":2}',
        '<{"Api_Name":"Status","Api_Version":2}',
        '{"Api_Name":"Status","Api_Version":2}>',
        '> <{"Api_Name":"Status","Api_Version":2}',
    ],
)
def test_malformed_frames(frame):
    assert parse_frame(frame) == INVALID


@pytest.mark.parametrize(
    "frame",
    [
        "<{not json}>",
        "<[1, 2]>",
        '<{"Api_Version":2}>',
        '<{"Api_Name":"Status"}>',
        '<{"Api_Name":5,"Api_Version":2}>',
        '<{"Api_Name":"Status","Api_Version":"2"}>',
        '<{"Api_Name":"Status","Api_Version":null}>',
        '<{"Api_Name":"Status","Api_Version":NaN}>',
        '<{"Api_Name":"Status","Api_Version":Infinity}>',
        "<null>",
    ],
)
def test_unusable_json(frame):
    assert parse_frame(frame) == INVALID


def test_float_version_is_truncated():
    assert parse_frame('<{"Api_Name":"a","Api_Version":3.9}>') == generate_response(
        "a", 3, True
    )


def test_boolean_version_becomes_number():
    assert parse_frame('<{"Api_Name":"a","Api_Version":true}>') == generate_response(
        "a", 1, True
    )


def test_bytes_input_stops_at_nul():
    good = b'<{"Api_Name":"Status","Api_Version":2}>\x00garbage'
    assert parse_frame(good) == generate_response("Status", 2, True)
    assert parse_frame(b'\x00<{"Api_Name":"Status","Api_Version":2}>') == INVALID


def test_invalid_utf8_inside_frame_is_rejected():
    assert parse_frame(b'<{"Api_Name":"\xff","Api_Version":2}>') == INVALID


def test_non_ascii_name_is_kept_unescaped():
    name = "Ünïcode"
    reply = parse_frame('<{"Api_Name":"%s","Api_Version":1}>' % name)
    assert name in reply
    assert json.loads(reply)["Api_Name"] == name