import logging

import pytest

from ncscolor.errors import InvalidFormatError
from ncscolor.notation import parse_ncs, format_ncs, format_hue
from .samples import samples_parse, samples_invalid


def test_parse_ncs():
    for text, (expected, _) in samples_parse.items():
        assert parse_ncs(text) == expected, text

def test_format_ncs():
    for _, (triple, canonical) in samples_parse.items():
        assert format_ncs(*triple) == canonical

def test_parse_ncs_invalid():
    for text in samples_invalid:
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_ncs(text)
        assert exc_info.value.text == text
        assert str(exc_info.value) == f"ncs: invalid format: {text}"

def test_parse_ncs_rejects_non_string():
    with pytest.raises(TypeError):
        parse_ncs(3010)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        parse_ncs(b"3010-Y10R")  # type: ignore[arg-type]

def test_invalid_format_is_value_error():
    with pytest.raises(ValueError):
        parse_ncs("not a color")

def test_neutral_ignores_chromaticness_digits():
    for c in range(100):
        assert parse_ncs(f"30{c:02d}-N") == (30, 0, 0)

def test_chromaticness_is_clamped():
    for b in range(100):
        blackness, chromaticness, hue = parse_ncs(f"{b:02d}99-R")
        assert blackness == b
        assert chromaticness == min(100 - b, 99)
        assert hue == (100 if chromaticness else 0)

def test_pure_hue_letters():
    assert parse_ncs("2030-Y")[2] == 0
    assert parse_ncs("2030-R")[2] == 100
    assert parse_ncs("2030-B")[2] == 200
    assert parse_ncs("2030-G")[2] == 300

def test_format_hue_bands():
    assert format_hue(0, 0) == "N"
    assert format_hue(10, 0) == "Y"
    assert format_hue(10, 1) == "Y01R"
    assert format_hue(10, 99) == "Y99R"
    assert format_hue(10, 100) == "R"
    assert format_hue(10, 150) == "R50B"
    assert format_hue(10, 200) == "B"
    assert format_hue(10, 201) == "B01G"
    assert format_hue(10, 300) == "G"
    assert format_hue(10, 399) == "G99Y"

def test_every_hue_round_trips():
    for h in range(400):
        text = format_ncs(20, 30, h)
        assert parse_ncs(text) == (20, 30, h), text

def test_normalization_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="ncscolor.notation"):
        parse_ncs("3080-Y10R")
        parse_ncs("3000-Y10R")
    messages = [r.getMessage() for r in caplog.records]
    assert "3080-Y10R: chromaticness 80 clamped to 70" in messages
    assert "3000-Y10R: hue 10 dropped for monochrome color" in messages

def test_valid_input_logs_nothing(caplog):
    with caplog.at_level(logging.DEBUG, logger="ncscolor.notation"):
        parse_ncs("3010-Y10R")
    assert caplog.records == []
