from __future__ import annotations

import logging

import pytest

from optview_charts.parsing.lists import (
    ItemCursor,
    ParseError,
    extract_records,
    find_list_region,
    iter_records,
    parse_list_item,
    parse_payload,
)

SUMMARY = """<body> <h3>11 issue types:</h3>
    <ul id='entries_summary'>
    <li>LoadClobbered: 4661
    <li>LoadWithLoopInvariantAddressCondExecuted: 2
    <li>NoDefinition: 2361
    <li>NotBeneficial: 86
    <li>MissedDetails: 216
    <li>TooCostly: 1147
    <li>LoadWithLoopInvariantAddressInvalidated: 433
    <li>LoopSpillReload: 94
    <li>IncreaseCostInOtherContexts: 9
    <li>HorSLPNotBeneficial: 1
    <li>VectorizationNotBeneficial: 1
    </ul>
    <div class="centered">"""


# -------------------------
# List region
# -------------------------


def test_find_list_region_starts_at_open_marker():
    region = find_list_region(SUMMARY)
    assert region is not None
    assert region.startswith("<ul")
    assert "</ul>" not in region
    assert "VectorizationNotBeneficial: 1" in region


def test_find_list_region_missing_markers():
    assert find_list_region("<p>nothing here</p>") is None
    assert find_list_region("<ul><li>A: 1") is None
    assert find_list_region("<li>A: 1</ul>") is None


def test_find_list_region_close_before_open():
    assert find_list_region("</ul> text <ul><li>A: 1") is None


def test_first_close_marker_ends_region():
    region = find_list_region("<ul><li>A: 1<ul><li>B: 2</ul><li>C: 3</ul>")
    assert region == "<ul><li>A: 1<ul><li>B: 2"


# -------------------------
# Cursor / single items
# -------------------------


def test_parse_list_item_returns_record_and_rest():
    region = find_list_region(SUMMARY)
    result = parse_list_item(region)
    assert result is not None
    rec, rest = result
    assert rec is not None
    assert rec.name == "LoadClobbered"
    assert rec.count == 4661
    assert rest.startswith("<li>LoadWithLoopInvariantAddressCondExecuted:")


def test_parse_list_item_terminal_item_consumes_everything():
    result = parse_list_item("<li>Last: 7\n   ")
    assert result is not None
    rec, rest = result
    assert rec is not None and rec.count == 7
    assert rest == ""
    assert parse_list_item(rest) is None


def test_cursor_yields_payloads_in_order():
    cursor = ItemCursor("<ul><li>A: 1<li>B: 2<li>C: 3")
    assert list(cursor) == ["A: 1", "B: 2", "C: 3"]
    # non-restartable
    assert cursor.next_payload() is None
    assert cursor.rest == ""


def test_cursor_without_items():
    cursor = ItemCursor("<ul id='x'>\n")
    assert cursor.next_payload() is None


# -------------------------
# Payloads
# -------------------------


def test_parse_payload_trims_name_and_count():
    rec = parse_payload("   TooCostly :   1147  \n")
    assert rec is not None
    assert (rec.name, rec.count, rec.is_largest) == ("TooCostly", 1147, False)


def test_parse_payload_accepts_signs_and_closing_tag():
    assert parse_payload("Zero: 0").count == 0
    assert parse_payload("Neg: -3").count == -3
    assert parse_payload("Plus: +4").count == 4
    assert parse_payload("Closed: 12</li>\n").count == 12


def test_parse_payload_without_colon_is_dropped():
    assert parse_payload("just some text") is None


def test_parse_payload_with_empty_name_is_dropped():
    assert parse_payload(" : 5") is None


@pytest.mark.parametrize(
    ("payload", "reason"),
    [("just some text", "without ':'"), (" : 5", "empty name")],
)
def test_dropped_item_logs_warning(caplog, payload, reason):
    with caplog.at_level(logging.WARNING, logger="optview_charts"):
        assert parse_payload(payload) is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert reason in warnings[0].getMessage()


def test_parse_list_item_dropped_item_keeps_rest():
    assert parse_list_item("<li>nocolon<li>A: 1") == (None, "<li>A: 1")


@pytest.mark.parametrize("payload", ["Broken: abc", "Broken: 12abc", "Broken:", "Broken: 1: 2"])
def test_parse_payload_malformed_count_raises(payload):
    with pytest.raises(ParseError) as exc:
        parse_payload(payload)
    assert exc.value.name == "Broken"
    assert str(exc.value) == "malformed entry for counter `Broken`"


# -------------------------
# Whole list
# -------------------------


def test_extract_records_sample_summary():
    records = extract_records(SUMMARY)
    assert len(records) == 11
    assert records[0].name == "LoadClobbered"
    assert records[10].name == "VectorizationNotBeneficial"
    assert records[10].count == 1
    assert not any(r.is_largest for r in records)


def test_extract_records_ignores_items_outside_region():
    text = "<li>Before: 1\n<ul>\n<li>A: 2\n<li>B: 3\n</ul>\n<li>After: 4"
    assert [r.name for r in extract_records(text)] == ["A", "B"]


def test_extract_records_skips_items_without_colon():
    text = "<ul><li>A: 1<li>no colon here<li>B: 2</ul>"
    assert [(r.name, r.count) for r in extract_records(text)] == [("A", 1), ("B", 2)]


def test_extract_records_without_list():
    assert extract_records("<html><body>empty</body></html>") == []


def test_iter_records_is_lazy_generator():
    it = iter_records("<ul><li>A: 1<li>B: x")
    assert next(it).name == "A"
    with pytest.raises(ParseError):
        next(it)
