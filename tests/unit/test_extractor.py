from app.meetings.extractor import parse_meeting_request, strip_meeting_blocks


FULL_BLOCK = """Sounds good!
[SCHEDULE_MEETING]
Name: Jane Doe
Email: jane@x.com
Phone: +1 555 0100
Preferred Date: next Tuesday
Preferred Time: 3pm
Meeting Type: Demo
Notes: Interested in the reporting module
[/SCHEDULE_MEETING]
Talk soon."""


def test_all_fields_recovered():
    request = parse_meeting_request(FULL_BLOCK)
    assert request is not None
    assert request.name == "Jane Doe"
    assert request.email == "jane@x.com"
    assert request.phone == "+1 555 0100"
    assert request.preferred_date == "next Tuesday"
    assert request.preferred_time == "3pm"
    assert request.meeting_type == "Demo"
    assert request.notes == "Interested in the reporting module"


def test_no_block_returns_none():
    assert parse_meeting_request("Would Tuesday work for a demo?") is None
    assert parse_meeting_request("") is None
    assert parse_meeting_request(None) is None


def test_unclosed_block_returns_none():
    assert parse_meeting_request("[SCHEDULE_MEETING]\nName: Jane\n") is None


def test_missing_fields_omitted():
    request = parse_meeting_request(
        "[SCHEDULE_MEETING]\nName: Jane\nPreferred Time: 3pm\n[/SCHEDULE_MEETING]"
    )
    assert request.name == "Jane"
    assert request.preferred_time == "3pm"
    assert request.email is None
    assert request.model_dump(exclude_none=True) == {
        "name": "Jane",
        "preferred_time": "3pm",
    }


def test_labels_case_insensitive_and_values_trimmed():
    request = parse_meeting_request(
        "[SCHEDULE_MEETING]\nNAME:    Jane   \nmeeting type: call\t\n[/SCHEDULE_MEETING]"
    )
    assert request.name == "Jane"
    assert request.meeting_type == "call"


def test_first_match_wins():
    request = parse_meeting_request(
        "[SCHEDULE_MEETING]\nName: Jane\nName: John\n[/SCHEDULE_MEETING]"
    )
    assert request.name == "Jane"


def test_only_first_block_parsed():
    text = (
        "[SCHEDULE_MEETING]\nName: Jane\n[/SCHEDULE_MEETING]\n"
        "[SCHEDULE_MEETING]\nName: John\nEmail: john@x.com\n[/SCHEDULE_MEETING]"
    )
    request = parse_meeting_request(text)
    assert request.name == "Jane"
    assert request.email is None


def test_values_not_validated():
    request = parse_meeting_request(
        "[SCHEDULE_MEETING]\nEmail: not-an-email\nPhone: call me maybe\n[/SCHEDULE_MEETING]"
    )
    assert request.email == "not-an-email"
    assert request.phone == "call me maybe"


def test_empty_block_yields_empty_request():
    request = parse_meeting_request("[SCHEDULE_MEETING][/SCHEDULE_MEETING]")
    assert request is not None
    assert request.model_dump(exclude_none=True) == {}


def test_strip_removes_every_block():
    text = (
        "Before\n[SCHEDULE_MEETING]\nName: A\n[/SCHEDULE_MEETING]\n"
        "Middle\n[SCHEDULE_MEETING]\nName: B\n[/SCHEDULE_MEETING]\n"
    )
    stripped = strip_meeting_blocks(text)
    assert "[SCHEDULE_MEETING]" not in stripped
    assert stripped.startswith("Before")
    assert stripped.endswith("Middle")
