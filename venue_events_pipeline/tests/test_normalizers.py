"""
Tests unitaires pour les normalizers.
"""

import pytest
from datetime import date

from venue_events_pipeline.models.raw_item import (
    ClassificationPanel,
    InstructorGroupPanel,
    InstructorPanel,
    Panel,
    RawEventItem,
    parse_panel,
)
from venue_events_pipeline.models.resource import Resource
from venue_events_pipeline.normalizers.events_normalizer import EventsNormalizer, parse_room_name
from venue_events_pipeline.normalizers.identity import generate_deterministic_id
from venue_events_pipeline.normalizers.panel_extractor import (
    get_event_type,
    get_instructor_names,
    get_lecture_title,
    get_organization,
    is_academic_session,
)
from venue_events_pipeline.normalizers.record_filter import filter_records, is_processable
from venue_events_pipeline.normalizers.resource_extractor import parse_event_resources
from venue_events_pipeline.normalizers.time_normalizer import (
    decimal_hours_to_time,
    extract_date,
    format_seconds_to_time,
    parse_time_to_seconds,
    resolve_event_date,
    to_time_strings,
)


class TestIdentity:
    """Tests pour generate_deterministic_id."""
    
    def test_known_value(self):
        assert generate_deterministic_id(123456789012, 987654321098, 4567) == 789015210984567
    
    def test_deterministic(self):
        first = generate_deterministic_id(123456789012, 987654321098, 4567)
        second = generate_deterministic_id(123456789012, 987654321098, 4567)
        assert first == second
    
    def test_small_values_are_padded(self):
        assert generate_deterministic_id(1, 2, 3) == 1_000_000_000 + 20_000 + 3
    
    def test_high_digits_are_discarded(self):
        # Collision connue : seuls les 6 derniers chiffres de itemId comptent
        assert generate_deterministic_id(1_000_123, 5, 5) == generate_deterministic_id(2_000_123, 5, 5)
    
    def test_fits_int64(self):
        assert generate_deterministic_id(9_999_999_999, 9_999_999_999, 99_999) < 2 ** 63
    
    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            generate_deterministic_id(-1, 2, 3)
    
    @pytest.mark.parametrize("bad_value", [1.9, {}, "123", True, None])
    def test_non_integer_rejected(self, bad_value):
        # Un float n'est pas tronqué, un type inattendu donne ValueError (pas TypeError)
        with pytest.raises(ValueError, match="itemId2 must be an integer"):
            generate_deterministic_id(1, bad_value, 3)


class TestRecordFilter:
    """Tests pour le filtre des enregistrements bruts."""
    
    def test_item_id2_zero_dropped(self, make_raw_item):
        assert not is_processable(make_raw_item(item_id2=0))
        assert not is_processable(make_raw_item(item_id=0, item_id2=0, name="Real event"))
    
    def test_private_placeholder_dropped(self, make_raw_item):
        assert not is_processable(make_raw_item(item_id=0, name="(Private)"))
        assert not is_processable(make_raw_item(item_id=0, name="Closed"))
    
    def test_item_id_zero_with_real_name_kept(self, make_raw_item):
        assert is_processable(make_raw_item(item_id=0, name="Board Meeting"))
    
    def test_placeholder_name_with_real_id_kept(self, make_raw_item):
        assert is_processable(make_raw_item(item_id=42, name="(Private)"))
    
    def test_ampersand_room_dropped(self, make_raw_item):
        assert not is_processable(make_raw_item(room="KGH1420&30 (120)"))
    
    def test_order_preserved(self, make_raw_item):
        items = [
            make_raw_item(item_id=1, name="A"),
            make_raw_item(item_id2=0, name="B"),
            make_raw_item(item_id=3, name="C"),
        ]
        assert [i.item_name for i in filter_records(items)] == ["A", "C"]


class TestParseRoomName:
    """Tests pour parse_room_name."""
    
    @pytest.mark.parametrize("label, expected", [
        ("KGH1110 (70)", "GH 1110"),
        ("KGHL110", "GH L110"),
        ("KGH2410A (60)", "GH 2410A"),
        ("KGH2430B", "GH 2430B"),
    ])
    def test_known_formats(self, label, expected):
        assert parse_room_name(label) == expected
    
    def test_unknown_format(self):
        assert parse_room_name("random") is None
    
    def test_empty(self):
        assert parse_room_name(None) is None
        assert parse_room_name("") is None


class TestTimeNormalizer:
    """Tests pour la conversion des heures et dates."""
    
    def test_decimal_hours(self):
        assert to_time_strings(13.5, 15.25) == ("13:30:00", "15:15:00")
    
    def test_numeric_strings(self):
        assert to_time_strings("9", "10.75") == ("09:00:00", "10:45:00")
    
    def test_minute_rounding(self):
        assert decimal_hours_to_time(9.3333333) == "09:20:00"
    
    def test_rounding_carries_to_next_hour(self):
        assert decimal_hours_to_time(9.9999) == "10:00:00"
    
    def test_invalid_value(self):
        with pytest.raises(ValueError):
            decimal_hours_to_time("noon")
        with pytest.raises(ValueError):
            decimal_hours_to_time(None)
    
    def test_extract_date(self):
        assert extract_date("2025-07-15T13:00") == "2025-07-15"
        assert extract_date("2025-07-15") == "2025-07-15"
        assert extract_date(None) is None
    
    def test_resolve_date_fallback(self):
        assert resolve_event_date(None, today=date(2025, 1, 2)) == "2025-01-02"
        assert resolve_event_date("2025-07-15T00:00:00", today=date(2025, 1, 2)) == "2025-07-15"
    
    def test_parse_time_to_seconds(self):
        assert parse_time_to_seconds("09:30:00") == 9 * 3600 + 30 * 60
        assert parse_time_to_seconds("09:30") == 9 * 3600 + 30 * 60
        assert parse_time_to_seconds("nine") is None
        assert parse_time_to_seconds(None) is None
    
    def test_format_seconds(self):
        assert format_seconds_to_time(36000 + 1800) == "10:30:00"


class TestPanels:
    """Tests pour le modèle de panneaux et les extracteurs."""
    
    def test_parse_panel_variants(self):
        assert isinstance(parse_panel({"typeId": 11, "item": []}), ClassificationPanel)
        assert isinstance(parse_panel({"typeId": 12, "item": []}), InstructorPanel)
        assert isinstance(parse_panel({"typeId": 13, "item": []}), InstructorGroupPanel)
        generic = parse_panel({"typeId": 99})
        assert type(generic) is Panel
        assert generic.items == []
    
    def test_out_of_range_reads_are_none(self):
        panel = parse_panel({"typeId": 11, "item": [{"itemName": "only"}]})
        assert panel.lecture_title is None
        assert panel.organization is None
    
    def test_classification_fields(self, make_raw_item, make_classification_panel):
        item = make_raw_item(panels=[make_classification_panel(
            lecture_title="Marketing Strategy",
            category="Lecture",
            organization="Kellogg School of Management",
        )])
        assert get_event_type(item) == "Lecture"
        assert get_organization(item) == "Kellogg School of Management"
        assert get_lecture_title(item) == "Marketing Strategy"
    
    @pytest.mark.parametrize("program", [
        "Kellogg Executive Education Programs",
        "Kellogg Executive MBA Program",
    ])
    def test_kec_override(self, make_raw_item, make_classification_panel, program):
        item = make_raw_item(panels=[make_classification_panel(organization=program)])
        assert get_event_type(item) == "KEC"
        assert get_event_type(item, kec_tag="EXEC") == "EXEC"
    
    def test_cmc_override(self, make_raw_item, make_classification_panel):
        item = make_raw_item(panels=[make_classification_panel(department="RES CMC, KSM")])
        assert get_event_type(item) == "CMC"
    
    def test_falls_through_to_next_panel(self, make_raw_item, make_classification_panel):
        item = make_raw_item(panels=[
            make_classification_panel(category=None),
            make_classification_panel(category="Meeting"),
        ])
        assert get_event_type(item) == "Meeting"
    
    def test_missing_details(self, make_raw_item):
        item = make_raw_item(with_details=False)
        assert get_event_type(item) is None
        assert get_organization(item) is None
        assert get_lecture_title(item) is None
        assert get_instructor_names(item) is None
        assert not is_academic_session(item)
    
    def test_instructors_single_block(self, make_raw_item):
        item = make_raw_item(panels=[
            {"typeId": 12, "item": [{"itemName": "Instructors: Jane Doe; John Smith"}]},
        ])
        assert get_instructor_names(item) == ["Jane Doe", "John Smith"]
    
    def test_instructors_nested_block(self, make_raw_item):
        item = make_raw_item(panels=[
            {"typeId": 13, "item": [{"item": [{"itemName": "Ada Lovelace"}]}]},
        ])
        assert get_instructor_names(item) == ["Ada Lovelace"]
    
    @pytest.mark.parametrize("text", [
        "<p>Instructors</p>",
        "Instructors: ",
        "AB",
        "x" * 100,
        "{{instructor}}",
    ])
    def test_unusable_instructor_text_skipped(self, make_raw_item, text):
        item = make_raw_item(panels=[{"typeId": 12, "item": [{"itemName": text}]}])
        assert get_instructor_names(item) is None
    
    def test_unusable_block_falls_through(self, make_raw_item):
        item = make_raw_item(panels=[
            {"typeId": 12, "item": [{"itemName": "<br>"}]},
            {"typeId": 13, "item": [{"item": [{"itemName": "Grace Hopper"}]}]},
        ])
        assert get_instructor_names(item) == ["Grace Hopper"]
    
    def test_academic_session(self, make_raw_item, make_classification_panel, make_session_panel):
        academic = make_raw_item(panels=[make_classification_panel(), make_session_panel()])
        social = make_raw_item(panels=[make_classification_panel(), make_session_panel("<p>Reception</p>")])
        assert is_academic_session(academic)
        assert is_academic_session(make_raw_item(
            panels=[make_classification_panel(), make_session_panel("<p>Class Session</p>")]
        ))
        assert not is_academic_session(social)
        assert not is_academic_session(None)


class TestResourceExtractor:
    """Tests pour parse_event_resources."""
    
    def test_matching_reservation(self, make_raw_item):
        item = make_raw_item(reservations=[
            {"startDt": "2025-07-14T09:00", "res": [{"itemName": "Projector", "quantity": 1}]},
            {"startDt": "2025-07-15T09:00", "res": [
                {"itemName": "KSM-KGH-VIDEO-RECORDING-A", "quantity": 1, "instruction": "Record", "extra": "x"},
            ]},
        ])
        resources = parse_event_resources(item, "2025-07-15")
        assert resources == [Resource("KSM-KGH-VIDEO-RECORDING-A", 1, "Record")]
    
    def test_first_match_wins_across_prof(self, make_raw_record):
        record = make_raw_record()
        record["itemDetails"]["occur"]["prof"] = [
            {"rsv": [{"startDt": "2025-07-15T08:00", "res": [{"itemName": "First"}]}]},
            {"rsv": [{"startDt": "2025-07-15T13:00", "res": [{"itemName": "Second"}]}]},
        ]
        item = RawEventItem.from_dict(record)
        assert [r.item_name for r in parse_event_resources(item, "2025-07-15T00:00:00")] == ["First"]
    
    def test_no_match(self, make_raw_item):
        item = make_raw_item(reservations=[{"startDt": "2025-07-14T09:00", "res": [{"itemName": "X"}]}])
        assert parse_event_resources(item, "2025-07-15") == []
    
    def test_match_without_resources(self, make_raw_item):
        item = make_raw_item(reservations=[{"startDt": "2025-07-15T09:00"}])
        assert parse_event_resources(item, "2025-07-15") == []
    
    def test_no_details(self, make_raw_item):
        assert parse_event_resources(make_raw_item(with_details=False), "2025-07-15") == []


class TestEventsNormalizer:
    """Tests pour EventsNormalizer (assemblage)."""
    
    def test_normalize_record(self, settings, make_raw_record):
        record = make_raw_record(
            item_id=123456789012,
            item_id2=987654321098,
            subject_item_id=4567,
            start=13.5,
            end=15,
            reservations=[{"startDt": "2025-07-15T13:30", "res": [{"itemName": "Mic", "quantity": 2}]}],
        )
        events = EventsNormalizer(settings).normalize_all([record])
        
        assert len(events) == 1
        event = events[0]
        assert event.id == 789015210984567
        assert event.item_id == 123456789012
        assert event.item_id2 == 987654321098
        assert event.date == "2025-07-15"
        assert event.start_time == "13:30:00"
        assert event.end_time == "15:00:00"
        assert event.event_name == "Strategy 101"
        assert event.event_type == "Class"
        assert event.lecture_title == "Strategy 101"
        assert event.room_name == "GH 1110"
        assert event.resources == (Resource("Mic", 2, None),)
        assert event.raw.payload is record
    
    def test_invalid_input_is_empty(self, settings):
        normalizer = EventsNormalizer(settings)
        assert normalizer.normalize_all(None) == []
        assert normalizer.normalize_all({"itemId": 1}) == []
        assert normalizer.normalize_all([]) == []
    
    def test_non_dict_entries_skipped(self, settings, make_raw_record):
        events = EventsNormalizer(settings).normalize_all(["garbage", make_raw_record()])
        assert len(events) == 1
    
    def test_raw_items_accepted(self, settings, make_raw_item, make_raw_record):
        item = make_raw_item(name="Typed")
        events = EventsNormalizer(settings).normalize_all([item, make_raw_record(name="Dict"), 42])
        
        assert [e.event_name for e in events] == ["Typed", "Dict"]
        assert events[0].raw is item
    
    def test_tuple_input_accepted(self, settings, make_raw_record):
        events = EventsNormalizer(settings).normalize_all((make_raw_record(),))
        assert len(events) == 1
    
    @pytest.mark.parametrize("raw_data", ["not a list", b"bytes"])
    def test_text_input_is_empty(self, settings, raw_data):
        assert EventsNormalizer(settings).normalize_all(raw_data) == []
    
    def test_output_order_matches_input(self, settings, make_raw_record):
        records = [make_raw_record(item_id=i, name=f"Event {i}") for i in (3, 1, 2)]
        events = EventsNormalizer(settings).normalize_all(records)
        assert [e.event_name for e in events] == ["Event 3", "Event 1", "Event 2"]
    
    def test_missing_identity_yields_none_id(self, settings, make_raw_item):
        event = EventsNormalizer(settings).normalize(make_raw_item(subject_item_id=None))
        assert event.id is None
    
    def test_camel_case_keys(self, settings, make_raw_record):
        record = make_raw_record()
        record["subjectItemId"] = record.pop("subject_itemId")
        record["subjectItemName"] = record.pop("subject_itemName")
        record["subjectItemDate"] = record.pop("subject_item_date")
        event = EventsNormalizer(settings).normalize(RawEventItem.from_dict(record))
        assert event.room_name == "GH 1110"
        assert event.date == "2025-07-15"
        assert event.id == generate_deterministic_id(1234567, 7654321, 101)
    
    def test_invalid_hours_propagate(self, settings, make_raw_item):
        with pytest.raises(ValueError):
            EventsNormalizer(settings).normalize(make_raw_item(start="morning"))
