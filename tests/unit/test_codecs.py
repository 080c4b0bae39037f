import plistlib
from datetime import datetime, timedelta, timezone

import pytest

from scheduler_studio.core.data import EventModel, PropertyListCodec, Writeable
from scheduler_studio.core.types_and_enums import DecodingError, EncodingError


def test_binary_and_xml_both_load() -> None:
    data = [{"name": "Standup", "date": "2024-01-01T00:00:00"}]

    binary = PropertyListCodec().encode(data)
    xml = PropertyListCodec(plistlib.FMT_XML).encode(data)

    assert binary.startswith(b"bplist00")
    assert xml.startswith(b"<?xml")
    assert PropertyListCodec().decode(xml) == data
    assert PropertyListCodec(plistlib.FMT_XML).decode(binary) == data


def test_unsupported_values_raise_encoding_error() -> None:
    with pytest.raises(EncodingError):
        PropertyListCodec().encode([{"name": object()}])


def test_non_list_container_raises_decoding_error() -> None:
    raw = plistlib.dumps({"name": "Standup"})

    with pytest.raises(DecodingError):
        PropertyListCodec().decode(raw)


def test_event_dates_keep_precision_and_timezone() -> None:
    event = EventModel("Review", datetime(2024, 3, 4, 5, 6, 7, 891011, tzinfo=timezone(timedelta(hours=2))))

    assert EventModel.fromDict(event.toDict()) == event


def test_event_model_satisfies_record_protocol() -> None:
    assert issubclass(EventModel, Writeable)
    assert isinstance(EventModel("Standup", datetime(2024, 1, 1)), Writeable)
    assert not issubclass(dict, Writeable)
