"""
Tests for the model catalogue.

Nested models, one-of unions, nullable fields and enums, using the incident
attachment, log search and downtime models.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import orjson
import pytest

from monitoring_api.exceptions import MalformedPayload, MissingRequiredField
from monitoring_api.schemas.base import ApiModel, UnparsedObject, decode, decode_one_of, encode
from monitoring_api.schemas.v1.downtimes import Downtime, DowntimeRecurrence
from monitoring_api.schemas.v2.incidents import (
    IncidentAttachmentAttributes,
    IncidentAttachmentData,
    IncidentAttachmentLinkAttachmentType,
    IncidentAttachmentLinkAttributes,
    IncidentAttachmentLinkAttributesAttachmentObject,
    IncidentAttachmentPostmortemAttachmentType,
    IncidentAttachmentPostmortemAttributes,
    IncidentAttachmentsPostmortemAttributesAttachmentObject,
    IncidentAttachmentType,
)
from monitoring_api.schemas.v2.logs import (
    LogsAggregateResponseStatus,
    LogsListRequest,
    LogsListRequestPage,
    LogsListResponse,
    LogsQueryFilter,
    LogsSort,
    LogType,
)

PAYLOADS_DIR = Path(__file__).parent.parent / 'fixtures' / 'payloads'

LINK_ATTRIBUTES = (
    b'{"attachment": {"documentUrl": "https://www.example.com/doc", "title": "Doc"},'
    b' "attachment_type": "link"}'
)
POSTMORTEM_ATTRIBUTES = (
    b'{"attachment": {"documentUrl": "https://app.example.com/notebook/1", "title": "PM"},'
    b' "attachment_type": "postmortem"}'
)


# ==============================================================================
# Incident attachments
# ==============================================================================


def test_nested_model_encodes_wire_names() -> None:
    attributes = IncidentAttachmentLinkAttributes(
        attachment=IncidentAttachmentLinkAttributesAttachmentObject(
            document_url='https://www.example.com/doc', title='Doc'
        ),
        attachment_type=IncidentAttachmentLinkAttachmentType.LINK,
    )

    assert orjson.loads(encode(attributes)) == orjson.loads(LINK_ATTRIBUTES)


def test_nested_additional_properties_are_encoded() -> None:
    attachment = IncidentAttachmentLinkAttributesAttachmentObject(document_url='https://x.example.com', title='X')
    attachment.additional_properties = {'owner': 'team-x'}
    attributes = IncidentAttachmentLinkAttributes(
        attachment=attachment,
        attachment_type=IncidentAttachmentLinkAttachmentType.LINK,
    )

    assert orjson.loads(encode(attributes))['attachment']['owner'] == 'team-x'


def test_nested_missing_required_field_names_path() -> None:
    payload = b'{"attachment": {"documentUrl": "https://x.example.com"}, "attachment_type": "link"}'

    with pytest.raises(MissingRequiredField) as exc_info:
        decode(IncidentAttachmentLinkAttributes, payload)

    assert exc_info.value.field_name == 'attachment.title'
    assert exc_info.value.model_name == 'IncidentAttachmentLinkAttributes'


def test_unknown_enum_value_falls_back_to_unparsed() -> None:
    payload = b'{"attachment": {"documentUrl": "https://x.example.com", "title": "X"}, "attachment_type": "video"}'

    decoded = decode(IncidentAttachmentLinkAttributes, payload)

    assert isinstance(decoded, UnparsedObject)
    assert decoded.raw['attachment_type'] == 'video'


def test_incident_attachment_data_resolves_union_member() -> None:
    decoded = decode(IncidentAttachmentData, (PAYLOADS_DIR / 'incident_attachment_data.json').read_bytes())

    assert isinstance(decoded, IncidentAttachmentData)
    assert decoded.type is IncidentAttachmentType.INCIDENT_ATTACHMENTS
    assert isinstance(decoded.attributes, IncidentAttachmentLinkAttributes)
    assert decoded.attributes.attachment.title == 'Important Doc'


def test_incident_attachment_data_round_trip() -> None:
    record = IncidentAttachmentData(
        id='00000000-abcd-0002-0000-000000000000',
        type=IncidentAttachmentType.INCIDENT_ATTACHMENTS,
        attributes=IncidentAttachmentPostmortemAttributes(
            attachment=IncidentAttachmentsPostmortemAttributesAttachmentObject(
                document_url='https://app.example.com/notebook/1', title='PM'
            ),
            attachment_type=IncidentAttachmentPostmortemAttachmentType.POSTMORTEM,
        ),
    )

    decoded = decode(IncidentAttachmentData, encode(record))

    assert decoded == record
    assert isinstance(decoded, IncidentAttachmentData)
    assert isinstance(decoded.attributes, IncidentAttachmentPostmortemAttributes)


def test_missing_field_inside_union_names_wire_path() -> None:
    """Union member names are not part of the reported path."""
    payload = b'{"id": "1", "type": "incident_attachments", "attributes": {"attachment_type": "link"}}'

    with pytest.raises(MissingRequiredField) as exc_info:
        decode(IncidentAttachmentData, payload)

    assert exc_info.value.field_name == 'attributes.attachment'
    assert exc_info.value.model_name == 'IncidentAttachmentData'


# ==============================================================================
# One-of decode
# ==============================================================================


@pytest.mark.parametrize(
    ('payload', 'expected_type'),
    [
        (LINK_ATTRIBUTES, IncidentAttachmentLinkAttributes),
        (POSTMORTEM_ATTRIBUTES, IncidentAttachmentPostmortemAttributes),
    ],
    ids=['link', 'postmortem'],
)
def test_one_of_selects_single_matching_member(payload: bytes, expected_type: type[ApiModel]) -> None:
    decoded = IncidentAttachmentAttributes.decode(payload)

    assert type(decoded) is expected_type
    assert orjson.loads(encode(decoded)) == orjson.loads(payload)


@pytest.mark.parametrize(
    'payload',
    [
        b'{"attachment": {"documentUrl": "u", "title": "t"}, "attachment_type": "spreadsheet"}',
        b'{}',
        b'{"attachment": {"documentUrl": "u"}, "attachment_type": "link"}',
    ],
    ids=['unknown-type', 'empty', 'member-missing-field'],
)
def test_one_of_without_match_is_unparsed(payload: bytes) -> None:
    decoded = IncidentAttachmentAttributes.decode(payload)

    assert isinstance(decoded, UnparsedObject)
    assert decoded.model_name == 'IncidentAttachmentAttributes'
    assert orjson.loads(encode(decoded)) == orjson.loads(payload)


def test_one_of_malformed_payload() -> None:
    with pytest.raises(MalformedPayload):
        IncidentAttachmentAttributes.decode(b'[]')


class Named(ApiModel):
    name: str


class Labelled(ApiModel):
    name: str
    label: str | None = None


class Loose(ApiModel):
    color: str | None = None


def test_one_of_with_several_matches_is_unparsed() -> None:
    decoded = decode_one_of('NamedOrLabelled', (Named, Labelled), b'{"name": "x"}')

    assert isinstance(decoded, UnparsedObject)
    assert decoded.model_name == 'NamedOrLabelled'


def test_one_of_ignores_members_that_decode_empty() -> None:
    """A member with only optional fields matches everything; an empty encoding does not count."""
    decoded = decode_one_of('LooseOrNamed', (Loose, Named), b'{"name": "x"}')

    assert isinstance(decoded, Named)
    assert decoded.name == 'x'


# ==============================================================================
# Logs
# ==============================================================================


def test_logs_query_filter_defaults() -> None:
    assert orjson.loads(encode(LogsQueryFilter.with_defaults())) == {
        'from': 'now-15m',
        'indexes': ['*'],
        'query': '*',
        'storage_tier': 'indexes',
        'to': 'now',
    }


def test_optional_fields_are_omitted_when_unset() -> None:
    request = LogsListRequest(filter=LogsQueryFilter(query='service:payments'), sort=LogsSort.TIMESTAMP_ASCENDING)

    assert encode(request) == b'{"filter":{"query":"service:payments"},"sort":"timestamp"}'


def test_logs_list_request_setters() -> None:
    request = LogsListRequest()
    request.filter = LogsQueryFilter(from_='now-2h', to='now+2h', query='abc123')
    request.page = LogsListRequestPage(limit=2)
    request.sort = LogsSort.TIMESTAMP_DESCENDING

    assert orjson.loads(encode(request)) == {
        'filter': {'from': 'now-2h', 'query': 'abc123', 'to': 'now+2h'},
        'page': {'limit': 2},
        'sort': '-timestamp',
    }


@pytest.mark.parametrize(
    'payload',
    [b'{"from_": "now-1h", "query": "*"}', b'{"from_": 5, "query": "*"}'],
    ids=['matching-type', 'wrong-type'],
)
def test_python_field_name_is_unknown_on_the_wire(payload: bytes) -> None:
    """Only wire names are read on decode; "from_" is an unknown property and is dropped."""
    decoded = decode(LogsQueryFilter, payload)

    assert isinstance(decoded, LogsQueryFilter)
    assert decoded.from_ is None
    assert encode(decoded) == b'{"query":"*"}'


def test_field_name_still_accepted_by_constructor() -> None:
    assert LogsQueryFilter(from_='now-1h').from_ == 'now-1h'


def test_logs_list_response_decodes() -> None:
    decoded = LogsListResponse.from_json((PAYLOADS_DIR / 'logs_list_response.json').read_bytes())

    assert isinstance(decoded, LogsListResponse)
    assert decoded.data is not None
    assert len(decoded.data) == 2
    first = decoded.data[0]
    assert first.type is LogType.LOG
    assert first.attributes is not None
    assert first.attributes.message == 'test-log-list-1 abc123'
    assert first.attributes.timestamp == datetime(2026, 10, 18, 9, 30, tzinfo=UTC)
    assert first.attributes.attributes == {'http': {'status_code': 200}}
    assert decoded.meta is not None
    assert decoded.meta.status is LogsAggregateResponseStatus.DONE


def test_logs_list_response_is_stable_across_round_trips() -> None:
    decoded = decode(LogsListResponse, (PAYLOADS_DIR / 'logs_list_response.json').read_bytes())
    payload = encode(decoded)

    assert encode(decode(LogsListResponse, payload)) == payload


def test_logs_list_response_unknown_status_is_unparsed() -> None:
    decoded = decode(LogsListResponse, b'{"data": [], "meta": {"status": "running"}}')

    assert isinstance(decoded, UnparsedObject)
    assert decoded.raw == {'data': [], 'meta': {'status': 'running'}}


# ==============================================================================
# Downtimes (nullable fields)
# ==============================================================================


def test_yearly_downtime_body() -> None:
    body = Downtime(
        message='Example-Schedule_a_downtime_once_a_year',
        recurrence=DowntimeRecurrence(period=1, type='years'),
        scope=['*'],
        start=1760780000,
        end=1760783600,
        timezone='Etc/UTC',
        mute_first_recovery_notification=True,
        monitor_tags=['tag0'],
    )

    assert orjson.loads(encode(body)) == {
        'end': 1760783600,
        'message': 'Example-Schedule_a_downtime_once_a_year',
        'monitor_tags': ['tag0'],
        'mute_first_recovery_notification': True,
        'recurrence': {'period': 1, 'type': 'years'},
        'scope': ['*'],
        'start': 1760780000,
        'timezone': 'Etc/UTC',
    }


def test_nullable_field_omitted_when_never_set() -> None:
    assert encode(Downtime(message='m')) == b'{"message":"m"}'


def test_nullable_field_explicit_none_is_sent_as_null() -> None:
    assert orjson.loads(encode(Downtime(message='m', end=None))) == {'end': None, 'message': 'm'}


def test_nullable_field_assigned_none_is_sent_as_null() -> None:
    downtime = Downtime(message='m')
    downtime.recurrence = None

    assert orjson.loads(encode(downtime)) == {'message': 'm', 'recurrence': None}


def test_non_nullable_optional_none_is_omitted() -> None:
    assert encode(Downtime(message=None, timezone=None)) == b'{}'


def test_decoded_null_survives_re_encoding() -> None:
    decoded = decode(Downtime, (PAYLOADS_DIR / 'downtime_yearly.json').read_bytes())

    assert isinstance(decoded, Downtime)
    assert decoded.end is None
    data = orjson.loads(encode(decoded))
    assert 'end' in data
    assert data['end'] is None
    assert data['recurrence'] == {'period': 1, 'type': 'years'}
