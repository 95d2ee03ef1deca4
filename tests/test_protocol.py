import io

import pytest

from hessian2.codec import pack_int32, pack_int64
from hessian2.constants import (
    DUBBO_REQUEST_HEADER,
    DUBBO_REQUEST_HEADER_TWOWAY,
    DUBBO_REQUEST_HEARTBEAT_HEADER,
    DUBBO_RESPONSE_HEADER,
    HEADER_LENGTH,
    RESPONSE_OK,
    RESPONSE_SERVER_ERROR,
    ZERO,
    BodyNotEnoughError,
    HeaderNotEnoughError,
    HessianError,
    IllegalPackageError,
)
from hessian2.protocol import (
    DubboHeader,
    HessianCodec,
    PackageType,
    Service,
)

MAIN_TYPES = PackageType.REQUEST | PackageType.RESPONSE | PackageType.HEARTBEAT


def make_packet(template, serial_id=2, request_id=1, body=b"abc", status=None):
    header = bytearray(template)
    header[2] |= serial_id
    if status is not None:
        header[3] = status
    header[4:12] = pack_int64(request_id)
    header[12:16] = pack_int32(len(body))
    return bytes(header) + body


def test_request_header():
    body = b"request-body"
    codec = HessianCodec(io.BytesIO(make_packet(DUBBO_REQUEST_HEADER, body=body)))
    h = codec.read_header()
    assert h.serial_id == 2
    assert h.type & MAIN_TYPES == PackageType.REQUEST
    assert not h.type & PackageType.REQUEST_TWOWAY
    assert h.id == 1
    assert h.response_status == ZERO
    assert h.body_len == len(body)
    assert codec.body_len == len(body)
    assert codec.pkg_type == h.type


def test_two_way_request_header():
    codec = HessianCodec(make_packet(DUBBO_REQUEST_HEADER_TWOWAY))
    h = codec.read_header()
    assert h.type & MAIN_TYPES == PackageType.REQUEST
    assert h.type & PackageType.REQUEST_TWOWAY


def test_response_ok_header():
    codec = HessianCodec(make_packet(DUBBO_RESPONSE_HEADER))
    h = codec.read_header()
    assert h.type & MAIN_TYPES == PackageType.RESPONSE
    assert h.response_status == RESPONSE_OK
    assert not h.type & PackageType.RESPONSE_EXCEPTION


def test_response_error_header():
    packet = make_packet(DUBBO_RESPONSE_HEADER, status=RESPONSE_SERVER_ERROR)
    h = HessianCodec(packet).read_header()
    assert h.response_status == RESPONSE_SERVER_ERROR
    assert h.type & PackageType.RESPONSE_EXCEPTION


def test_heartbeat_request_header():
    h = HessianCodec(make_packet(DUBBO_REQUEST_HEARTBEAT_HEADER)).read_header()
    assert h.type & MAIN_TYPES == PackageType.REQUEST | PackageType.HEARTBEAT


def test_request_id_round_trip_signed():
    h = HessianCodec(make_packet(DUBBO_REQUEST_HEADER, request_id=-5)).read_header()
    assert h.id == -5


def test_stream_positioned_after_header():
    stream = io.BytesIO(make_packet(DUBBO_REQUEST_HEADER, body=b"xyz"))
    HessianCodec(stream).read_header()
    assert stream.tell() == HEADER_LENGTH
    assert stream.read() == b"xyz"


def test_short_header():
    with pytest.raises(HeaderNotEnoughError):
        HessianCodec(make_packet(DUBBO_REQUEST_HEADER)[:10]).read_header()


def test_no_reader():
    with pytest.raises(HeaderNotEnoughError):
        HessianCodec(None).read_header()


def test_zero_serial_id():
    with pytest.raises(HessianError, match="serialization ID:0"):
        HessianCodec(make_packet(DUBBO_REQUEST_HEADER, serial_id=0)).read_header()


def test_bad_magic():
    packet = bytearray(make_packet(DUBBO_REQUEST_HEADER))
    packet[0] = 0
    packet[1] = 0
    with pytest.raises(IllegalPackageError):
        HessianCodec(bytes(packet)).read_header()


def test_only_one_magic_byte_wrong_is_accepted():
    packet = bytearray(make_packet(DUBBO_REQUEST_HEADER))
    packet[0] = 0
    h = HessianCodec(bytes(packet)).read_header()
    assert h.serial_id == 2


def test_body_not_enough():
    packet = make_packet(DUBBO_REQUEST_HEADER, body=b"0123456789")
    with pytest.raises(BodyNotEnoughError):
        HessianCodec(packet[:-3]).read_header()


def test_buffered_reader_stream():
    packet = make_packet(DUBBO_RESPONSE_HEADER, body=b"payload")
    reader = io.BufferedReader(io.BytesIO(packet))
    h = HessianCodec(reader).read_header()
    assert h.body_len == len(b"payload")


def test_defaults():
    assert DubboHeader().type == PackageType.NONE
    assert Service(path="test").timeout.total_seconds() == 0
    assert Service(path="test").path == "test"