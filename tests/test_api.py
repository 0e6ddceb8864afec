import math
import unittest

import cbor2
import pytest
from structlog.testing import capture_logs

from rcbor.api import Codec, decode, encode
from rcbor.conf.get_settings import get_global_settings
from rcbor.conf.settings import RcborSettings
from rcbor.exception import DecodeError, DepthExceededError, EncodeError, RcborError
from rcbor.host import NA, RList, Vector, VectorKind
from rcbor.wire import MalformedError, SequenceValue, UnknownTagError

ROUND_TRIP_VALUES = [
    None,
    NA,
    Vector.logical(True),
    Vector.numeric(3.5),
    Vector.numeric(-0.0),
    Vector.character(''),
    Vector.logical(True, NA, False),
    Vector.numeric(1, math.nan, math.inf, -math.inf, NA),
    Vector.character('a', 'ção', NA),
    Vector.logical(NA, NA),
    Vector.empty(VectorKind.LOGICAL),
    Vector.empty(VectorKind.NUMERIC),
    Vector.empty(VectorKind.CHARACTER),
    RList(),
    RList.unnamed(Vector.numeric(1), Vector.character('x'), Vector.logical(True)),
    RList.unnamed(None, Vector.numeric(1, 2)),
    RList.unnamed(RList(), Vector.empty(VectorKind.CHARACTER)),
    RList.named({'a': Vector.numeric(1), 'b': Vector.character('x')}),
    RList.named({'z': None, 'a': NA, '': RList.named({'inner': Vector.logical(False, True)})}),
    RList.named({'nested': RList.unnamed(Vector.numeric(1, 2), RList.named({'x': None}))}),
]


@pytest.mark.parametrize('value', ROUND_TRIP_VALUES, ids=repr)
def test_round_trip(value):
    assert decode(encode(value)) == value


def test_round_trip_keeps_negative_zero():
    value = decode(encode(Vector.numeric(-0.0, 1.0)))
    assert math.copysign(1.0, value[0]) == -1.0


def test_scalar_collapse():
    assert encode(Vector.numeric(3.5)) == encode(3.5)
    assert decode(encode(3.5)) == Vector.numeric(3.5)


def test_empty_vector_typing_survives():
    value = decode(encode(Vector.empty(VectorKind.CHARACTER)))
    assert isinstance(value, Vector)
    assert value.kind is VectorKind.CHARACTER
    assert len(value) == 0


def test_missing_value_placement():
    data = encode([True, NA, False])
    assert cbor2.loads(data) == [True, {'$R_TYPE': 'NA'}, False]
    assert decode(encode(Vector.logical(True, NA, False))) == Vector.logical(True, NA, False)


def test_named_vs_unnamed():
    assert cbor2.loads(encode({'a': 1, 'b': 'x'})) == {'a': 1.0, 'b': 'x'}
    assert list(cbor2.loads(encode({'a': 1, 'b': 'x'})).keys()) == ['a', 'b']
    assert cbor2.loads(encode([1, 'x'])) == [1.0, 'x']


def test_heterogeneous_fallback():
    value = decode(encode([1, 'x', True]))
    assert value == RList.unnamed(Vector.numeric(1), Vector.character('x'), Vector.logical(True))


def test_unknown_tag_rejection():
    with pytest.raises(UnknownTagError):
        decode(cbor2.dumps({'$R_TYPE': 'Bogus'}))


def test_homogeneous_list_of_scalars_decodes_as_a_vector():
    assert encode(RList.unnamed(Vector.numeric(1), Vector.numeric(2))) == encode(Vector.numeric(1, 2))
    assert decode(encode([1, 2])) == Vector.numeric(1, 2)


def test_decode_legacy_integers():
    assert decode(cbor2.dumps([1, 2, 0])) == Vector.numeric(1, 2, 0)


def test_decode_legacy_empty_integer_vector():
    assert decode(cbor2.dumps({'$R_TYPE': 'EmptyIntegerVec'})) == Vector.empty(VectorKind.NUMERIC)


def test_encode_text_that_is_not_utf8():
    with pytest.raises(EncodeError):
        encode('\ud800')
    with pytest.raises(EncodeError):
        encode({'a': Vector.character('ok', '\udfff')})


@pytest.mark.parametrize('encoded', ['c24101', '82d81c82f5f5d81d00', 'd9d9f783f5f4f5'])
def test_decode_rejects_semantic_tags(encoded):
    with pytest.raises(DecodeError):
        decode(bytes.fromhex(encoded))


def test_decode_rejects_repeated_keys():
    with pytest.raises(MalformedError):
        decode(bytes.fromhex('a2616101616102'))


class CodecTestCase(unittest.TestCase):
    def test_uses_global_settings_by_default(self):
        codec = Codec()
        self.assertIs(codec.settings, get_global_settings())
        self.assertEqual(codec.settings.MAX_DEPTH, 32)

    def test_explicit_settings(self):
        codec = Codec(RcborSettings(MAX_DEPTH=2, ALL_NA_VECTOR_KIND=VectorKind.NUMERIC))
        self.assertEqual(codec.decode(encode([NA, NA])), Vector.numeric(NA, NA))
        self.assertEqual(codec.encode([[1]]), encode([[1]]))
        with self.assertRaises(DepthExceededError):
            codec.encode([[[1]]])
        with self.assertRaises(DepthExceededError):
            codec.decode(encode([[[1, 2], 3]]))

    def test_module_functions_accept_settings(self):
        settings = RcborSettings(MAX_DEPTH=1)
        self.assertEqual(decode(encode([1, 'x'], settings=settings), settings=settings),
                         RList.unnamed(Vector.numeric(1), Vector.character('x')))
        with self.assertRaises(DepthExceededError):
            encode([[1, 2]], settings=settings)

    def test_steps_compose(self):
        codec = Codec()
        wire = codec.to_wire(Vector.numeric(1, 2))
        self.assertIsInstance(wire, SequenceValue)
        self.assertEqual(codec.read(codec.write(wire)), wire)
        self.assertEqual(codec.to_host(wire), Vector.numeric(1, 2))

    def test_errors_share_a_base(self):
        codec = Codec()
        with self.assertRaises(EncodeError):
            codec.encode(object())
        with self.assertRaises(DecodeError):
            codec.decode(b'\xf5\xf5')
        with self.assertRaises(RcborError):
            codec.decode(b'')

    def test_logs_encode_and_decode(self):
        get_global_settings()
        with capture_logs() as logs:
            codec = Codec()
            data = codec.encode({'a': [1, 2]})
            codec.decode(data)
        events = [log['event'] for log in logs]
        self.assertEqual(events, ['encoded value', 'decoded value'])
        self.assertEqual(logs[0]['size'], len(data))
        self.assertEqual(logs[1]['kind'], 'named list[1]')
        self.assertEqual(logs[1]['log_level'], 'debug')

    def test_logs_failures(self):
        get_global_settings()
        with capture_logs() as logs:
            codec = Codec()
            with self.assertRaises(MalformedError):
                codec.decode(b'\x82\x01')
        self.assertEqual([log['event'] for log in logs], ['decode failed'])
