import math
import unittest

import pytest

from rcbor.adapter import classify_sequence, to_host
from rcbor.exception import DepthExceededError
from rcbor.host import NA, RList, Vector, VectorKind
from rcbor.wire import (
    BooleanValue,
    MappingValue,
    NumberValue,
    SequenceValue,
    SpecialTag,
    SpecialValue,
    TextValue,
    UnsupportedWireShapeError,
    WireValue,
)

MAX_DEPTH = 8

NA_TAG = SpecialValue(SpecialTag.NA)


@pytest.mark.parametrize(
    ['value', 'expected'],
    [
        (SpecialValue(SpecialTag.NULL), None),
        (NA_TAG, NA),
        (SpecialValue(SpecialTag.EMPTY_LIST), RList()),
        (SpecialValue(SpecialTag.EMPTY_BOOL_VEC), Vector.empty(VectorKind.LOGICAL)),
        (SpecialValue(SpecialTag.EMPTY_NUM_VEC), Vector.empty(VectorKind.NUMERIC)),
        (SpecialValue(SpecialTag.EMPTY_STRING_VEC), Vector.empty(VectorKind.CHARACTER)),
        (BooleanValue(False), Vector.logical(False)),
        (NumberValue(3.5), Vector.numeric(3.5)),
        (TextValue('x'), Vector.character('x')),
    ]
)
def test_leaves(value, expected):
    assert to_host(value, max_depth=MAX_DEPTH) == expected


class ClassifySequenceTestCase(unittest.TestCase):
    def _classify(self, *items: WireValue) -> VectorKind | None:
        return classify_sequence(items, VectorKind.LOGICAL)

    def test_homogeneous_sequences(self):
        self.assertIs(self._classify(BooleanValue(True), NA_TAG), VectorKind.LOGICAL)
        self.assertIs(self._classify(NumberValue(1.0), NA_TAG, NumberValue(2.0)), VectorKind.NUMERIC)
        self.assertIs(self._classify(NA_TAG, TextValue('a')), VectorKind.CHARACTER)

    def test_no_evidence(self):
        self.assertIs(self._classify(), VectorKind.LOGICAL)
        self.assertIs(self._classify(NA_TAG, NA_TAG), VectorKind.LOGICAL)
        self.assertIs(classify_sequence((NA_TAG,), VectorKind.NUMERIC), VectorKind.NUMERIC)

    def test_mixed_sequences_are_lists(self):
        self.assertIsNone(self._classify(NumberValue(1.0), TextValue('x'), BooleanValue(True)))
        self.assertIsNone(self._classify(BooleanValue(True), NumberValue(1.0)))
        self.assertIsNone(self._classify(SpecialValue(SpecialTag.NULL), NumberValue(1.0)))
        self.assertIsNone(self._classify(SequenceValue(), NumberValue(1.0)))
        self.assertIsNone(self._classify(MappingValue()))


def test_missing_value_placement():
    value = to_host(SequenceValue((BooleanValue(True), NA_TAG, BooleanValue(False))), max_depth=MAX_DEPTH)
    assert value == Vector.logical(True, NA, False)
    assert value.is_na(1)


def test_special_floats_are_kept():
    value = to_host(SequenceValue((NumberValue(math.nan), NumberValue(-math.inf))), max_depth=MAX_DEPTH)
    assert value.kind is VectorKind.NUMERIC
    assert math.isnan(value[0])
    assert value[1] == -math.inf


def test_heterogeneous_fallback():
    value = to_host(SequenceValue((NumberValue(1.0), TextValue('x'), BooleanValue(True))), max_depth=MAX_DEPTH)
    assert value == RList.unnamed(Vector.numeric(1), Vector.character('x'), Vector.logical(True))


def test_na_inside_heterogeneous_list_is_standalone():
    value = to_host(SequenceValue((NumberValue(1.0), TextValue('x'), NA_TAG)), max_depth=MAX_DEPTH)
    assert value == RList.unnamed(Vector.numeric(1), Vector.character('x'), NA)


def test_mapping_is_a_named_list_in_key_order():
    value = to_host(MappingValue((('b', TextValue('x')), ('a', SpecialValue(SpecialTag.NULL)))), max_depth=MAX_DEPTH)
    assert value == RList.named([('b', Vector.character('x')), ('a', None)])


def test_empty_mapping_is_an_empty_named_list():
    assert to_host(MappingValue(), max_depth=MAX_DEPTH) == RList((), ())


@pytest.mark.parametrize('kind', list(VectorKind))
def test_all_na_kind(kind):
    value = to_host(SequenceValue((NA_TAG, NA_TAG)), max_depth=MAX_DEPTH, all_na_kind=kind)
    assert value == Vector(kind, (NA, NA))


def test_unsupported_wire_value():
    with pytest.raises(UnsupportedWireShapeError):
        to_host(SequenceValue((object(),)), max_depth=MAX_DEPTH)


def _nested_sequence(levels, leaf):
    value = leaf
    for _ in range(levels):
        value = SequenceValue((value, SpecialValue(SpecialTag.NULL)))
    return value


def test_depth_limit():
    to_host(_nested_sequence(MAX_DEPTH, BooleanValue(True)), max_depth=MAX_DEPTH)
    with pytest.raises(DepthExceededError):
        to_host(_nested_sequence(MAX_DEPTH + 1, BooleanValue(True)), max_depth=MAX_DEPTH)


def test_vectors_count_towards_depth():
    vector = SequenceValue((NumberValue(1.0), NumberValue(2.0)))
    to_host(_nested_sequence(MAX_DEPTH - 1, vector), max_depth=MAX_DEPTH)
    with pytest.raises(DepthExceededError):
        to_host(_nested_sequence(MAX_DEPTH, vector), max_depth=MAX_DEPTH)
