import math
import unittest

from rcbor.wire import (
    BooleanValue,
    MappingValue,
    NumberValue,
    SequenceValue,
    SpecialTag,
    SpecialValue,
    TextValue,
)


class WireValuesTestCase(unittest.TestCase):
    def test_number_is_always_float(self):
        number = NumberValue(3)
        self.assertIsInstance(number.value, float)
        self.assertEqual(number, NumberValue(3.0))

    def test_number_rejects_bool_and_str(self):
        with self.assertRaises(TypeError):
            NumberValue(True)
        with self.assertRaises(TypeError):
            NumberValue('1')

    def test_nan_equals_nan(self):
        self.assertTrue(NumberValue(math.nan).is_nan())
        self.assertEqual(NumberValue(math.nan), NumberValue(float('nan')))
        self.assertEqual(hash(NumberValue(math.nan)), hash(NumberValue(float('nan'))))
        self.assertNotEqual(NumberValue(math.nan), NumberValue(0.0))
        self.assertNotEqual(NumberValue(math.inf), NumberValue(-math.inf))

    def test_scalar_type_checks(self):
        with self.assertRaises(TypeError):
            BooleanValue(1)
        with self.assertRaises(TypeError):
            TextValue(b'x')
        with self.assertRaises(TypeError):
            SpecialValue('NA')

    def test_distinct_variants_are_not_equal(self):
        self.assertNotEqual(BooleanValue(True), NumberValue(1.0))
        self.assertNotEqual(SequenceValue(), MappingValue())

    def test_sequence(self):
        sequence = SequenceValue([TextValue('a'), SpecialValue(SpecialTag.NA)])
        self.assertEqual(len(sequence), 2)
        self.assertEqual(sequence[1], SpecialValue(SpecialTag.NA))
        self.assertEqual(list(sequence), [TextValue('a'), SpecialValue(SpecialTag.NA)])

    def test_mapping_keeps_order(self):
        mapping = MappingValue.from_items([('b', BooleanValue(True)), ('a', NumberValue(1.0))])
        self.assertEqual(mapping.keys(), ['b', 'a'])
        self.assertEqual(mapping.values(), [BooleanValue(True), NumberValue(1.0)])
        self.assertEqual(mapping.get('a'), NumberValue(1.0))
        self.assertIsNone(mapping.get('c'))
        self.assertNotEqual(mapping, MappingValue.from_items(reversed(list(mapping.items()))))

    def test_mapping_keys_are_unique_text(self):
        with self.assertRaises(ValueError):
            MappingValue((('a', BooleanValue(True)), ('a', BooleanValue(False))))
        with self.assertRaises(TypeError):
            MappingValue(((1, BooleanValue(True)),))
