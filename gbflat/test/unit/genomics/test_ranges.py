#!/usr/bin/env python
"""Tests for :py:class:`gbflat.genomics.ranges.RangeSet`"""
import unittest

import numpy
import numpy.testing as npt
import pytest

from gbflat.genomics.ranges import RangeSet


@pytest.mark.unit
class TestRangeSet(unittest.TestCase):

    def test_empty(self):
        rs = RangeSet()
        self.assertFalse(rs)
        self.assertEqual(len(rs),0)
        self.assertEqual(rs.ranges,[])
        self.assertIsNone(rs.start)
        self.assertIsNone(rs.end)
        self.assertEqual(repr(rs),"<RangeSet empty>")
        self.assertEqual(rs.get_position_array().shape,(0,))

    def test_from_inclusive(self):
        rs = RangeSet.from_inclusive(266,805)
        self.assertEqual(rs.ranges,[(266,806)])
        self.assertEqual(len(rs),540)
        self.assertIn(266,rs)
        self.assertIn(805,rs)
        self.assertNotIn(806,rs)
        self.assertNotIn(265,rs)

    def test_reversed_range_is_empty(self):
        self.assertFalse(RangeSet.from_inclusive(10,5))

    def test_spans_sorted(self):
        rs = RangeSet((20,31),(1,11))
        self.assertEqual(rs.ranges,[(1,11),(20,31)])
        self.assertEqual(list(rs),[(1,11),(20,31)])
        self.assertEqual((rs.start,rs.end),(1,31))

    def test_overlapping_spans_merge(self):
        rs = RangeSet((266,13469),(13468,21556))
        self.assertEqual(rs.ranges,[(266,21556)])

    def test_adjacent_spans_merge(self):
        self.assertEqual(RangeSet((1,11),(11,20)).ranges,[(1,20)])

    def test_bridging_span_merges_several(self):
        rs = RangeSet((1,5),(10,15),(20,25),(40,50))
        rs.add((3,22))
        self.assertEqual(rs.ranges,[(1,25),(40,50)])

    def test_contained_span_is_absorbed(self):
        rs = RangeSet((1,100))
        rs.add((10,20))
        self.assertEqual(rs.ranges,[(1,100)])

    def test_add_range_object(self):
        rs = RangeSet(range(5,10))
        self.assertEqual(rs.ranges,[(5,10)])
        self.assertRaises(ValueError,rs.add,range(0,10,2))

    def test_equality_independent_of_construction(self):
        a = RangeSet((1,11),(11,20))
        b = RangeSet((1,20))
        c = RangeSet((5,20),(1,6))
        self.assertEqual(a,b)
        self.assertEqual(b,c)
        self.assertNotEqual(a,RangeSet((1,19)))

    def test_union(self):
        a = RangeSet((1,11))
        b = RangeSet((20,31))
        c = a | b
        self.assertEqual(c.ranges,[(1,11),(20,31)])
        # operands unchanged
        self.assertEqual(a.ranges,[(1,11)])
        self.assertEqual(a.union(b,RangeSet((11,20))).ranges,[(1,31)])

    def test_len_counts_positions(self):
        self.assertEqual(len(RangeSet((1,11),(20,31))),21)

    def test_get_position_array(self):
        found = RangeSet((1,4),(10,12)).get_position_array()
        npt.assert_array_equal(found,numpy.array([1,2,3,10,11]))

    def test_str_and_repr(self):
        rs = RangeSet((1,11),(20,31))
        self.assertEqual(str(rs),"1..10,20..30")
        self.assertEqual(repr(rs),"<RangeSet [1, 11) [20, 31)>")

    def test_unhashable(self):
        self.assertRaises(TypeError,hash,RangeSet())
