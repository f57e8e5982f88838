#!/usr/bin/env python
"""Tests for :py:mod:`gbflat.genomics.sequence`"""
import copy
import unittest

import numpy
import numpy.testing as npt
import pytest

from gbflat.genomics.sequence import BasePair, \
                                     GeneSequence, \
                                     GeneSequenceSlice, \
                                     pack_codes, \
                                     unpack_codes

#===============================================================================
# INDEX: helpers
#===============================================================================

def _random_codes(n,seed=5):
    return numpy.random.RandomState(seed).randint(0,4,size=n).astype(numpy.uint8)


#===============================================================================
# INDEX: packing
#===============================================================================

@pytest.mark.unit
def test_pack_codes_layout():
    # earliest base sits in lowest two bits
    found = pack_codes([BasePair.T,BasePair.A,BasePair.C,BasePair.G,BasePair.T])
    npt.assert_array_equal(found,numpy.array([0b10010011,0b11],dtype=numpy.uint8))

@pytest.mark.unit
@pytest.mark.parametrize("n",[0,1,2,3,4,5,8,29903])
def test_pack_unpack_codes_lengths(n):
    codes = _random_codes(n)
    packed = pack_codes(codes)
    assert len(packed) == -(-n // 4)
    npt.assert_array_equal(unpack_codes(packed,n),codes)


#===============================================================================
# INDEX: BasePair
#===============================================================================

@pytest.mark.unit
class TestBasePair(unittest.TestCase):

    def test_codes(self):
        self.assertEqual([int(X) for X in (BasePair.A,BasePair.C,BasePair.G,BasePair.T)],[0,1,2,3])

    def test_str_is_lowercase(self):
        self.assertEqual("".join(str(X) for X in BasePair),"acgt")

    def test_from_letter(self):
        self.assertEqual(BasePair.from_letter("g"),BasePair.G)
        self.assertEqual(BasePair.from_letter("G"),BasePair.G)
        self.assertRaises(KeyError,BasePair.from_letter,"n")


#===============================================================================
# INDEX: GeneSequence
#===============================================================================

@pytest.mark.unit
class TestGeneSequence(unittest.TestCase):

    def test_empty(self):
        seq = GeneSequence()
        self.assertEqual(len(seq),0)
        self.assertEqual(seq.length,0)
        self.assertEqual(str(seq),"")
        self.assertEqual(list(seq),[])

    def test_append_then_get_across_lengths(self):
        for n in (0,1,2,3,4,5,8,29903):
            codes = _random_codes(n,seed=n)
            seq = GeneSequence()
            for code in codes:
                seq.append(BasePair(int(code)))

            self.assertEqual(len(seq),n)
            self.assertGreaterEqual(len(seq.storage),-(-n // 4))
            npt.assert_array_equal(seq.codes(),codes)
            if n > 0:
                self.assertEqual(seq[n-1],BasePair(int(codes[-1])))
                self.assertEqual(seq[0],BasePair(int(codes[0])))

    def test_from_str_and_str(self):
        seq = GeneSequence.from_str("ATTAAAGGTT")
        self.assertEqual(str(seq),"attaaaggtt")
        self.assertEqual(list(seq)[:3],[BasePair.A,BasePair.T,BasePair.T])

    def test_from_str_rejects_other_letters(self):
        self.assertRaises(KeyError,GeneSequence.from_str,"acgn")

    def test_storage_too_small_raises(self):
        self.assertRaises(ValueError,GeneSequence,numpy.zeros(1,dtype=numpy.uint8),5)

    def test_remove_last(self):
        seq = GeneSequence.from_str("acgta")
        self.assertEqual(seq.remove_last(),BasePair.A)
        self.assertEqual(str(seq),"acgt")
        self.assertEqual(seq.remove_last(),BasePair.T)
        self.assertEqual(len(seq),3)

        # appending after removal overwrites stale bits
        seq.append(BasePair.C)
        self.assertEqual(str(seq),"acgc")

    def test_remove_last_empty_raises(self):
        self.assertRaises(IndexError,GeneSequence().remove_last)

    def test_set_does_not_disturb_neighbors(self):
        seq = GeneSequence.from_str("aaaaaaaa")
        seq[5] = BasePair.T
        seq.set(2,BasePair.G)
        self.assertEqual(str(seq),"aagaataa")
        seq[5] = BasePair.A
        self.assertEqual(str(seq),"aagaaaaa")

    def test_negative_index(self):
        seq = GeneSequence.from_str("acgt")
        self.assertEqual(seq[-1],BasePair.T)
        self.assertEqual(seq[-4],BasePair.A)

    def test_out_of_bounds_raises(self):
        seq = GeneSequence.from_str("acgt")
        self.assertRaises(IndexError,seq.__getitem__,4)
        self.assertRaises(IndexError,seq.__getitem__,-5)
        self.assertRaises(IndexError,seq.get,4)
        self.assertRaises(IndexError,seq.set,4,BasePair.A)

    def test_extra_storage_bits_unreachable(self):
        seq = GeneSequence(numpy.array([0xFF],dtype=numpy.uint8),2)
        self.assertEqual(str(seq),"tt")
        self.assertRaises(IndexError,seq.get,2)

    def test_equality_ignores_storage_size(self):
        a = GeneSequence.from_str("acgta")
        b = GeneSequence.from_str("acgtaa")
        b.remove_last()
        self.assertEqual(a,b)
        self.assertFalse(a != b)

    def test_ordering_is_lexicographic(self):
        self.assertLess(GeneSequence.from_str("acg"),GeneSequence.from_str("act"))
        self.assertLess(GeneSequence.from_str("ac"),GeneSequence.from_str("aca"))
        self.assertGreater(GeneSequence.from_str("t"),GeneSequence.from_str("gggg"))
        self.assertLessEqual(GeneSequence.from_str("acg"),GeneSequence.from_str("acg"))
        self.assertLess(GeneSequence(),GeneSequence.from_str("a"))

    def test_copy_is_independent(self):
        seq = GeneSequence.from_str("acgtacgt")
        for dup in (seq.copy(),copy.copy(seq),copy.deepcopy(seq)):
            self.assertEqual(dup,seq)
            dup[0] = BasePair.T
            self.assertEqual(str(seq),"acgtacgt")

    def test_unhashable(self):
        self.assertRaises(TypeError,hash,GeneSequence())


#===============================================================================
# INDEX: GeneSequenceSlice
#===============================================================================

@pytest.mark.unit
class TestGeneSequenceSlice(unittest.TestCase):

    def setUp(self):
        self.seq = GeneSequence.from_str("attaaaggttcc")

    def test_slice_contents(self):
        view = self.seq[2:6]
        self.assertTrue(isinstance(view,GeneSequenceSlice))
        self.assertEqual(len(view),4)
        self.assertEqual(str(view),"taaa")
        self.assertEqual(view[0],BasePair.T)
        self.assertEqual(view[-1],BasePair.A)

    def test_slice_method_matches_getitem(self):
        self.assertEqual(self.seq.slice(3,9),self.seq[3:9])

    def test_every_offset(self):
        text = str(self.seq)
        for start in range(len(text)):
            for end in range(start,len(text) + 1):
                self.assertEqual(str(self.seq[start:end]),text[start:end])

    def test_writes_are_shared(self):
        view = self.seq[4:8]
        view[0] = BasePair.C
        self.assertEqual(self.seq[4],BasePair.C)

        self.seq[5] = BasePair.G
        self.assertEqual(view[1],BasePair.G)

    def test_view_of_view(self):
        inner = self.seq[2:10][3:6]
        self.assertIs(inner.base,self.seq)
        self.assertEqual((inner.start,inner.end),(5,8))
        self.assertEqual(str(inner),"agg")

    def test_view_survives_growth(self):
        view = self.seq[0:4]
        for _ in range(100):
            self.seq.append(BasePair.G)
        view[0] = BasePair.G
        self.assertEqual(self.seq[0],BasePair.G)

    def test_copy_is_independent(self):
        dup = self.seq[2:6].copy()
        self.assertTrue(isinstance(dup,GeneSequence))
        dup[0] = BasePair.C
        self.assertEqual(self.seq[2],BasePair.T)

    def test_compares_with_sequence(self):
        self.assertEqual(self.seq[0:4],GeneSequence.from_str("atta"))
        self.assertLess(self.seq[0:4],GeneSequence.from_str("attc"))

    def test_out_of_bounds(self):
        view = self.seq[2:6]
        self.assertRaises(IndexError,view.__getitem__,4)
        self.assertRaises(IndexError,view.set,4,BasePair.A)
        self.assertRaises(IndexError,self.seq.slice,5,20)
        self.assertRaises(IndexError,self.seq.slice,5,4)

    def test_view_past_shrunken_owner(self):
        seq = GeneSequence.from_str("acgtacgt")
        view = seq[4:8]
        seq.remove_last()
        seq.remove_last()
        self.assertEqual(len(view),4)
        self.assertEqual(view[1],BasePair.C)
        self.assertRaises(IndexError,view.__getitem__,3)
        self.assertRaises(IndexError,view.codes)
        self.assertRaises(IndexError,str,view)
        self.assertRaises(IndexError,view.copy)

    def test_clamped_slices(self):
        self.assertEqual(len(self.seq[10:100]),2)
        self.assertEqual(len(self.seq[8:3]),0)

    def test_step_rejected(self):
        self.assertRaises(ValueError,self.seq.__getitem__,slice(0,4,2))
