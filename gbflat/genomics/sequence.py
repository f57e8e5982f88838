#!/usr/bin/env python
"""Compact storage for nucleotide sequences, packing four bases per byte.

Important classes
-----------------
|BasePair|
    The four nucleotides, numbered by their 2-bit code

|GeneSequence|
    Growable, mutable sequence of |BasePair|. The *n*-th base occupies bits
    ``[2*(n%4), 2*(n%4)+2)`` of byte ``n//4`` of a :class:`numpy.ndarray`
    of :obj:`numpy.uint8`, so the earliest base of each byte sits in its lowest
    two bits.

|GeneSequenceSlice|
    A view of a contiguous region of a |GeneSequence|. Views share the storage
    of their owner: reads and writes are translated to the owner's indices,
    and no data is copied.

Examples
--------
Build a sequence, then read and modify it::

    >>> seq = GeneSequence.from_str("attaaaggtt")
    >>> len(seq), seq[1], str(seq[2:6])
    (10, <BasePair.T: 3>, 'taaa')

    >>> seq.append(BasePair.G)
    >>> seq.remove_last()
    <BasePair.G: 2>
"""
import copy
import functools
from enum import IntEnum

import numpy


class BasePair(IntEnum):
    """Nucleotide, valued by its 2-bit code"""
    A = 0b00
    C = 0b01
    G = 0b10
    T = 0b11

    def __str__(self):
        return self.name.lower()

    @staticmethod
    def from_letter(letter):
        """Return the |BasePair| named by `letter` (case-insensitive)

        Raises
        ------
        KeyError
            if `letter` is not one of `a`, `c`, `g`, `t`
        """
        return BasePair[letter.upper()]


BITS_PER_BASE  = 2
BASES_PER_BYTE = 8 // BITS_PER_BASE
BASE_MASK      = 0b11

LETTERS = numpy.frombuffer(b"acgt",dtype=numpy.uint8)
"""Lower-case ASCII letter for each 2-bit code"""

_SHIFTS = numpy.arange(BASES_PER_BYTE,dtype=numpy.uint8) * BITS_PER_BASE


def pack_codes(codes):
    """Pack an array of 2-bit codes into bytes, four codes per byte

    Parameters
    ----------
    codes : array-like
        Values in ``[0, 4)``

    Returns
    -------
    :class:`numpy.ndarray`
        :obj:`numpy.uint8` array of length ``ceil(len(codes)/4)``
    """
    codes = numpy.asarray(codes,dtype=numpy.uint8)
    padded = numpy.zeros(-(-len(codes) // BASES_PER_BYTE) * BASES_PER_BYTE,dtype=numpy.uint8)
    padded[:len(codes)] = codes & BASE_MASK
    shifted = padded.reshape(-1,BASES_PER_BYTE) << _SHIFTS
    return numpy.bitwise_or.reduce(shifted,axis=1).astype(numpy.uint8)

def unpack_codes(storage,length):
    """Inverse of :func:`pack_codes`

    Parameters
    ----------
    storage : :class:`numpy.ndarray`
        Packed bytes

    length : int
        Number of codes to unpack

    Returns
    -------
    :class:`numpy.ndarray`
        :obj:`numpy.uint8` array of `length` codes
    """
    nbytes = -(-length // BASES_PER_BYTE)
    codes = (storage[:nbytes,None] >> _SHIFTS) & BASE_MASK
    return codes.reshape(-1)[:length].astype(numpy.uint8)


#===============================================================================
# INDEX: sequence protocol
#===============================================================================

@functools.total_ordering
class _BaseSequence(object):
    """Read/write behaviors shared by |GeneSequence| and |GeneSequenceSlice|.

    Subclasses implement `__len__`, `get`, `set`, and `codes`.
    """

    @property
    def length(self):
        """Number of bases"""
        return len(self)

    def _check_index(self,i):
        if not 0 <= i < len(self):
            raise IndexError("Index %s out of bounds for gene sequence of length %s" % (i,len(self)))

    def _normalize_index(self,i):
        if i < 0:
            i += len(self)
        self._check_index(i)
        return i

    def __getitem__(self,key):
        if isinstance(key,slice):
            start, end, step = key.indices(len(self))
            if step != 1:
                raise ValueError("Gene sequences only support contiguous slices")
            return self.slice(start,max(start,end))

        return self.get(self._normalize_index(key))

    def __setitem__(self,key,value):
        self.set(self._normalize_index(key),value)

    def __iter__(self):
        for code in self.codes():
            yield BasePair(int(code))

    def __eq__(self,other):
        if not isinstance(other,_BaseSequence):
            return NotImplemented
        return numpy.array_equal(self.codes(),other.codes())

    def __ne__(self,other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self,other):
        if not isinstance(other,_BaseSequence):
            return NotImplemented
        mine, theirs = self.codes(), other.codes()
        n = min(len(mine),len(theirs))
        diff = numpy.flatnonzero(mine[:n] != theirs[:n])
        if len(diff) > 0:
            return bool(mine[diff[0]] < theirs[diff[0]])
        return len(mine) < len(theirs)

    __hash__ = None

    def __str__(self):
        return LETTERS[self.codes()].tobytes().decode("ascii")

    def slice(self,start,end):
        """Return a view of bases ``[start, end)``. The view shares storage with
        this sequence, so changes made through either are visible in both.

        Parameters
        ----------
        start : int
            First base in view, 0-indexed

        end : int
            Half-open end of view

        Returns
        -------
        |GeneSequenceSlice|
        """
        if not 0 <= start <= end <= len(self):
            raise IndexError("Slice [%s, %s) out of bounds for gene sequence of length %s" % (start,end,len(self)))
        return GeneSequenceSlice(self,start,end)


#===============================================================================
# INDEX: containers
#===============================================================================

class GeneSequence(_BaseSequence):
    """Growable sequence of |BasePair|, packed four to a byte.

    Parameters
    ----------
    storage : :class:`numpy.ndarray`, optional
        Packed bytes (see :func:`pack_codes`). Copied.

    length : int, optional
        Number of bases held in `storage` (Default: 0)

    Attributes
    ----------
    storage : :class:`numpy.ndarray`
        Backing :obj:`numpy.uint8` array. May be longer than ``ceil(length/4)``;
        bits past `length` are unreachable.
    """

    def __init__(self,storage=None,length=0):
        if storage is None:
            storage = numpy.zeros(0,dtype=numpy.uint8)
        storage = numpy.array(storage,dtype=numpy.uint8)
        if len(storage) * BASES_PER_BYTE < length:
            raise ValueError("Storage of %s bytes cannot hold %s bases" % (len(storage),length))

        self.storage = storage
        self._length = length

    @staticmethod
    def from_codes(codes):
        """Create a |GeneSequence| from an array of 2-bit codes"""
        codes = numpy.asarray(codes,dtype=numpy.uint8)
        return GeneSequence(pack_codes(codes),len(codes))

    @staticmethod
    def from_str(text):
        """Create a |GeneSequence| from a string of `ACGT` letters (either case)

        Raises
        ------
        KeyError
            if `text` contains any other character
        """
        return GeneSequence.from_codes([BasePair.from_letter(X) for X in text])

    def __len__(self):
        return self._length

    def __repr__(self):
        return "<GeneSequence length=%s>" % self._length

    def __copy__(self):
        return GeneSequence(self.storage[:-(-self._length // BASES_PER_BYTE)],self._length)

    def __deepcopy__(self,memo):
        return self.__copy__()

    def copy(self):
        """Return an independent copy of this sequence"""
        return copy.copy(self)

    def codes(self):
        """Return 2-bit codes of all bases as a :obj:`numpy.uint8` array"""
        return unpack_codes(self.storage,self._length)

    def get(self,i):
        """Return the |BasePair| at position `i`

        Raises
        ------
        IndexError
            if `i` is not in ``[0, len(self))``
        """
        self._check_index(i)
        shift = (i % BASES_PER_BYTE) * BITS_PER_BASE
        return BasePair((int(self.storage[i // BASES_PER_BYTE]) >> shift) & BASE_MASK)

    def set(self,i,value):
        """Replace the base at position `i` with `value`

        Raises
        ------
        IndexError
            if `i` is not in ``[0, len(self))``
        """
        self._check_index(i)
        idx   = i // BASES_PER_BYTE
        shift = (i % BASES_PER_BYTE) * BITS_PER_BASE
        mask  = BASE_MASK << shift
        self.storage[idx] = (int(self.storage[idx]) & ~mask & 0xFF) | (int(BasePair(value)) << shift)

    def _reserve(self,nbytes):
        # grow geometrically, so appends are amortized O(1)
        if nbytes > len(self.storage):
            new_storage = numpy.zeros(max(nbytes,2*len(self.storage)),dtype=numpy.uint8)
            new_storage[:len(self.storage)] = self.storage
            self.storage = new_storage

    def append(self,value):
        """Add `value` to the end of the sequence"""
        i = self._length
        if i % BASES_PER_BYTE == 0:
            self._reserve(i // BASES_PER_BYTE + 1)
        self._length += 1
        self.set(i,value)

    def remove_last(self):
        """Remove and return the final base. Storage is not reclaimed.

        Raises
        ------
        IndexError
            if the sequence is empty
        """
        if self._length == 0:
            raise IndexError("remove_last() from empty gene sequence")
        last = self.get(self._length - 1)
        self._length -= 1
        return last


class GeneSequenceSlice(_BaseSequence):
    """View of bases ``[start, end)`` of a |GeneSequence|.

    Holds a reference to its owner rather than to the owner's storage array,
    so the view remains valid when the owner grows.

    Parameters
    ----------
    base : |GeneSequence| or |GeneSequenceSlice|
        Sequence to view. Views of views are flattened onto the owning |GeneSequence|.

    start : int
        Start of view in coordinates of `base`

    end : int
        Half-open end of view in coordinates of `base`
    """

    def __init__(self,base,start,end):
        if isinstance(base,GeneSequenceSlice):
            start += base.start
            end   += base.start
            base   = base.base

        self.base  = base
        self.start = start
        self.end   = end

    def __len__(self):
        return self.end - self.start

    def __repr__(self):
        return "<GeneSequenceSlice [%s, %s) of %r>" % (self.start,self.end,self.base)

    def codes(self):
        """Return 2-bit codes of all bases in the view as a :obj:`numpy.uint8` array

        Raises
        ------
        IndexError
            if the owning sequence has shrunk below the end of the view
        """
        if self.end > len(self.base):
            raise IndexError("View [%s, %s) extends past end of gene sequence of length %s" % (self.start,self.end,len(self.base)))

        first = self.start // BASES_PER_BYTE
        offset = self.start - first * BASES_PER_BYTE
        return unpack_codes(self.base.storage[first:],self.end - first * BASES_PER_BYTE)[offset:]

    def get(self,i):
        self._check_index(i)
        return self.base.get(self.start + i)

    def set(self,i,value):
        self._check_index(i)
        self.base.set(self.start + i,value)

    def copy(self):
        """Return the viewed bases as a new, independent |GeneSequence|"""
        return GeneSequence.from_codes(self.codes())
