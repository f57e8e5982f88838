#!/usr/bin/env python
"""Sets of sequence positions, stored as runs of consecutive positions.

|RangeSet| describes which bases a feature covers. Features may be
discontinuous (e.g. ``join(266..13468,13468..21555)``), so a |RangeSet|
holds zero or more half-open spans ``[start, end)``. Spans are kept sorted,
and overlapping or abutting spans are merged on insertion, so two |RangeSets|
covering the same positions are always equal regardless of how they were
built.

Examples
--------
    >>> a = RangeSet((20,31),(1,11))
    >>> a
    <RangeSet [1, 11) [20, 31)>
    >>> 10 in a, 11 in a, len(a)
    (True, False, 21)
    >>> a | RangeSet((11,20))
    <RangeSet [1, 31)>
"""
import bisect

import numpy


class RangeSet(object):
    """Set of integer positions, held as sorted, disjoint, non-adjacent
    half-open spans.

    Parameters
    ----------
    *spans : tuple or range
        ``(start, end)`` pairs or :class:`range` objects with step 1.
        Empty spans (``end <= start``) are ignored.
    """

    def __init__(self,*spans):
        self._starts = []
        self._ends   = []
        for span in spans:
            self.add(span)

    @staticmethod
    def from_inclusive(start,end):
        """Create a |RangeSet| covering `start` through `end`, inclusive"""
        return RangeSet((start,end + 1))

    def add(self,span):
        """Add positions ``[start, end)`` to the set, merging with any
        overlapping or adjacent spans

        Parameters
        ----------
        span : tuple or range
            ``(start, end)`` pair, or :class:`range` with step 1
        """
        if isinstance(span,range):
            if span.step != 1:
                raise ValueError("Only contiguous ranges can be added to a RangeSet")
            start, end = span.start, span.stop
        else:
            start, end = span

        if end <= start:
            return

        # spans that overlap or touch [start, end) lie in [lo, hi)
        lo = bisect.bisect_left(self._ends,start)
        hi = bisect.bisect_right(self._starts,end)
        if lo < hi:
            start = min(start,self._starts[lo])
            end   = max(end,self._ends[hi-1])

        self._starts[lo:hi] = [start]
        self._ends[lo:hi]   = [end]

    def union(self,*others):
        """Return a new |RangeSet| covering positions in this set or any of `others`"""
        new = RangeSet(*self.ranges)
        for other in others:
            for span in other.ranges:
                new.add(span)
        return new

    def __or__(self,other):
        if not isinstance(other,RangeSet):
            return NotImplemented
        return self.union(other)

    @property
    def ranges(self):
        """List of ``(start, end)`` half-open spans, sorted by position"""
        return list(zip(self._starts,self._ends))

    @property
    def start(self):
        """Lowest position in the set, or `None` if empty"""
        return self._starts[0] if self._starts else None

    @property
    def end(self):
        """Half-open end of the highest span, or `None` if empty"""
        return self._ends[-1] if self._ends else None

    def get_position_array(self):
        """Return all positions in the set as a sorted :class:`numpy.ndarray`"""
        if not self._starts:
            return numpy.zeros(0,dtype=int)
        return numpy.concatenate([numpy.arange(X,Y) for X, Y in self.ranges])

    def __contains__(self,position):
        idx = bisect.bisect_right(self._starts,position) - 1
        return idx >= 0 and position < self._ends[idx]

    def __iter__(self):
        """Iterate over ``(start, end)`` spans"""
        return iter(self.ranges)

    def __len__(self):
        """Number of positions covered"""
        return sum(Y - X for X, Y in self.ranges)

    def __bool__(self):
        return len(self._starts) > 0

    def __eq__(self,other):
        if not isinstance(other,RangeSet):
            return NotImplemented
        return self._starts == other._starts and self._ends == other._ends

    def __ne__(self,other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        if not self._starts:
            return "<RangeSet empty>"
        return "<RangeSet %s>" % " ".join("[%s, %s)" % X for X in self.ranges)

    def __str__(self):
        return ",".join("%s..%s" % (X,Y - 1) for X, Y in self.ranges)
