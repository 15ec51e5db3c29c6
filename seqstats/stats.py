"""
seqstats - summary statistics for collections of FASTA and FASTQ sequences.
Copyright (C) 2026 the seqstats authors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful, but
WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""
import logging
import numpy as np

from collections import namedtuple


logger = logging.getLogger(__name__)

# initial minimum, larger than any sequence length
MIN_SENTINEL = 1_000_000_000_000

DEFAULT_CONTIG_CUTOFF = 500

SequenceStats = namedtuple('SequenceStats', ['count', 'total', 'minimum', 'maximum', 'average', 'n50'])

# statistics for a complete pass, along with all lengths sorted in descending order
LengthSummary = namedtuple('LengthSummary', ['stats', 'lengths'])


def calc_n50(lengths, total, presorted=False):
    """
    Calculate N50 from a collection of sequence lengths: the first length, taken in
    descending order, at which the cumulative sum exceeds half of the total.

    This avoids the textbook construction of a median over a list in which each length
    n is repeated n times, which is impractical for genome sized inputs.

    :param lengths: sequence lengths
    :param total: the sum of the same lengths
    :param presorted: True when lengths are already in descending order
    :return: the N50 length, or 0 if lengths is empty or no length crosses the half-way point
    """
    l = np.asarray(lengths, dtype=np.int64)
    if l.size == 0:
        return 0
    if not presorted:
        l = np.sort(l)[::-1]
    cl = np.cumsum(l)
    xi = np.searchsorted(cl, total / 2.0, side='right')
    if xi >= l.size:
        logger.warning('Cumulative length never exceeded half of the total {}, N50 undefined'.format(total))
        return 0
    return int(l[xi])


def describe_lengths(lengths):
    """
    Summary statistics for a non-empty array of lengths in descending order.
    :param lengths: descending array of lengths
    :return: SequenceStats
    """
    count = int(lengths.size)
    total = int(lengths.sum())
    return SequenceStats(count=count,
                         total=total,
                         minimum=int(lengths[-1]),
                         maximum=int(lengths[0]),
                         average=total / count,
                         n50=calc_n50(lengths, total, presorted=True))


def filter_contigs(lengths, cutoff):
    """
    Recompute statistics for only those lengths at or above a cutoff.

    As lengths are sorted in descending order, the first length below the cutoff marks
    the end of the retained prefix.

    :param lengths: lengths sorted in descending order
    :param cutoff: minimum length to retain
    :return: SequenceStats of the retained lengths, or None when no length meets the cutoff
    """
    lengths = np.asarray(lengths, dtype=np.int64)

    # negated lengths are ascending, giving the number of lengths >= cutoff
    n_long = int(np.searchsorted(-lengths, -cutoff, side='right'))
    boundary = n_long if n_long < lengths.size else -1

    if boundary == 0:
        logger.info('No sequences were at least {} bp'.format(cutoff))
        return None
    elif boundary > 0:
        logger.debug('Discarding {} sequences shorter than {} bp'.format(lengths.size - boundary, cutoff))
        lengths = lengths[:boundary]

    if lengths.size == 0:
        return None

    return describe_lengths(lengths)


class StatisticsAccumulator(object):
    """
    Running length statistics over a stream of sequences. Lengths are retained, as N50
    requires the complete set, and statistics are only available once the stream has been
    consumed and summarize() called.
    """

    def __init__(self, track_ids=False):
        """
        :param track_ids: when True, retain (id, length) pairs in input order
        """
        self.count = 0
        self.total = 0
        self.minimum = MIN_SENTINEL
        self.maximum = 0
        self.lengths = []
        self.distribution = [] if track_ids else None
        self._closed = False

    def add(self, seq_id, length):
        """
        Include a sequence in the statistics.
        :param seq_id: sequence identifier
        :param length: sequence length
        """
        if self._closed:
            raise RuntimeError('Statistics have already been summarized')

        self.count += 1
        self.total += length
        if length < self.minimum:
            self.minimum = length
        if length > self.maximum:
            self.maximum = length
        self.lengths.append(length)

        if self.distribution is not None:
            self.distribution.append((seq_id, length))

    def add_record(self, rec):
        self.add(rec.id, len(rec))

    def summarize(self):
        """
        Complete accumulation and calculate statistics over everything added.
        :return: LengthSummary
        """
        self._closed = True

        lengths = np.sort(np.asarray(self.lengths, dtype=np.int64))[::-1]

        if self.count == 0:
            average = 0.0
            minimum = 0
        else:
            average = self.total / self.count
            minimum = self.minimum

        stats = SequenceStats(count=self.count,
                              total=self.total,
                              minimum=minimum,
                              maximum=self.maximum,
                              average=average,
                              n50=calc_n50(lengths, self.total, presorted=True))
        return LengthSummary(stats, lengths)
