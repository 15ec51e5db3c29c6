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
import contextlib
import enum
import logging
import os
import sys

from collections import namedtuple

from .exceptions import *


logger = logging.getLogger(__name__)

# the command-line name for standard input
STDIN_NAME = '-'


class Record(namedtuple('Record', ['id', 'sequence', 'quality'])):
    """
    A sequence record. Quality is None for FASTA. The length of a record is the
    length of its sequence.
    """
    __slots__ = ()

    def __len__(self):
        return len(self.sequence)


class SeqFormat(enum.Enum):
    """
    Supported sequence formats, each identified by the marker which begins a header line.
    """
    FASTA = '>'
    FASTQ = '@'

    @property
    def marker(self):
        return self.value

    @classmethod
    def from_line(cls, line, source='<stream>'):
        """
        Classify a stream from its first line.
        :param line: the first line of the stream
        :param source: name of the stream, used in error messages
        :return: the matching SeqFormat
        """
        try:
            return cls(line[:1])
        except ValueError:
            raise UnrecognizedFormatException(source, line)


def detect_format(hndl, source=None):
    """
    Determine whether a seekable stream holds FASTA or FASTQ records by inspecting the
    first character of its first line. The stream position is restored before returning.

    :param hndl: an open, seekable text stream
    :param source: name of the stream for error messages, defaults to the stream's name
    :return: SeqFormat of the stream
    """
    if source is None:
        source = getattr(hndl, 'name', '<stream>')

    position = hndl.tell()
    hndl.seek(0)
    try:
        first_line = hndl.readline()
    except UnicodeDecodeError as e:
        raise InputUnreadableException(source, 'not a text file: {}'.format(e.reason))
    finally:
        hndl.seek(position)

    if not first_line:
        raise EmptyInputException(source)

    fmt = SeqFormat.from_line(first_line, source)
    logger.debug('Detected {} format for {}'.format(fmt.name, source))
    return fmt


def open_input(file_name):
    """
    Open an input sequence file for reading, after checking that it exists and is
    not empty. The name "-" refers to standard input, which is not closed on exit.

    :param file_name: the input path
    :return: a context manager yielding an open text stream
    """
    if file_name == STDIN_NAME:
        return contextlib.nullcontext(sys.stdin)

    if not os.path.exists(file_name):
        raise InputNotFoundException(file_name)

    try:
        hndl = open(file_name, 'rt')
    except OSError as e:
        raise InputUnreadableException(file_name, e.strerror)

    if os.fstat(hndl.fileno()).st_size == 0:
        hndl.close()
        raise EmptyInputException(file_name)

    return hndl


class RecordReader(object):
    """
    A single-pass reader of FASTA or FASTQ records from a text stream.

    Multi-line FASTA bodies are joined by reading ahead to the next header, which is held
    in a one-line pushback buffer until the following record is requested. No seeking is
    performed, so the reader works equally well on pipes.
    """

    def __init__(self, hndl, fmt=None, source=None):
        """
        :param hndl: an open text stream
        :param fmt: the SeqFormat of the stream. When None the format is determined
                    from the first line of the stream.
        :param source: name of the stream for error messages
        """
        self.hndl = hndl
        self.source = source if source else getattr(hndl, 'name', '<stream>')
        self.line_no = 0
        self._pushback = None

        if fmt is None:
            first_line = self._next_line()
            if first_line is None:
                raise EmptyInputException(self.source)
            self._unread(first_line)
            fmt = SeqFormat.from_line(first_line, self.source)

        if fmt is SeqFormat.FASTA:
            self._read_next = self._read_fasta
        elif fmt is SeqFormat.FASTQ:
            self._read_next = self._read_fastq
        else:
            raise TypeError('fmt must be a SeqFormat, was [{}]'.format(fmt))
        self.fmt = fmt

    def __iter__(self):
        while True:
            rec = self.produce()
            if rec is None:
                return
            yield rec

    def produce(self):
        """
        Read the next record from the stream.
        :return: the next Record, or None when the stream is exhausted
        """
        return self._read_next()

    def _next_line(self):
        """
        :return: the next line without its terminator, or None at the end of the stream
        """
        if self._pushback is not None:
            line, self._pushback = self._pushback, None
            return line

        try:
            line = self.hndl.readline()
        except UnicodeDecodeError as e:
            raise InputUnreadableException(self.source,
                                           'not a text file after line {}: {}'.format(self.line_no, e.reason))
        if not line:
            return None
        self.line_no += 1
        return line.rstrip('\r\n')

    def _unread(self, line):
        assert self._pushback is None, 'only a single line of pushback is supported'
        self._pushback = line

    def _read_fasta(self):
        header = self._next_line()
        if header is None:
            return None
        if not header.startswith(SeqFormat.FASTA.marker):
            raise UnrecognizedFormatException(self.source, header)
        seq_id = header[1:]

        body = []
        while True:
            line = self._next_line()
            if line is None:
                # a header must be followed by at least one line
                if not body:
                    raise TruncatedRecordException(seq_id, self.line_no)
                break
            if line.startswith(SeqFormat.FASTA.marker):
                self._unread(line)
                break
            body.append(line)

        return Record(seq_id, ''.join(body), None)

    def _read_fastq(self):
        header = self._next_line()
        # tolerate blank lines between blocks and at the end of the stream
        while header == '':
            header = self._next_line()
        if header is None:
            return None
        if not header.startswith(SeqFormat.FASTQ.marker):
            raise UnrecognizedFormatException(self.source, header)
        seq_id = header[1:]

        block = []
        for _ in range(3):
            line = self._next_line()
            if line is None:
                raise TruncatedRecordException(seq_id, self.line_no)
            block.append(line)

        # the separator line is not validated
        sequence, _, quality = block
        return Record(seq_id, sequence, quality)
