import io
import pytest

from Bio import SeqIO

from seqstats.exceptions import *
from seqstats.reader import Record, RecordReader, SeqFormat, detect_format, open_input


def read_all(text, fmt=None):
    return list(RecordReader(io.StringIO(text), fmt))


def test_detect_fasta_restores_position():
    hndl = io.StringIO('>s1\nACGT\n')
    hndl.seek(2)
    assert detect_format(hndl) is SeqFormat.FASTA
    assert hndl.tell() == 2


def test_detect_fastq():
    assert detect_format(io.StringIO('@r1\nACGT\n+\nFFFF\n')) is SeqFormat.FASTQ


def test_detect_unrecognized():
    with pytest.raises(UnrecognizedFormatException):
        detect_format(io.StringIO('ACGT\n'))


def test_detect_empty_stream():
    with pytest.raises(EmptyInputException):
        detect_format(io.StringIO(''))


def test_fasta_records():
    recs = read_all('>s1\nACGT\n>s2\nAC\n', SeqFormat.FASTA)
    assert recs == [Record('s1', 'ACGT', None), Record('s2', 'AC', None)]


def test_fasta_multiline_record():
    recs = read_all('>s1\nAAAA\nCCCC\n', SeqFormat.FASTA)
    assert len(recs) == 1
    assert recs[0].sequence == 'AAAACCCC'


def test_fasta_header_keeps_description():
    recs = read_all('>contig_1 length=4 cov=2.0\nACGT\n')
    assert recs[0].id == 'contig_1 length=4 cov=2.0'


def test_fasta_crlf_terminators():
    recs = read_all('>s1\r\nAC\r\nGT\r\n>s2\r\nA\r\n')
    assert [r.sequence for r in recs] == ['ACGT', 'A']


def test_fasta_no_final_newline():
    recs = read_all('>s1\nACGT\n>s2\nAC')
    assert [r.sequence for r in recs] == ['ACGT', 'AC']


def test_fasta_empty_record_between_headers():
    recs = read_all('>s1\n>s2\nAC\n')
    assert recs == [Record('s1', '', None), Record('s2', 'AC', None)]


def test_fasta_truncated_header():
    with pytest.raises(TruncatedRecordException):
        read_all('>s1\nACGT\n>s2\n')


def test_fasta_must_begin_with_header():
    with pytest.raises(UnrecognizedFormatException):
        read_all('ACGT\n>s1\nACGT\n', SeqFormat.FASTA)


@pytest.mark.parametrize('width', [1, 3, 7, 60, 80])
def test_fasta_wrapped_sequences_match_biopython(tmp_path, width):
    seqs = {'a': 'ACGT' * 53, 'b': 'G' * 7, 'c': 'TTAGGC' * 31 + 'A'}
    path = tmp_path / 'wrapped.fasta'
    with open(path, 'w') as out_h:
        for name, seq in seqs.items():
            out_h.write('>{}\n'.format(name))
            for i in range(0, len(seq), width):
                out_h.write(seq[i:i + width] + '\n')

    with open(path) as in_h:
        recs = list(RecordReader(in_h))

    assert {r.id: r.sequence for r in recs} == seqs
    expected = [(si.id, str(si.seq)) for si in SeqIO.parse(str(path), 'fasta')]
    assert [(r.id, r.sequence) for r in recs] == expected


def test_fastq_record():
    recs = read_all('@r1\nACGT\n+\nFFFF\n')
    assert recs == [Record('r1', 'ACGT', 'FFFF')]


def test_fastq_quality_may_begin_with_marker():
    recs = read_all('@r1\nACGT\n+r1\n@@FF\n@r2\nAC\n+\nFF\n')
    assert [r.id for r in recs] == ['r1', 'r2']
    assert recs[0].quality == '@@FF'


def test_fastq_trailing_blank_lines():
    recs = read_all('@r1\nACGT\n+\nFFFF\n\n\n')
    assert len(recs) == 1


@pytest.mark.parametrize('text', ['@r1\n', '@r1\nACGT\n', '@r1\nACGT\n+\n'])
def test_fastq_truncated(text):
    with pytest.raises(TruncatedRecordException):
        read_all(text)


def test_produce_after_exhaustion():
    reader = RecordReader(io.StringIO('>s1\nACGT\n'))
    assert reader.produce() == Record('s1', 'ACGT', None)
    assert reader.produce() is None
    assert reader.produce() is None


def test_reader_detects_format_on_empty_stream():
    with pytest.raises(EmptyInputException):
        RecordReader(io.StringIO(''))


def test_reader_rejects_unknown_format():
    with pytest.raises(UnrecognizedFormatException):
        RecordReader(io.StringIO('# not a sequence\n'))


def test_open_input_missing(tmp_path):
    with pytest.raises(InputNotFoundException):
        open_input(str(tmp_path / 'missing.fasta'))


def test_open_input_empty(seq_file):
    with pytest.raises(EmptyInputException):
        open_input(seq_file(''))


def test_open_input_directory(tmp_path):
    with pytest.raises(InputUnreadableException):
        open_input(str(tmp_path))


def test_record_length_is_sequence_length():
    rec = next(iter(RecordReader(io.StringIO('>s1\nACGTACGT\n'))))
    assert len(rec) == 8
    assert len(Record('r1', 'ACGT', 'FFFF')) == 4


def test_reader_non_utf8_stream():
    hndl = io.TextIOWrapper(io.BytesIO(b'>s1\nAC\xffGT\n'), encoding='utf-8')
    with pytest.raises(InputUnreadableException):
        list(RecordReader(hndl, SeqFormat.FASTA))


def test_detect_non_utf8_stream():
    hndl = io.TextIOWrapper(io.BytesIO(b'>s\xff1\nACGT\n'), encoding='utf-8')
    with pytest.raises(InputUnreadableException):
        detect_format(hndl)
