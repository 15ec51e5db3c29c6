import logging
import sys
import tqdm

from seqstats._version import version_stamp, runtime_info
from seqstats.config import read_config
from seqstats.distribution import DistributionWriter
from seqstats.exceptions import SeqStatsException, ConfigException, OutputUnavailableException
from seqstats.reader import RecordReader, STDIN_NAME, detect_format, open_input
from seqstats.report import write_all, write_large, write_yaml
from seqstats.stats import DEFAULT_CONTIG_CUTOFF, StatisticsAccumulator, filter_contigs


# handlers installed by init_log, removed if logging is initialised again
_log_handlers = []


def init_log(verbose, log_file=None):
    """
    Initialise the runtime logger for console and optionally file output.

    :param verbose: set console verbosity level.
    :param log_file: when not None, also log everything to this file
    :return: logger
    """
    logging.captureWarnings(True)
    logger = logging.getLogger('main')

    # root log listens to everything
    root = logging.getLogger('')
    root.setLevel(logging.DEBUG)
    while _log_handlers:
        root.removeHandler(_log_handlers.pop())

    # log message format
    formatter = logging.Formatter(fmt='%(levelname)-8s | %(asctime)s | %(name)7s | %(message)s')

    # Runtime console listens to INFO by default
    ch = logging.StreamHandler()
    if verbose:
        ch.setLevel(logging.DEBUG)
    else:
        ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    root.addHandler(ch)
    _log_handlers.append(ch)

    if log_file:
        fh = logging.FileHandler(log_file, mode='a')
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        root.addHandler(fh)
        _log_handlers.append(fh)

    return logger


def read_lengths(reader, accumulator, progress=False):
    """
    Pass over all records, adding each non-empty sequence to the accumulator.
    :param reader: RecordReader for the input
    :param accumulator: StatisticsAccumulator to receive lengths
    :param progress: display a progress bar
    :return: LengthSummary of all sequences
    """
    logger = logging.getLogger('main')
    n_empty = 0
    for rec in tqdm.tqdm(reader, unit='seq', disable=not progress):
        if not rec.sequence:
            logger.warning(f'Skipping record "{rec.id}" which has no sequence')
            n_empty += 1
            continue
        accumulator.add_record(rec)

    if n_empty > 0:
        logger.warning(f'{n_empty} empty records were excluded from statistics')

    return accumulator.summarize()


def run(input_file, contig=None, distribution=False, yaml=False, progress=False, out_hndl=None):
    """
    Calculate and report statistics for a FASTA or FASTQ file.

    :param input_file: path of the input file, or "-" for standard input
    :param contig: length cutoff for statistics over large sequences, None to skip
    :param distribution: write the per-sequence lengths to <input_file>.dist
    :param yaml: report in YAML rather than as text blocks
    :param progress: display a progress bar while reading
    :param out_hndl: output stream for the report, defaults to stdout
    :return: tuple of SequenceStats for all sequences and for large sequences. The latter
             is None when not requested or when no sequences met the cutoff.
    """
    logger = logging.getLogger('main')

    if out_hndl is None:
        out_hndl = sys.stdout

    if contig is not None and contig < 0:
        raise ConfigException('Contig length cutoff must not be negative: {}'.format(contig))

    # check the output location before the expensive pass over the input
    dist_writer = None
    if distribution:
        if input_file == STDIN_NAME:
            raise OutputUnavailableException(input_file)
        dist_writer = DistributionWriter(input_file)
        dist_writer.validate()

    accumulator = StatisticsAccumulator(track_ids=distribution)

    with open_input(input_file) as in_hndl:
        if in_hndl.seekable():
            reader = RecordReader(in_hndl, detect_format(in_hndl, input_file), source=input_file)
        else:
            reader = RecordReader(in_hndl, source=input_file)
        logger.info(f'Reading {reader.fmt.name} records from {input_file}')
        summary = read_lengths(reader, accumulator, progress)

    logger.info(f'Read {summary.stats.count} sequences totalling {summary.stats.total} bp')

    if dist_writer is not None:
        dist_writer.write(accumulator.distribution)

    large_stats = None
    if contig is not None:
        large_stats = filter_contigs(summary.lengths, contig)

    if yaml:
        write_yaml(out_hndl, input_file, summary.stats, large_stats, contig)
    else:
        write_all(out_hndl, summary.stats)
        if contig is not None:
            write_large(out_hndl, large_stats, contig)

    return summary.stats, large_stats


def main(argv=None):
    import argparse

    def non_negative_int(value):
        try:
            ivalue = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f'invalid integer value: {value!r}')
        if ivalue < 0:
            raise argparse.ArgumentTypeError(f'must not be negative: {ivalue}')
        return ivalue

    #
    # Commandline interface
    #
    parser = argparse.ArgumentParser(description='Summary statistics for sequences in FASTA or FASTQ format')
    parser.add_argument('-V', '--version', default=False, action='version',
                        version=version_stamp(False), help='Version')
    parser.add_argument('-v', '--verbose', default=False, action='store_true', help='Verbose output')
    parser.add_argument('--log', metavar='FILE', default=None, help='Also write log messages to this file')
    parser.add_argument('--config', metavar='FILE', default=None,
                        help='TOML file of default options, overridden by the command-line')

    parser.add_argument('-c', '--contig', metavar='INT', type=non_negative_int, nargs='?',
                        const=DEFAULT_CONTIG_CUTOFF, default=None,
                        help='Also report statistics for sequences at least this long. '
                             'Without a value the cutoff is {0} [{0}]'.format(DEFAULT_CONTIG_CUTOFF))
    parser.add_argument('-d', '--distribution', default=False, action='store_true',
                        help='Write each sequence length to INPUT.dist')
    parser.add_argument('--yaml', default=False, action='store_true', help='Write statistics in YAML format')
    parser.add_argument('--progress', default=False, action='store_true', help='Show a progress bar')

    parser.add_argument(dest='input', metavar='INPUT', help='FASTA or FASTQ input file, "-" for stdin')
    args = parser.parse_args(argv)

    logger = init_log(args.verbose, args.log)

    logger.debug(runtime_info())
    logger.debug(sys.version.replace('\n', ' '))

    try:

        if args.config:
            # configured values become defaults, so explicit arguments take precedence
            parser.set_defaults(**read_config(args.config))
            args = parser.parse_args(argv)

        run(args.input, contig=args.contig, distribution=args.distribution,
            yaml=args.yaml, progress=args.progress)

    except SeqStatsException as ex:
        logger.error(str(ex))
        sys.exit(1)

    except Exception as ex:
        logger.exception(ex)
        sys.exit(1)
