import logging
import os

from .exceptions import SeqStatsException, OutputAlreadyExistsException


logger = logging.getLogger(__name__)

DIST_SUFFIX = '.dist'


class DistributionWriter(object):
    """
    Persist the per-sequence length distribution as a tab-delimited table of id and length,
    in input order. An existing file is never overwritten.
    """

    def __init__(self, input_file):
        """
        :param input_file: the input sequence file, to which the suffix .dist is appended
        """
        self.file_name = input_file + DIST_SUFFIX

    def validate(self):
        """
        Check that the output file does not already exist.
        """
        if os.path.exists(self.file_name):
            raise OutputAlreadyExistsException(self.file_name)

    def write(self, pairs):
        """
        Write the distribution table. The file is created exclusively, so a file
        appearing since validation is still left untouched.
        :param pairs: an iterable of (id, length) tuples
        """
        try:
            with open(self.file_name, 'xt') as out_hndl:
                n = 0
                for seq_id, length in pairs:
                    out_hndl.write('{}\t{:d}\n'.format(seq_id, length))
                    n += 1
        except FileExistsError:
            raise OutputAlreadyExistsException(self.file_name)
        except OSError as e:
            raise SeqStatsException('cannot write distribution output file [{}]: {}'.format(self.file_name, e.strerror))

        logger.info('Wrote {} sequence lengths to {}'.format(n, self.file_name))
