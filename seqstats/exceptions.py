class SeqStatsException(Exception):
    """Module base exception class"""
    def __init__(self, message):
        super().__init__(message)


class InputNotFoundException(SeqStatsException):
    """Occurs when the input sequence file does not exist"""
    def __init__(self, file_name):
        super().__init__('input file [{}] does not exist'.format(file_name))


class InputUnreadableException(SeqStatsException):
    """Occurs when the input sequence file exists but cannot be opened or read"""
    def __init__(self, file_name, reason=None):
        msg = 'failure opening input file [{}]'.format(file_name)
        if reason:
            msg = '{}: {}'.format(msg, reason)
        super().__init__(msg)


class EmptyInputException(SeqStatsException):
    """Occurs when the input sequence file contains zero bytes"""
    def __init__(self, file_name):
        super().__init__('input file [{}] contains no sequences'.format(file_name))


class UnrecognizedFormatException(SeqStatsException):
    """Raised when a stream begins with neither a FASTA (>) nor a FASTQ (@) header"""
    def __init__(self, source, first_line=None):
        msg = 'input [{}] is not in FASTA or FASTQ format'.format(source)
        if first_line is not None:
            msg = '{}, first line began: {!r}'.format(msg, first_line[:20])
        super().__init__(msg)


class TruncatedRecordException(SeqStatsException):
    """Raised when the stream ends part way through a record"""
    def __init__(self, record_id, line_no):
        super().__init__('stream ended mid-record [{}] after line {}'.format(record_id, line_no))


class OutputAlreadyExistsException(SeqStatsException):
    """The distribution output file exists and will not be overwritten"""
    def __init__(self, file_name):
        super().__init__('distribution output file [{}] already exists'.format(file_name))


class ConfigException(SeqStatsException):
    """Invalid configuration file or option value"""
    pass


class OutputUnavailableException(SeqStatsException):
    """The distribution output file cannot be named for the given input"""
    def __init__(self, file_name):
        super().__init__('distribution output requires a named input file, not [{}]'.format(file_name))
