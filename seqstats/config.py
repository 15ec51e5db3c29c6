import logging
import toml

from .exceptions import ConfigException


logger = logging.getLogger(__name__)

CONFIG_TABLE = 'seqstats'

# recognised options and their types
CONFIG_OPTIONS = {
    'contig': int,
    'distribution': bool,
    'yaml': bool,
    'progress': bool,
}


def read_config(hndl):
    """
    Read run options from a TOML file. Options are taken from the [seqstats] table.
    :param hndl: the input file name or file object
    :return: dict of options
    """
    try:
        conf_dict = toml.load(hndl)
    except toml.decoder.TomlDecodeError as e:
        raise ConfigException(f'Invalid TOML configuration file: {e}')
    except OSError as e:
        raise ConfigException(f'Failed to read configuration file: {e}')

    if CONFIG_TABLE not in conf_dict:
        logger.warning(f'No [{CONFIG_TABLE}] table was found in the configuration file')
        return {}

    options = conf_dict[CONFIG_TABLE]
    for k, v in options.items():
        if k not in CONFIG_OPTIONS:
            raise ConfigException(f'Unknown configuration option "{k}"')
        # bool is a subclass of int
        if not isinstance(v, CONFIG_OPTIONS[k]) or (CONFIG_OPTIONS[k] is int and isinstance(v, bool)):
            raise ConfigException(f'Configuration option "{k}" must be of type {CONFIG_OPTIONS[k].__name__}')

    if options.get('contig', 0) < 0:
        raise ConfigException('Configuration option "contig" must not be negative')

    logger.debug(f'Configuration options: {options}')
    return dict(options)
