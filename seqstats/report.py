import yaml


def write_block(hndl, stats, title, prefix):
    """
    Write statistics as a titled block of tab-delimited lines.
    :param hndl: output stream
    :param stats: SequenceStats
    :param title: the block's title line
    :param prefix: label leading each line
    """
    hndl.write('{}\n'.format(title))
    hndl.write('{} - Total number of sequences:\t{:d}\n'.format(prefix, stats.count))
    hndl.write('{} - Total number of residues:\t{:d}\n'.format(prefix, stats.total))
    hndl.write('{} - Average length of sequences:\t{:.2f}\n'.format(prefix, stats.average))
    hndl.write('{} - Minimum sequence length:\t{:d}\n'.format(prefix, stats.minimum))
    hndl.write('{} - Maximum sequence length:\t{:d}\n'.format(prefix, stats.maximum))
    hndl.write('{} - N50:\t{:d}\n'.format(prefix, stats.n50))


def write_all(hndl, stats):
    write_block(hndl, stats, 'Statistics for all sequences', 'All')
    hndl.write('\n')


def write_large(hndl, stats, cutoff):
    """
    Write statistics for sequences at or above the cutoff, or a single notice line
    when there were none.
    """
    if stats is None:
        hndl.write('No sequences >= {:d} bp\n'.format(cutoff))
    else:
        write_block(hndl, stats, 'Statistics for large sequences (>={:d} bp)'.format(cutoff), 'Large')


def stats_to_dict(stats):
    if stats is None:
        return None
    d = stats._asdict()
    d['average'] = round(d['average'], 2)
    return d


def write_yaml(hndl, source, all_stats, large_stats=None, cutoff=None):
    """
    Write all statistics as a single YAML document.
    :param hndl: output stream
    :param source: the input file name
    :param all_stats: SequenceStats for all sequences
    :param large_stats: SequenceStats for sequences at or above the cutoff
    :param cutoff: the length cutoff, None when not applied
    """
    report = {
        'source': source,
        'all': stats_to_dict(all_stats),
        'cutoff': cutoff,
        'large': stats_to_dict(large_stats),
    }
    yaml.dump(report, hndl, default_flow_style=False)
