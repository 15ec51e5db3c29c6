import pytest


@pytest.fixture
def seq_file(tmp_path):
    """
    Factory writing text to a named file in a temporary directory.
    """
    def _write(text, name='input.fasta'):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """
    Remove any handlers installed by command_line.init_log once a test completes.
    """
    yield
    import logging
    from seqstats import command_line
    root = logging.getLogger('')
    while command_line._log_handlers:
        h = command_line._log_handlers.pop()
        root.removeHandler(h)
        h.close()
