import contextlib
import os
import sys
import termios
import tty


@contextlib.contextmanager
def raw_mode(fd):
    """Put the terminal behind ``fd`` in raw mode for the duration of the block.

    Raw mode turns off line buffering and echo, and CTRL-C arrives as the
    byte 0x03 instead of raising SIGINT. The previous settings are put back
    on exit, including when the block raises.
    """
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def read_key(stream=None):
    """Block until one byte is read from ``stream`` (stdin by default).

    The byte is returned as a one-character string. Bytes outside ASCII
    map to the latin-1 character of the same value.
    """
    if stream is None:
        stream = sys.stdin
    fd = stream.fileno()
    with raw_mode(fd):
        data = os.read(fd, 1)
    if not data:
        raise EOFError('terminal closed')
    return data.decode('latin-1')
