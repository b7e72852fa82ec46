import os
import sys

import afl
from fuzztools import run_all


def main():
    run_all(b'ID3\x04\x00\x40\x00\x00\x00\x06\x00\x00\x00\x06\x01\x00')
    run_all(b'TAG' + b'\x00' * 125)

    buffer = sys.stdin.buffer
    while afl.loop(1000):
        data = buffer.read()
        try:
            run_all(data)
        finally:
            buffer.seek(0)


if __name__ == '__main__':
    main()
    os._exit(0)
