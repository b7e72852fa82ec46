import warnings

from id3scan import Id3ScanError
from id3scan.id3 import read_id3, read_id3v1, read_id3v2, ID3Warning


READERS = [read_id3, read_id3v1, read_id3v2]


def run(reader, data):
    try:
        first = reader(data)
    except Id3ScanError:
        return

    # same bytes, same result, regardless of the buffer type
    assert reader(bytearray(data)) == first
    assert reader(memoryview(data)) == first


def run_all(data):
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ID3Warning)
        [run(reader, data) for reader in READERS]


def group_crashes(result_path):
    """Re-checks all errors, and groups them by stack trace
    and error type.
    """

    crash_paths = []
    pattern = os.path.join(result_path, '**', 'crashes', '*')
    for path in glob.glob(pattern):
        if os.path.splitext(path)[-1] == ".txt":
            continue
        crash_paths.append(path)

    if not crash_paths:
        print("No crashes found")
        return

    def norm_exc():
        lines = traceback.format_exc().splitlines()
        if ":" in lines[-1]:
            lines[-1], message = lines[-1].split(":", 1)
        else:
            message = ""
        return "\n".join(lines), message.strip()

    traces = {}
    messages = {}
    for path in crash_paths:
        with open(path, "rb") as h:
            data = h.read()
        try:
            run_all(data)
        except Exception:
            trace, message = norm_exc()
            messages.setdefault(trace, set()).add(message)
            traces.setdefault(trace, []).append(path)

    for trace, paths in traces.items():
        print('-' * 80)
        print("\n".join(paths))
        print()
        print(textwrap.indent(trace, '    '))
        print(messages[trace])

    print("%d crashes with %d traces" % (len(crash_paths), len(traces)))


if __name__ == '__main__':
    import sys
    import glob
    import os
    import traceback
    import textwrap
    group_crashes(sys.argv[1])
