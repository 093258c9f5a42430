"""
Sample sinks: destinations for trajectory samples
"""

import csv
import os
from typing import List, Protocol, TextIO, Union

from oscillator.state import Sample

PathLike = Union[str, "os.PathLike[str]"]

CSV_HEADER = ("time", "position", "velocity")


class SampleSink(Protocol):
    """Anything a trajectory can be recorded into"""

    def write(self, sample: Sample) -> None:
        ...


class MemorySink:
    """Keeps samples in a list"""

    def __init__(self) -> None:
        self.samples: List[Sample] = []

    def write(self, sample: Sample) -> None:
        self.samples.append(sample)


def format_text(sample: Sample) -> str:
    return f"t={sample.time:.2f}: position = {sample.position!r}, velocity = {sample.velocity!r}"


def format_csv_row(sample: Sample) -> List[str]:
    return [f"{sample.time:.2f}", repr(sample.position), repr(sample.velocity)]


class _FileSink:
    """Owns an open text file; use as a context manager"""

    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)
        self._file: TextIO = open(self.path, "w", newline="")

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "_FileSink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class TextFileSink(_FileSink):
    """One `t=..: position = .., velocity = ..` line per sample, no header"""

    def write(self, sample: Sample) -> None:
        self._file.write(format_text(sample) + "\n")


class CsvFileSink(_FileSink):
    """CSV with a `time,position,velocity` header"""

    def __init__(self, path: PathLike) -> None:
        super().__init__(path)
        self._writer = csv.writer(self._file, lineterminator="\n")
        self._writer.writerow(CSV_HEADER)

    def write(self, sample: Sample) -> None:
        self._writer.writerow(format_csv_row(sample))
