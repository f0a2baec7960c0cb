import logging
import os
import time

from jrandom.java_random import JavaRandom
from jrandom.sequence_writer import SequenceWriter
from jrandom.serialization import draw_round, format_round

logger = logging.getLogger(__name__)


class SequenceRuntime:
    """Seeds one engine and turns its draws into a canonical stream."""

    def __init__(self, run_properties):
        self.run_properties = run_properties
        self.mode = run_properties.get_mode()
        if self.mode not in ("rounds", "ints"):
            raise ValueError(f"Unknown mode: '{self.mode}'")
        self.count = run_properties.get_count()
        if self.count < 0:
            raise ValueError("count must be >= 0")
        self.random = JavaRandom(run_properties.get_seed())
        self.sequence_writer = self._new_sequence_writer()

    def _new_sequence_writer(self):
        sequence_writer = SequenceWriter(self.run_properties.get_buffer_size())
        line_limit = self.run_properties.get_line_limit()
        if line_limit > 0:
            sequence_writer.set_limit(line_limit)
        return sequence_writer

    def reset(self):
        """Reseed so the next run starts the configured sequence from the top."""
        self.random.set_seed(self.run_properties.get_seed())

    def generate_lines(self):
        if self.mode == "ints":
            for _ in range(self.count):
                yield str(self.random.next_int())
            return

        for _ in range(self.count):
            yield from format_round(draw_round(self.random))

    def execute(self):
        output_dir = self.run_properties.get_output_dir()
        os.makedirs(output_dir, exist_ok=True)
        output_file = self.run_properties.get_output_file()

        logger.info("Generating %d %s (seed=%d) -> %s",
                    self.count, self.mode, self.run_properties.get_seed(), output_file)
        self.reset()
        self.sequence_writer = self._new_sequence_writer()
        started = time.perf_counter()
        self.sequence_writer.init_writer(output_file)
        try:
            self.sequence_writer.add_lines(self.generate_lines())
        finally:
            self.sequence_writer.close()
        elapsed = time.perf_counter() - started
        logger.info("Wrote %d lines in %.3fs", self.sequence_writer.written(), elapsed)
        return output_file

    def benchmark(self):
        """Draw the configured sequence without any I/O and return seconds."""
        self.reset()
        started = time.perf_counter()
        if self.mode == "ints":
            for _ in range(self.count):
                self.random.next_int()
        else:
            for _ in range(self.count):
                draw_round(self.random)
        elapsed = time.perf_counter() - started
        logger.info("Drew %d %s without I/O in %.3fs", self.count, self.mode, elapsed)
        return elapsed
