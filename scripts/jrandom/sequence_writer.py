import logging

logger = logging.getLogger(__name__)


class SequenceWriter:
    """Buffered writer for canonical one-value-per-line streams."""

    def __init__(self, size):
        self.size = int(size)
        if self.size <= 0:
            raise ValueError("buffer size must be positive")
        self.index = 0
        self.count = 0
        self.limit = None
        self.lines = [""] * self.size
        self.writer = None

    def set_limit(self, limit):
        self.limit = int(limit)

    def init_writer(self, file_name):
        self.close()
        self.writer = open(file_name, "w", newline="\n", encoding="utf-8")

    def close(self):
        if self.writer is not None:
            self.flush()
            self.writer.close()
            self.writer = None

    def add_line(self, line):
        if self.limit is not None and self.count >= self.limit:
            if self.count == self.limit:
                logger.warning("Output line limit reached: %d", self.limit)
                self.flush()
                self.count += 1
            return

        self.lines[self.index] = line
        self.count += 1
        self.index += 1
        if self.index >= self.size:
            self.flush()

    def add_lines(self, lines):
        for line in lines:
            self.add_line(line)

    def flush(self):
        if self.index == 0:
            return
        if self.writer is None:
            raise RuntimeError("Sequence writer is not initialized")

        self.writer.write("".join(f"{self.lines[i]}\n" for i in range(self.index)))
        self.writer.flush()
        logger.debug("Flushed %d lines", self.index)
        self.index = 0

    def written(self):
        """Number of lines accepted, not counting ones dropped by the limit."""
        if self.limit is not None:
            return min(self.count, self.limit)
        return self.count
