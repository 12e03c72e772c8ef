"""Console progress line for batch conversions.

The CSV converter handles one row at a time; this module keeps the user
informed with a single status line that is redrawn for every row instead of
scrolling the terminal.
"""


class ProgressPrinter:
    """Row counter for a CSV conversion, shown as "Converting rows...12/40".

    The line is redrawn in place after each row and replaced by
    "Converting rows...Done!" once the batch finishes.

    Attributes:
        task_name: Label printed in front of the counter
        total: Number of rows in the batch

    Example:
        >>> progress = ProgressPrinter("Converting rows", 2)
        >>> progress.update(1)
        >>> progress.update(2)
        >>> progress.done()
        Converting rows...Done!
    """

    def __init__(self, task_name: str, total: int):
        """Set up a counter for a batch of known size.

        Args:
            task_name: Label for the batch (e.g., "Converting rows")
            total: Number of rows that will be reported through update()
        """
        self.task_name = task_name
        self.total = total

    def _counter(self, current: int) -> str:
        return f"{self.task_name}...{current}/{self.total}"

    def update(self, current: int) -> None:
        """Redraw the status line for row ``current``.

        Args:
            current: 1-based number of the row just converted
        """
        print(self._counter(current), end='\r', flush=True)

    def done(self) -> None:
        """Finish the status line with "Done!" and move to the next line."""
        finished = f"{self.task_name}...Done!"
        # Pad over whatever is left of the longest counter
        print(finished.ljust(len(self._counter(self.total))))
